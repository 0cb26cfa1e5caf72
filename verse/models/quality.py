# verse/models/quality.py

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from .validation import StructureValidationResult, StructureReview


@dataclass
class QualityAssessment:
    """Centralized validation issues container"""

    structure_issues: List[str]
    review_issues: List[str]
    is_acceptable: bool
    recommendations: List[str] = field(default_factory=list)

    # Detailed validation results
    structure_validation: Optional[StructureValidationResult] = None
    structure_review: Optional[StructureReview] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "structure_issues": self.structure_issues,
            "review_issues": self.review_issues,
            "is_acceptable": self.is_acceptable,
            "recommendations": self.recommendations,
            "structure_validation": self.structure_validation.to_dict() if self.structure_validation else None,
            "structure_review": self.structure_review.to_dict() if self.structure_review else None
        }
