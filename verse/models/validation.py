# verse/models/validation.py

from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class StructureValidationResult:
    """Result of checking a poem against the structural rules of its form"""

    form: Optional[str]
    is_valid: bool
    line_count: int
    validation_summary: str
    error_details: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "form": self.form,
            "is_valid": self.is_valid,
            "line_count": self.line_count,
            "validation_summary": self.validation_summary,
            "error_details": self.error_details
        }


@dataclass
class StructureReview:
    """Feedback returned by the language model on a poem's structure"""

    is_valid: bool
    feedback: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "feedback": self.feedback
        }
