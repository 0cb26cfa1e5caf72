# verse/models/poem.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any

from verse.analysis.text import split_lines
from .form import PoemForm
from .quality import QualityAssessment
from .validation import StructureValidationResult


@dataclass
class Poem:
    """A poem as produced by the text-generation service or pasted by a user"""

    verses: List[str]
    form: Optional[PoemForm] = None
    topic: Optional[str] = None
    title: Optional[str] = None
    llm_provider: Optional[str] = None
    model_name: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    structure_validation: Optional[StructureValidationResult] = None
    quality: Optional[QualityAssessment] = None

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "Poem":
        """Build a poem from raw text, one verse per non-blank line."""
        return cls(verses=split_lines(text), **kwargs)

    @property
    def text(self) -> str:
        return "\n".join(self.verses)

    @property
    def line_count(self) -> int:
        return len(self.verses)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "verses": self.verses,
            "form": self.form.value if self.form else None,
            "topic": self.topic,
            "title": self.title,
            "llm_provider": self.llm_provider,
            "model_name": self.model_name,
            "created_at": self.created_at.isoformat(),
            "structure_validation": self.structure_validation.to_dict() if self.structure_validation else None,
            "quality": self.quality.to_dict() if self.quality else None
        }

    def __str__(self) -> str:
        return self.text
