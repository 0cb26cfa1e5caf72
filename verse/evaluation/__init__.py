# verse/evaluation/__init__.py

from .form_validator import FormValidator, validate_poem, EMPTY_POEM_MESSAGE
from .structure_review import StructureReviewer, StructureReviewError
from .poem_evaluation import PoemEvaluator, EvaluationType

__all__ = [
    'FormValidator',
    'validate_poem',
    'EMPTY_POEM_MESSAGE',
    'StructureReviewer',
    'StructureReviewError',
    'PoemEvaluator',
    'EvaluationType'
]
