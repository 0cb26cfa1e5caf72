# verse/models/__init__.py

from .form import PoemForm, FormSpec, FORM_SPECS, get_form_spec
from .validation import StructureValidationResult, StructureReview
from .quality import QualityAssessment
from .poem import Poem

__all__ = [
    'PoemForm',
    'FormSpec',
    'FORM_SPECS',
    'get_form_spec',
    'StructureValidationResult',
    'StructureReview',
    'QualityAssessment',
    'Poem'
]
