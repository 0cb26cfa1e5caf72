# verse/__init__.py

from .evaluation.form_validator import validate_poem
from .models.form import PoemForm

__version__ = "0.1.0"

__all__ = ['validate_poem', 'PoemForm', '__version__']
