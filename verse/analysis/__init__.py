# verse/analysis/__init__.py

from .text import split_lines, get_last_word, first_letters
from .syllables import count_syllables, count_line_syllables
from .rhyme import clean_word, sounds_similar, lines_rhyme

__all__ = [
    'split_lines',
    'get_last_word',
    'first_letters',
    'count_syllables',
    'count_line_syllables',
    'clean_word',
    'sounds_similar',
    'lines_rhyme'
]
