# verse/analysis/text.py

import re
from typing import List, Optional

# One trailing punctuation mark is dropped before the end word is taken
_TRAILING_PUNCTUATION = re.compile(r'[.,!?;:]$')


def split_lines(text: Optional[str]) -> List[str]:
    """
    Split raw poem text into its non-blank lines.

    Only newline characters separate lines, so form feeds and Unicode line
    separators stay inside their line. Every line is trimmed of surrounding
    whitespace, which also removes the carriage return of Windows line
    endings, and lines that are empty after trimming are dropped. Order is preserved.

    Args:
        text: Raw poem text, possibly None

    Returns:
        Ordered list of trimmed, non-empty lines
    """
    if not text:
        return []
    return [line.strip() for line in text.split('\n') if line.strip()]


def get_last_word(line: str) -> str:
    """Return the lower-cased final word of a line, one trailing punctuation mark removed."""
    words = _TRAILING_PUNCTUATION.sub('', line.strip()).split()
    if not words:
        return ''
    return words[-1].lower()


def first_letters(lines: List[str]) -> str:
    """Concatenate the lower-cased first character of every line."""
    return ''.join(line.strip()[:1].lower() for line in lines)
