# verse/analysis/rhyme.py

import re

from .text import get_last_word

_NON_ALPHA = re.compile(r'[^a-z]')

# Longest suffix compared when deciding whether two end words rhyme
RHYME_SUFFIX_LENGTH = 3
MIN_RHYME_WORD_LENGTH = 2


def clean_word(word: str) -> str:
    """Lower-case a word and drop everything that is not a letter."""
    return _NON_ALPHA.sub('', (word or '').lower())


def sounds_similar(word1: str, word2: str) -> bool:
    """
    Judge whether two end words rhyme by their spelling.

    Identical words rhyme. Otherwise the last k letters are compared, where k
    is 3 or the length of the shorter word, whichever is smaller. Words shorter
    than two letters after cleaning never rhyme. This is an orthographic proxy:
    "night"/"light" rhyme, so do unrelated words sharing a suffix like "-ing",
    while "cat"/"hat" and "day"/"away" do not.

    Args:
        word1: First end word
        word2: Second end word

    Returns:
        True if the words are judged to rhyme
    """
    clean1 = clean_word(word1)
    clean2 = clean_word(word2)

    if len(clean1) < MIN_RHYME_WORD_LENGTH or len(clean2) < MIN_RHYME_WORD_LENGTH:
        return False

    if clean1 == clean2:
        return True

    length = min(RHYME_SUFFIX_LENGTH, len(clean1), len(clean2))
    return clean1[-length:] == clean2[-length:]


def lines_rhyme(line1: str, line2: str) -> bool:
    """Compare the end words of two lines with sounds_similar."""
    return sounds_similar(get_last_word(line1), get_last_word(line2))
