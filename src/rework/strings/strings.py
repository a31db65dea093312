"""Text transformation helpers.

All functions in this module are pure and accept `None` in place of a string.
Absent input is kept distinct from empty input: functions that return text
return `None` for `None`, except `slugify`, which always returns a string.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'slugify',
    'truncate',
    'truncate_at_word',
    'capitalize_word',
    'capitalize_sentence',
    # Helpers
    'squish',
    'is_blank'
]

import unicodedata
from typing import Optional
from rework.lookups import transliteration_table
from rework.patterns import (
    ELLIPSIS,
    ELLIPSIS_WIDTH,
    WHITESPACE_PATTERN,
    NON_SLUG_PATTERN,
    WORD_BOUNDARY_PATTERN
)

def squish(text: str) -> str:
    """
    Strip leading and trailing whitespace and collapse internal runs to one space.

    Example:
        >>> squish('  luke   warren ')
        'luke warren'
    """
    return WHITESPACE_PATTERN.sub(' ', text).strip()

def is_blank(text: Optional[str]) -> bool:
    return text is None or text.strip() == ''

def _to_ascii(text: str) -> str:
    transliterated = text.translate(transliteration_table())
    decomposed = unicodedata.normalize('NFKD', transliterated)
    return decomposed.encode('ascii', 'ignore').decode('ascii')

def slugify(text: Optional[str]) -> str:
    """
    Convert text to a lowercase, hyphen-separated identifier.

    Operations performed:
        1. Replace accented and other non-ASCII letters with ASCII equivalents
        2. Lowercase
        3. Remove punctuation
        4. Replace each run of whitespace with a hyphen
        5. Strip leading and trailing hyphens

    The result only contains lowercase ASCII letters, digits and hyphens, and
    slugifying a slug returns it unchanged.

    Args:
        text: Any text, or None

    Returns:
        Slug, or an empty string if input is None or empty

    Example:
        >>> slugify('luke is awesome')
        'luke-is-awesome'
        >>> slugify('lukè is àwesome')
        'luke-is-awesome'
        >>> slugify('luke,is,awesome')
        'lukeisawesome'
        >>> slugify(None)
        ''
    """
    if not text:
        return ''
    slug = _to_ascii(text).lower()
    slug = NON_SLUG_PATTERN.sub('', slug)
    slug = WHITESPACE_PATTERN.sub('-', slug)
    return slug.strip('-')

def truncate(text: Optional[str], max_length: int) -> Optional[str]:
    """
    Cut text to at most `max_length` characters.

    Args:
        text: Any text, or None
        max_length: Maximum length of the result. Negative values are treated as 0.

    Returns:
        Input unchanged if it fits, else its first `max_length` characters.
        None if input is None.

    Example:
        >>> truncate('Some long string', 6)
        'Some l'
        >>> truncate('Some long string', 16)
        'Some long string'
    """
    if text is None:
        return None
    max_length = max(max_length, 0)
    if len(text) <= max_length:
        return text
    return text[:max_length]

def truncate_at_word(text: Optional[str], max_length: int) -> Optional[str]:
    """
    Shorten text to whole words and append an ellipsis marker.

    The prefix kept is the longest run of whole words that leaves room for
    the marker, which counts as one character since it renders as '…'. A
    single word that does not fit is dropped entirely rather than cut.

    Args:
        text: Any text, or None
        max_length: Maximum rendered length of the result. Negative values are treated as 0.

    Returns:
        Input unchanged if it fits; otherwise whole words followed by
        `rework.patterns.ELLIPSIS`, or an empty string if no word fits.
        None if input is None.

    Example:
        >>> truncate_at_word('some string', 11)
        'some string'
        >>> truncate_at_word('some string', 9)
        'some&hellip;'
        >>> truncate_at_word('somestring', 9)
        ''
    """
    if text is None:
        return None
    max_length = max(max_length, 0)
    if len(text) <= max_length:
        return text

    budget = max_length - ELLIPSIS_WIDTH
    # A boundary at index `budget` still leaves a prefix of `budget` characters
    head = text[:max(budget + 1, 0)]
    boundaries = [m.start() for m in WORD_BOUNDARY_PATTERN.finditer(head)]
    if not boundaries:
        return ''

    prefix = text[:boundaries[-1]].rstrip()
    if not prefix:
        return ''
    return prefix + ELLIPSIS

def capitalize_word(text: Optional[str]) -> Optional[str]:
    """
    Capitalize the first letter of a word and lowercase the rest.

    Surrounding whitespace is stripped. Only the very first character is
    uppercased, so trailing words stay lowercase. Text whose first
    non-whitespace character is not a letter is returned verbatim, as is
    None, empty or whitespace-only text.

    Example:
        >>> capitalize_word('LUKE')
        'Luke'
        >>> capitalize_word('    luke    ')
        'Luke'
        >>> capitalize_word('luke warren')
        'Luke warren'
        >>> capitalize_word('-luke')
        '-luke'
    """
    if is_blank(text):
        return text
    word = text.strip()
    if not word[0].isalpha():
        return text
    word = word.lower()
    return word[0].upper() + word[1:]

def capitalize_sentence(text: Optional[str]) -> Optional[str]:
    """
    Capitalize every word of a sentence.

    Words are split on whitespace, capitalized with `capitalize_word` and
    joined with single spaces, so surrounding whitespace is dropped and
    internal runs of whitespace are squished. None, empty and
    whitespace-only text is returned verbatim.

    Example:
        >>> capitalize_sentence('LUKE WARREN IS COOL')
        'Luke Warren Is Cool'
        >>> capitalize_sentence('   luke   warren ')
        'Luke Warren'
    """
    if is_blank(text):
        return text
    return ' '.join(map(capitalize_word, squish(text).split(' ')))
