"""Regex patterns and constants shared by the string helpers.
"""

__docformat__ = 'google'

import re

ELLIPSIS: str = "&hellip;"
"""Marker appended to text shortened by `rework.strings.truncate_at_word`.

The HTML entity renders as a single character, so it is budgeted as one
character when choosing where to cut."""

ELLIPSIS_WIDTH: int = 1
"""@private"""

WHITESPACE_PATTERN: re.Pattern = re.compile(r"\s+")
"""Matches runs of whitespace.

Used in `rework.strings.squish` and `rework.strings.slugify`."""

NON_SLUG_PATTERN: re.Pattern = re.compile(r"[^a-z0-9\s-]")
"""Matches characters that never appear in a slug.

Punctuation is removed rather than replaced, so words joined only by
punctuation collapse together (e.g. 'luke,is,awesome' becomes 'lukeisawesome').
Whitespace and hyphens survive so they can become separators.

Used in `rework.strings.slugify`."""

WORD_BOUNDARY_PATTERN: re.Pattern = re.compile(r"\s")
"""Matches a whitespace character that can end a truncated prefix.

Used in `rework.strings.truncate_at_word`."""
