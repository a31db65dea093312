"""
String helpers for slugs, truncation and capitalization.

See individual module documentation for detailed information.
"""
from . import strings
from . import patterns
from . import lookups

__all__ = [
    'strings',
    'patterns',
    'lookups'
]
