"""
String manipulation utility functions for text processing.

This module provides functions for creating identifiers, shortening text
and normalizing the case of words and sentences.
"""

from .strings import __all__
from .strings import *
