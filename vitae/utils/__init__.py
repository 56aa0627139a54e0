"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup with provenance
- Date formatting
- Description markup parsing
"""

from vitae.utils.markup import DescriptionLine, TextSegment, parse_description, strip_control_characters
from vitae.utils.timestamp import format_long_date, format_month, now, today

__all__ = [
    "DescriptionLine",
    "TextSegment",
    "parse_description",
    "strip_control_characters",
    "format_long_date",
    "format_month",
    "now",
    "today",
]
