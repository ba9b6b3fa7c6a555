# RFC 9839 code point classifier
# Core predicates for problematic Unicode code points

"""
Classify integer code points into the RFC 9839 subsets
(Unicode Scalars, Unicode Assignables) and the XML 1.0 Char production.

Every predicate is a pure, total function from an integer to a bool.
Values above U+10FFFF are never members of any category.
"""

from .codepoints import (
    MAX_CODE_POINT,
    MAX_U32,
    is_code_point,
    is_high_surrogate,
    is_low_surrogate,
    is_noncharacter,
    is_unicode_surrogate,
)
from .categories import (
    Category,
    UnicodeAssignables,
    UnicodeScalars,
    XmlCharacters,
    category_ranges,
)
from . import control

__version__ = "0.1.0"

__all__ = [
    "MAX_CODE_POINT",
    "MAX_U32",
    "is_code_point",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_noncharacter",
    "is_unicode_surrogate",
    "control",
    "Category",
    "UnicodeAssignables",
    "UnicodeScalars",
    "XmlCharacters",
    "category_ranges",
]
