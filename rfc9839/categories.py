"""
Composite code point categories.

Categories:
    UnicodeScalars      — every code point except surrogates (Unicode 16)
    XmlCharacters       — the XML 1.0 Char production
    UnicodeAssignables  — code points that are not problematic (RFC 9839)

Each category is a flat boolean expression over the elementary
predicates in `codepoints` and `control`. The categories overlap and
are ordered by strictness: every assignable is an XML character, and
every XML character is a scalar.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from . import control
from .codepoints import (
    MAX_CODE_POINT,
    is_code_point,
    is_noncharacter,
    is_unicode_surrogate,
)


# The only noncharacters the XML Char production excludes
XML_EXCLUDED_NONCHARACTERS = (0xFFFE, 0xFFFF)


# =============================================================================
# CATEGORIES
# =============================================================================

class UnicodeScalars:
    """Any Unicode code point except high-surrogate and low-surrogate code points."""

    name = "Unicode Scalars"

    @staticmethod
    def contains(c: int) -> bool:
        return is_code_point(c) and not is_unicode_surrogate(c)


class XmlCharacters:
    """
    Code points that exclude surrogates, legacy C0 controls, and the
    noncharacters U+FFFE and U+FFFF.

    C1 controls and the noncharacters outside the BMP are allowed.
    """

    name = "XML Characters"

    @staticmethod
    def contains(c: int) -> bool:
        return (
            is_code_point(c)
            and not (control.is_c0_control(c) and not control.is_useful_control(c))
            and not is_unicode_surrogate(c)
            and not (XML_EXCLUDED_NONCHARACTERS[0] <= c <= XML_EXCLUDED_NONCHARACTERS[1])
        )


class UnicodeAssignables:
    """
    Code points that are not problematic.

    Excludes surrogates, DEL, every legacy control (C0 and C1), and all
    66 noncharacters.
    """

    name = "Unicode Assignables"

    @staticmethod
    def contains(c: int) -> bool:
        return (
            is_code_point(c)
            and not control.is_delete(c)
            and not (control.is_c0_control(c) and not control.is_useful_control(c))
            and not control.is_c1_control(c)
            and not is_unicode_surrogate(c)
            and not is_noncharacter(c)
        )


# =============================================================================
# REGISTRY
# =============================================================================

class Category(Enum):
    """Named categories, as accepted on the command line."""
    UNICODE_SCALARS = "unicode-scalars"
    XML_CHARACTERS = "xml-characters"
    UNICODE_ASSIGNABLES = "unicode-assignables"

    @property
    def members(self) -> type:
        """The class implementing this category."""
        return _CATEGORY_CLASSES[self]

    @property
    def title(self) -> str:
        return self.members.name

    def contains(self, c: int) -> bool:
        return self.members.contains(c)


_CATEGORY_CLASSES = {
    Category.UNICODE_SCALARS: UnicodeScalars,
    Category.XML_CHARACTERS: XmlCharacters,
    Category.UNICODE_ASSIGNABLES: UnicodeAssignables,
}


# =============================================================================
# RANGE ENUMERATION
# =============================================================================

def category_ranges(
    predicate: Callable[[int], bool],
    start: int = 0,
    stop: int = MAX_CODE_POINT,
) -> list[tuple[int, int]]:
    """
    Collect the maximal inclusive runs of values accepted by a predicate.

    Scans start..stop (inclusive) one value at a time; the full code
    point space takes on the order of a second.

    Returns:
        List of (first, last) tuples in ascending order
    """
    ranges: list[tuple[int, int]] = []
    run_start: Optional[int] = None

    for c in range(start, stop + 1):
        if predicate(c):
            if run_start is None:
                run_start = c
        elif run_start is not None:
            ranges.append((run_start, c - 1))
            run_start = None

    if run_start is not None:
        ranges.append((run_start, stop))

    return ranges
