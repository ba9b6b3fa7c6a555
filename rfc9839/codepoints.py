"""
Elementary code point predicates.

Surrogates:
    High  — U+D800..U+DBFF
    Low   — U+DC00..U+DFFF

Noncharacters (66 in total):
    U+FDD0..U+FDEF in Arabic Presentation Forms-A
    The last two code points of each of the 17 planes (U+xFFFE, U+xFFFF)

All functions accept any integer and never raise.
"""

from __future__ import annotations


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

MAX_CODE_POINT = 0x10FFFF
MAX_U32 = 0xFFFFFFFF

PLANE_SIZE = 0x10000
PLANE_COUNT = 17

HIGH_SURROGATES = (0xD800, 0xDBFF)
LOW_SURROGATES = (0xDC00, 0xDFFF)

# Contiguous block in Arabic Presentation Forms-A
NONCHARACTER_BLOCK = (0xFDD0, 0xFDEF)

# U+xFFFE and U+xFFFF share every bit of this mask
PLANE_FINAL_MASK = 0xFFFE


# =============================================================================
# CODE POINT SPACE
# =============================================================================

def is_code_point(c: int) -> bool:
    """Check that the value lies in the code point space U+0000..U+10FFFF."""
    return 0 <= c <= MAX_CODE_POINT


# =============================================================================
# SURROGATES
# =============================================================================

def is_high_surrogate(c: int) -> bool:
    """Check for a UTF-16 leading surrogate."""
    return HIGH_SURROGATES[0] <= c <= HIGH_SURROGATES[1]


def is_low_surrogate(c: int) -> bool:
    """Check for a UTF-16 trailing surrogate."""
    return LOW_SURROGATES[0] <= c <= LOW_SURROGATES[1]


def is_unicode_surrogate(c: int) -> bool:
    """
    Check if the value is either a high or low surrogate.

    Surrogates are UTF-16 code units, not characters, and must never
    appear encoded on their own in a UTF-8 stream.
    """
    return is_high_surrogate(c) or is_low_surrogate(c)


# =============================================================================
# NONCHARACTERS
# =============================================================================

def is_noncharacter(c: int) -> bool:
    """
    Check if the value is one of the 66 permanently reserved noncharacters.

    The plane-final pairs are matched on the low 16 bits, so the
    code point bound has to be checked separately: 0x11FFFE has the
    right low bits but is not a code point.
    """
    if not is_code_point(c):
        return False
    if NONCHARACTER_BLOCK[0] <= c <= NONCHARACTER_BLOCK[1]:
        return True
    return c & PLANE_FINAL_MASK == PLANE_FINAL_MASK


def plane_of(c: int) -> int:
    """
    Return the plane index of a code point.

    Only meaningful for U+0000..U+10FFFF, where it is 0-16; callers check
    is_code_point first.
    """
    return c // PLANE_SIZE
