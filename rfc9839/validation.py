"""
Validation and Gating for RFC 9839 categories.

The category predicates answer yes or no. This module adds the
explanation: which rule excluded a code point from a category.

Rejection reasons:
    OUT_OF_RANGE      — above U+10FFFF (or negative)
    SURROGATE         — U+D800..U+DFFF
    LEGACY_CONTROL    — C0 control other than tab, newline, carriage return
    C1_CONTROL        — U+0080..U+009F
    DELETE            — U+007F
    NONCHARACTER      — any of the 66 noncharacters
    BMP_NONCHARACTER  — U+FFFE or U+FFFF (XML's narrower exclusion)

Gates:
    check()    — non-raising, returns a CheckResult
    require()  — raises CodePointRejectionError
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from . import control
from .categories import XML_EXCLUDED_NONCHARACTERS, Category
from .codepoints import (
    MAX_U32,
    is_code_point,
    is_noncharacter,
    is_unicode_surrogate,
)


# =============================================================================
# REJECTION SYSTEM
# =============================================================================

class RejectionReason(Enum):
    """Rules that exclude a value from a category."""
    OUT_OF_RANGE = "out_of_range"
    SURROGATE = "surrogate"
    LEGACY_CONTROL = "legacy_control"
    C1_CONTROL = "c1_control"
    DELETE = "delete"
    NONCHARACTER = "noncharacter"
    BMP_NONCHARACTER = "bmp_noncharacter"


class CodePointRejectionError(ValueError):
    """Raised when a code point is not a member of the required category."""

    def __init__(
        self,
        category: Category,
        code_point: int,
        reasons: tuple[RejectionReason, ...],
    ):
        self.category = category
        self.code_point = code_point
        self.reasons = reasons
        rules = ", ".join(reason.value for reason in reasons)
        super().__init__(
            f"{format_code_point(code_point)} is not in {category.title} [{rules}]"
        )


def rejection_reasons(c: int, category: Category) -> tuple[RejectionReason, ...]:
    """
    List every rule that excludes c from the category.

    The tuple is empty exactly when category.contains(c) is true.
    """
    if not is_code_point(c):
        return (RejectionReason.OUT_OF_RANGE,)

    reasons = []
    if is_unicode_surrogate(c):
        reasons.append(RejectionReason.SURROGATE)

    if category is Category.UNICODE_SCALARS:
        return tuple(reasons)

    if control.is_c0_control(c) and not control.is_useful_control(c):
        reasons.append(RejectionReason.LEGACY_CONTROL)

    if category is Category.XML_CHARACTERS:
        if XML_EXCLUDED_NONCHARACTERS[0] <= c <= XML_EXCLUDED_NONCHARACTERS[1]:
            reasons.append(RejectionReason.BMP_NONCHARACTER)
        return tuple(reasons)

    if control.is_c1_control(c):
        reasons.append(RejectionReason.C1_CONTROL)
    if control.is_delete(c):
        reasons.append(RejectionReason.DELETE)
    if is_noncharacter(c):
        reasons.append(RejectionReason.NONCHARACTER)
    return tuple(reasons)


# =============================================================================
# GATING
# =============================================================================

@dataclass(frozen=True)
class CheckResult:
    """Result of checking one code point against one category."""
    code_point: int
    category: Category
    reasons: tuple[RejectionReason, ...] = ()

    @property
    def accepted(self) -> bool:
        return not self.reasons


def check(c: int, category: Category = Category.UNICODE_ASSIGNABLES) -> CheckResult:
    """Binary accept/reject with the reasons attached. Never raises."""
    return CheckResult(
        code_point=c,
        category=category,
        reasons=rejection_reasons(c, category),
    )


def require(c: int, category: Category = Category.UNICODE_ASSIGNABLES) -> int:
    """
    Return c unchanged if it belongs to the category.

    Raises:
        CodePointRejectionError: If c is not a member
    """
    result = check(c, category)
    if not result.accepted:
        raise CodePointRejectionError(category, c, result.reasons)
    return c


# =============================================================================
# FORMATTING
# =============================================================================

_CODE_POINT_PATTERN = re.compile(
    r"^(?:[uU]\+(?P<uhex>[0-9a-fA-F]+)"
    r"|0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|(?P<dec>[0-9]+))$"
)


def format_code_point(c: int) -> str:
    """Format as U+XXXX, zero-padded to at least four hex digits."""
    if c < 0:
        return f"-U+{-c:04X}"
    return f"U+{c:04X}"


def parse_code_point(text: str) -> int:
    """
    Parse 'U+FFFE', '0xFFFE' or '65534'.

    Raises:
        ValueError: If the text is not one of those forms or the value
            does not fit in 32 unsigned bits
    """
    match = _CODE_POINT_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"invalid code point: {text!r}")

    if match.group("uhex") is not None:
        value = int(match.group("uhex"), 16)
    elif match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    else:
        value = int(match.group("dec"), 10)

    if value > MAX_U32:
        raise ValueError(f"code point out of 32-bit range: {text!r}")
    return value
