"""Property tests: every predicate is a pure, total function.

Uses hypothesis to draw values from the full unsigned 32-bit domain and
verify that no predicate raises, returns a non-bool, depends on call
history, or accepts anything above U+10FFFF.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from rfc9839 import control
from rfc9839.categories import (
    Category,
    UnicodeAssignables,
    UnicodeScalars,
    XmlCharacters,
)
from rfc9839.codepoints import (
    MAX_CODE_POINT,
    MAX_U32,
    is_code_point,
    is_high_surrogate,
    is_low_surrogate,
    is_noncharacter,
    is_unicode_surrogate,
)
from rfc9839.validation import rejection_reasons


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

u32 = st.integers(min_value=0, max_value=MAX_U32)
code_points = st.integers(min_value=0, max_value=MAX_CODE_POINT)
beyond_code_points = st.integers(min_value=MAX_CODE_POINT + 1, max_value=MAX_U32)

ALL_PREDICATES = [
    is_code_point,
    is_unicode_surrogate,
    is_high_surrogate,
    is_low_surrogate,
    is_noncharacter,
    control.is_newline,
    control.is_carriage_return,
    control.is_horizontal_tab,
    control.is_useful_control,
    control.is_c0_control,
    control.is_c1_control,
    control.is_legacy_control,
    control.is_delete,
    UnicodeScalars.contains,
    XmlCharacters.contains,
    UnicodeAssignables.contains,
]

CATEGORY_PREDICATES = [
    UnicodeScalars.contains,
    XmlCharacters.contains,
    UnicodeAssignables.contains,
]


# ---------------------------------------------------------------------------
# Totality and purity
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("predicate", ALL_PREDICATES, ids=lambda p: p.__qualname__)
@given(c=u32)
@settings(max_examples=300)
def test_total_and_idempotent(predicate, c):
    first = predicate(c)
    assert isinstance(first, bool)
    assert predicate(c) is first


@given(values=st.lists(u32, min_size=1, max_size=20))
@settings(max_examples=100)
def test_no_call_history(values):
    """Results do not depend on what was classified before."""
    expected = [UnicodeAssignables.contains(c) for c in values]
    for c in reversed(values):
        XmlCharacters.contains(c)
        is_noncharacter(c)
    assert [UnicodeAssignables.contains(c) for c in values] == expected


# ---------------------------------------------------------------------------
# Above the code point space
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("predicate", CATEGORY_PREDICATES + [is_noncharacter], ids=lambda p: p.__qualname__)
@given(c=beyond_code_points)
@settings(max_examples=300)
def test_nothing_above_max_code_point(predicate, c):
    assert predicate(c) is False


# ---------------------------------------------------------------------------
# Structural relations
# ---------------------------------------------------------------------------

@given(c=code_points)
@settings(max_examples=500)
def test_category_nesting(c):
    if UnicodeAssignables.contains(c):
        assert XmlCharacters.contains(c)
    if XmlCharacters.contains(c):
        assert UnicodeScalars.contains(c)


@given(c=code_points)
@settings(max_examples=500)
def test_scalars_complement_surrogates(c):
    assert UnicodeScalars.contains(c) is not is_unicode_surrogate(c)


@given(plane=st.integers(min_value=0, max_value=16), low=st.integers(min_value=0, max_value=0xFFFF))
@settings(max_examples=500)
def test_plane_final_pattern(plane, low):
    """Noncharacter status at the top of a plane does not depend on the plane."""
    c = plane * 0x10000 + low
    if low >= 0xFFFE:
        assert is_noncharacter(c)
        assert not UnicodeAssignables.contains(c)
    elif not (0xFDD0 <= c <= 0xFDEF):
        assert not is_noncharacter(c)


@pytest.mark.parametrize("category", list(Category))
@given(c=u32)
@settings(max_examples=300)
def test_reasons_agree_with_membership(category, c):
    assert (rejection_reasons(c, category) == ()) == category.contains(c)
