"""
Tests for the control character predicates.

These tests verify, exhaustively over U+0000..U+00FF, that:
1. The useful controls are exactly tab, newline and carriage return
2. Legacy controls are (C0 ∪ C1) minus the useful controls
"""

import pytest

from rfc9839 import control


LATIN1 = range(0x100)


class TestSingletons:
    """Tab, newline and carriage return each match one value."""

    @pytest.mark.parametrize("predicate,value", [
        (control.is_horizontal_tab, 0x09),
        (control.is_newline, 0x0A),
        (control.is_carriage_return, 0x0D),
        (control.is_delete, 0x7F),
    ])
    def test_matches_only_its_value(self, predicate, value):
        for c in LATIN1:
            assert predicate(c) == (c == value), f"{c:#x}"

    def test_matches_python_escapes(self):
        assert control.is_horizontal_tab(ord("\t"))
        assert control.is_newline(ord("\n"))
        assert control.is_carriage_return(ord("\r"))


class TestControlRanges:
    """C0, C1, useful and legacy controls over Latin-1."""

    def test_c0(self):
        for c in LATIN1:
            assert control.is_c0_control(c) == (c <= 0x1F), f"{c:#x}"

    def test_c1(self):
        for c in LATIN1:
            assert control.is_c1_control(c) == (0x80 <= c <= 0x9F), f"{c:#x}"

    def test_useful(self):
        for c in LATIN1:
            assert control.is_useful_control(c) == (c in (0x9, 0xA, 0xD)), f"{c:#x}"

    def test_legacy_is_union_minus_useful(self):
        for c in LATIN1:
            expected = (
                (control.is_c0_control(c) or control.is_c1_control(c))
                and not control.is_useful_control(c)
            )
            assert control.is_legacy_control(c) == expected, f"{c:#x}"

    def test_legacy_count(self):
        # 32 C0 + 32 C1 - 3 useful
        assert sum(control.is_legacy_control(c) for c in LATIN1) == 61

    def test_delete_is_not_legacy(self):
        assert not control.is_legacy_control(0x7F)

    @pytest.mark.parametrize("c", [0x100, 0x2028, 0x10FFFF, 0x110000, 0xFFFFFFFF, -1])
    def test_nothing_outside_latin1(self, c):
        assert not control.is_c0_control(c)
        assert not control.is_c1_control(c)
        assert not control.is_useful_control(c)
        assert not control.is_legacy_control(c)
