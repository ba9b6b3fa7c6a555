"""
Control character predicates.

C0 controls are the ASCII range U+0000..U+001F, C1 controls the
extended range U+0080..U+009F. Tab, line feed and carriage return are
"useful" controls that text formats generally permit; every other C0
or C1 control is a "legacy" control.
"""

from __future__ import annotations


C0_CONTROLS = (0x00, 0x1F)
C1_CONTROLS = (0x80, 0x9F)

HORIZONTAL_TAB = 0x09
NEWLINE = 0x0A
CARRIAGE_RETURN = 0x0D
DELETE = 0x7F


def is_newline(c: int) -> bool:
    """Checks for '\\n'."""
    return c == NEWLINE


def is_carriage_return(c: int) -> bool:
    """Checks for '\\r'."""
    return c == CARRIAGE_RETURN


def is_horizontal_tab(c: int) -> bool:
    """Checks for '\\t'."""
    return c == HORIZONTAL_TAB


def is_useful_control(c: int) -> bool:
    """Checks for '\\n', '\\r' or '\\t'."""
    return is_newline(c) or is_carriage_return(c) or is_horizontal_tab(c)


def is_c0_control(c: int) -> bool:
    """Checks if the value falls into the ASCII control character range."""
    return C0_CONTROLS[0] <= c <= C0_CONTROLS[1]


def is_c1_control(c: int) -> bool:
    """Checks if the value falls into the extended ASCII control range."""
    return C1_CONTROLS[0] <= c <= C1_CONTROLS[1]


def is_legacy_control(c: int) -> bool:
    """
    Checks for a C0 or C1 control that is not one of the useful controls.

    Only the C0 range overlaps the useful controls today, but the
    exclusion is applied to the union of both ranges.
    """
    return (is_c0_control(c) or is_c1_control(c)) and not is_useful_control(c)


def is_delete(c: int) -> bool:
    """Checks for DEL (U+007F), which sits between C0 and C1."""
    return c == DELETE
