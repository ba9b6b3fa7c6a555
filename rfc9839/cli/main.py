"""
RFC 9839 CLI — Code Point Classification from the Shell.

Commands:
    rfc9839 check <cp>...       — Category membership table
    rfc9839 explain <cp>        — Elementary predicates and rejection reasons
    rfc9839 ranges <category>   — Maximal accepted ranges of a category

Code points are given as U+XXXX, 0xXXXX or decimal. Any value that fits
in 32 unsigned bits is accepted; values above U+10FFFF are reported as
members of no category.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .. import control
from ..categories import Category, category_ranges
from ..codepoints import (
    is_code_point,
    is_high_surrogate,
    is_low_surrogate,
    is_noncharacter,
    plane_of,
)
from ..validation import check, format_code_point, parse_code_point


logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = Category.UNICODE_ASSIGNABLES

ELEMENTARY_PREDICATES = [
    ("high surrogate", is_high_surrogate),
    ("low surrogate", is_low_surrogate),
    ("noncharacter", is_noncharacter),
    ("horizontal tab", control.is_horizontal_tab),
    ("newline", control.is_newline),
    ("carriage return", control.is_carriage_return),
    ("useful control", control.is_useful_control),
    ("C0 control", control.is_c0_control),
    ("C1 control", control.is_c1_control),
    ("legacy control", control.is_legacy_control),
    ("delete", control.is_delete),
]


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_flag(value: bool) -> str:
    return "yes" if value else "no"


def format_check_row(c: int, category: Optional[Category] = None) -> str:
    """Format membership of a single code point for display."""
    label = format_code_point(c)

    if category is not None:
        result = check(c, category)
        if result.accepted:
            return f"{label:<10} | {category.title}: accepted"
        rules = ", ".join(reason.value for reason in result.reasons)
        return f"{label:<10} | {category.title}: rejected [{rules}]"

    columns = [
        f"{cat.title}: {format_flag(cat.contains(c))}"
        for cat in Category
    ]
    return f"{label:<10} | " + " | ".join(columns)


def format_explanation(c: int) -> str:
    """Format every elementary predicate and per-category reasons."""
    lines = []

    lines.append(f"Classification for: {format_code_point(c)}")
    lines.append("=" * 50)

    lines.append("")
    if is_code_point(c):
        lines.append(f"Plane: {plane_of(c)}")
    else:
        lines.append("Plane: none (outside the code point space)")

    lines.append("")
    lines.append("PREDICATES:")
    for name, predicate in ELEMENTARY_PREDICATES:
        lines.append(f"  • {name:<16} {format_flag(predicate(c))}")

    lines.append("")
    lines.append("CATEGORIES:")
    for category in Category:
        result = check(c, category)
        if result.accepted:
            lines.append(f"  • {category.title}: accepted")
        else:
            lines.append(f"  • {category.title}: rejected")
            for reason in result.reasons:
                lines.append(f"    - {reason.value}")

    return "\n".join(lines)


def format_range(first: int, last: int) -> str:
    return f"{format_code_point(first)}..{format_code_point(last)}"


# =============================================================================
# ARGUMENT TYPES
# =============================================================================

def code_point_arg(text: str) -> int:
    """argparse type for code point arguments."""
    try:
        return parse_code_point(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def category_arg(text: str) -> Category:
    """argparse type for category names."""
    try:
        return Category(text.lower())
    except ValueError:
        choices = ", ".join(cat.value for cat in Category)
        raise argparse.ArgumentTypeError(
            f"unknown category {text!r} (choose from {choices})"
        )


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_check(args: argparse.Namespace) -> int:
    """Show category membership; fail if any code point is rejected."""
    category = args.category or DEFAULT_CATEGORY
    rejected = 0

    for c in args.code_points:
        print(format_check_row(c, args.category))
        if not category.contains(c):
            rejected += 1

    logger.debug(
        "checked %d code point(s) against %s, %d rejected",
        len(args.code_points), category.value, rejected,
    )
    return 1 if rejected else 0


def cmd_explain(args: argparse.Namespace) -> int:
    """Show the full classification of one code point."""
    print(format_explanation(args.code_point))
    return 0


def cmd_ranges(args: argparse.Namespace) -> int:
    """Print the accepted ranges of a category."""
    logger.debug("scanning code point space for %s", args.category.value)
    ranges = category_ranges(args.category.contains)

    for first, last in ranges:
        print(format_range(first, last))

    logger.debug("%s has %d range(s)", args.category.value, len(ranges))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rfc9839",
        description="Classify code points into RFC 9839 and XML 1.0 categories",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Show category membership for code points",
    )
    check_parser.add_argument(
        "code_points",
        nargs="+",
        type=code_point_arg,
        metavar="CODEPOINT",
        help="Code point as U+XXXX, 0xXXXX or decimal",
    )
    check_parser.add_argument(
        "-c", "--category",
        type=category_arg,
        default=None,
        help="Only report this category (default: all, exit status "
             "follows unicode-assignables)",
    )
    check_parser.set_defaults(func=cmd_check)

    # Explain command
    explain_parser = subparsers.add_parser(
        "explain",
        help="Show elementary predicates and rejection reasons",
    )
    explain_parser.add_argument(
        "code_point",
        type=code_point_arg,
        metavar="CODEPOINT",
        help="Code point as U+XXXX, 0xXXXX or decimal",
    )
    explain_parser.set_defaults(func=cmd_explain)

    # Ranges command
    ranges_parser = subparsers.add_parser(
        "ranges",
        help="List the accepted ranges of a category",
    )
    ranges_parser.add_argument(
        "category",
        type=category_arg,
        help="One of: " + ", ".join(cat.value for cat in Category),
    )
    ranges_parser.set_defaults(func=cmd_ranges)

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
