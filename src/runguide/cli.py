#!/usr/bin/env python
"""Render a guide document to Markdown.

Usage:
    runguide guide.json                        # Print the walkthrough
    runguide guide.json -o walkthrough.md      # Write it to a file
    runguide guide.yaml --ignore-rule 1 2      # Render with rules 1 and 2 ignored
    runguide guide.json --collapse --hide-id   # Merge same-area rows, drop Id column
    runguide guide.json --list-rules           # Show the rules table
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from runguide.core import FormatOptions, Guide
from runguide.exceptions import GuideParseError, GuideValidationError
from runguide.parsing import load_guide

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runguide",
        description="Render a game-run guide document to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "guide",
        help="Guide file (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Write the document to this file instead of stdout",
    )
    parser.add_argument(
        "--collapse",
        action="store_true",
        help="Merge consecutive instructions sharing an area into one row",
    )
    parser.add_argument(
        "--hide-comments",
        action="store_true",
        help="Do not render instruction comments",
    )
    parser.add_argument(
        "--hide-id",
        action="store_true",
        help="Drop the Id column",
    )
    parser.add_argument(
        "--hide-optional",
        action="store_true",
        help="Drop optional instructions",
    )
    parser.add_argument(
        "--hide-safety",
        action="store_true",
        help="Drop safety instructions",
    )
    parser.add_argument(
        "--ignore-rule",
        type=int,
        nargs="+",
        default=[],
        metavar="ID",
        help="Rule ids to treat as not followed",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="Print the guide's rules instead of rendering it",
    )
    parser.add_argument(
        "--impactful-only",
        action="store_true",
        help="With --list-rules, only show rules that change which instructions appear",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> FormatOptions:
    return FormatOptions(
        collapse_instruction_groups=args.collapse,
        hide_comments=args.hide_comments,
        hide_instruction_id=args.hide_id,
        hide_optional=args.hide_optional,
        hide_safety=args.hide_safety,
        ignored_rules=frozenset(args.ignore_rule),
    )


def rules_table(guide: Guide, impactful_only: bool = False) -> Table:
    """Build a rich table of the guide's rules."""
    table = Table(title=escape(f"{guide.game_title} rules ({guide.name})"))
    table.add_column("Id", justify="right")
    table.add_column("Restriction")
    for rule_id, text in sorted(guide.get_rules(impactful_only=impactful_only).items()):
        table.add_row(str(rule_id), escape(text))
    return table


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    console = Console(stderr=True)

    try:
        guide = load_guide(args.guide)
    except FileNotFoundError:
        console.print(f"[red]Guide file not found: {escape(args.guide)}[/red]")
        return 1
    except OSError as e:
        console.print(f"[red]Failed to read {escape(args.guide)}: {escape(str(e))}[/red]")
        return 1
    except (GuideParseError, GuideValidationError) as e:
        console.print(f"[red]Failed to load {escape(args.guide)}[/red]")
        console.print(str(e), markup=False)
        return 1

    if args.list_rules:
        Console().print(rules_table(guide, impactful_only=args.impactful_only))
        return 0

    options = options_from_args(args)
    unknown = sorted(options.ignored_rules - set(guide.rules))
    if unknown:
        logger.warning("Ignored rules %s are not declared by the guide", unknown)

    document = guide.format(options)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(document + "\n")
        except OSError as e:
            console.print(f"[red]Failed to write {escape(args.output)}: {escape(str(e))}[/red]")
            return 1
        console.print(f"Walkthrough saved to {escape(args.output)}")
    else:
        sys.stdout.write(document + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
