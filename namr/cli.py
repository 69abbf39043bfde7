#!/usr/bin/env python3
"""
namr CLI
========
Command-line interface for package name suggestions.

Usage:
    namr generate "Tools for Displaying Visual Scenes" --explain
    namr pick "A Package for Displaying Visual Scenes" --verb
    namr spell reader
    namr acronym "Interface to the NCBI Entrez API"
    namr suffix "package for plotting things" my
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from namr import __version__
from namr.errors import NamrError

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, value: str):
        """Print a command's result (shown even in quiet mode)."""
        print(value)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, title: str, rows: list):
        """Render (step, value) rows as a rich table."""
        if self.quiet:
            return
        table = Table(title=title)
        table.add_column("Step", style="bold")
        table.add_column("Value")
        for step, value in rows:
            table.add_row(step, value)
        self.console.print(table)


def validate_text(text: str, what: str = "Title") -> tuple[bool, str]:
    """Validate a free-text argument."""
    if not text or not text.strip():
        return False, f"{what} cannot be empty"
    return True, text


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Suggest a package name."""
    from namr import suggest_name

    valid, result = validate_text(args.title)
    if not valid:
        out.error(result)
        return 1

    suggestion = suggest_name(
        args.title,
        include_acronym=args.acronym,
        prefer_verb=args.verb,
    )

    if args.json:
        out.result(json.dumps(suggestion.to_dict(), indent=2))
        return 0

    if args.explain:
        out.table(f"namr: {suggestion.title}", [
            ("Word", suggestion.word),
            ("Spelling", f"{suggestion.spelled} ({suggestion.rule})"),
            ("Acronym", suggestion.acronym or "-"),
            ("Affix", suggestion.affix or "-"),
            ("Name", suggestion.name),
        ])
        return 0

    out.result(suggestion.name)
    return 0


def cmd_pick(args, out: Output):
    """Pick the seed word from a title."""
    from namr import select_word

    valid, result = validate_text(args.title)
    if not valid:
        out.error(result)
        return 1

    out.result(select_word(args.title, prefer_verb=args.verb))
    return 0


def cmd_spell(args, out: Output):
    """Apply the spelling transformation to a word."""
    from namr import transform_spelling

    valid, result = validate_text(args.word, what="Word")
    if not valid:
        out.error(result)
        return 1

    spelling = transform_spelling(result.strip())
    out.result(spelling.word)
    if args.verbose:
        out.print(f"rule: {spelling.rule}")
    return 0


def cmd_acronym(args, out: Output):
    """Show the first acronym of a title."""
    from namr import find_acronym

    acronym = find_acronym(args.title)
    if acronym is None:
        out.print("No acronym found.")
        return 0
    out.result(acronym)
    return 0


def cmd_suffix(args, out: Output):
    """Add the common affix for a title to a name."""
    from namr import decorate_with_suffix

    out.result(decorate_with_suffix(args.title, args.name))
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namr',
        description='namr - Package Name Suggestions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate "Tools for Displaying Visual Scenes"
  %(prog)s generate "Interface to the NCBI Entrez Database" --acronym --explain
  %(prog)s pick "Simulate and Track Animal Movement" --verb
  %(prog)s spell reader -v
  %(prog)s suffix "package for plotting things" my
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--debug', action='store_true', help='Log each pipeline step')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Suggest a package name')
    p.add_argument('title', help='Package title or description')
    p.add_argument('--acronym', '-a', action='store_true', help='Append an acronym from the title')
    p.add_argument('--verb', action='store_true', help='Prefer a verb as the seed word')
    p.add_argument('--explain', '-e', action='store_true', help='Show how the name was built')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- pick ---
    p = subparsers.add_parser('pick', aliases=['p'], help='Pick the seed word from a title')
    p.add_argument('title', help='Package title or description')
    p.add_argument('--verb', action='store_true', help='Prefer a verb')

    # --- spell ---
    p = subparsers.add_parser('spell', help='Make a word R-like')
    p.add_argument('word', help='Word to transform')
    p.add_argument('--verbose', '-v', action='store_true', help='Show the rule applied')

    # --- acronym ---
    p = subparsers.add_parser('acronym', help='Find the first acronym in a title')
    p.add_argument('title', help='Package title or description')

    # --- suffix ---
    p = subparsers.add_parser('suffix', help='Add the common affix for a title')
    p.add_argument('title', help='Package title or description')
    p.add_argument('name', help='Name to decorate')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'p': 'pick',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'pick': cmd_pick,
        'spell': cmd_spell,
        'acronym': cmd_acronym,
        'suffix': cmd_suffix,
    }

    handler = commands.get(command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (NamrError, ValueError) as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
