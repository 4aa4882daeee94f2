# -------------------------------------
# vdsparser CLI entry point
# -------------------------------------
"""
CLI entry point.

Usage:
    python -m vdsparser "auto | <length> || <percentage>"
    python -m vdsparser "<ratio [0,10]>" --tokens
    python -m vdsparser --property aspect-ratio --json
    python -m vdsparser "[a | b" --check
"""
import argparse
import json
import sys

from . import definitions as defs
from . import properties as props
from .diagnostics import check_syntax
from .errors import GrammarError
from .expander import MAX_MULTIPLIER_DEPTH, _selftest, parse
from .tokens import expand_tokens
from .values import materialize


def _emit(lines, as_json: bool, limit: int = 0) -> None:
    if limit:
        lines = lines[:limit]
    if as_json:
        print(json.dumps(lines, ensure_ascii=False))
        return
    for line in lines:
        print(line if line != "" else '""')


def _main(argv=None) -> int:
    p = argparse.ArgumentParser(
        description="Expand CSS Value Definition Syntax grammars into their instantiation patterns.",
    )
    p.add_argument("syntax", nargs="?", help="Grammar string, e.g. 'auto | <length>{1,2}'")
    p.add_argument("--property", "-p", metavar="NAME", help="Expand the grammar of a CSS property")
    p.add_argument("--tokens", "-t", action="store_true", help="Only inline data types and print the expanded grammar")
    p.add_argument("--raw", action="store_true", help="Parse without inlining data types first")
    p.add_argument("--materialize", "-m", action="store_true", help="Print one example value per variation")
    p.add_argument("--check", "-c", action="store_true", help="Report grammar problems; exit 1 when any are found")
    p.add_argument("--definitions", "-d", metavar="YAML", help="Data-type registry file (layered over built-ins)")
    p.add_argument("--properties", metavar="YAML", help="Property grammar file (replaces built-ins)")
    p.add_argument("--depth", type=int, default=MAX_MULTIPLIER_DEPTH, help=f"Repeat cap for +, *, # (default: {MAX_MULTIPLIER_DEPTH})")
    p.add_argument("--limit", type=int, default=0, help="Limit printed variations (0 = no limit)")
    p.add_argument("--json", action="store_true", help="Print a JSON array instead of one line per variation")
    p.add_argument("--selftest", action="store_true", help="Run selftest and exit")
    args = p.parse_args(argv)

    if args.selftest:
        _selftest()
        return 0

    if args.syntax is None and args.property is None:
        p.error("syntax is required unless --property or --selftest is given")

    if args.depth < 0:
        p.error("--depth must be >= 0")

    try:
        registry = defs.load_definitions(args.definitions, merge=True) if args.definitions else None

        if args.property:
            table = props.load_properties(args.properties) if args.properties else None
            prop = props.get_property(args.property, table, definitions=registry, depth=args.depth)
            if prop is None:
                print(f"Unknown property: {args.property}", file=sys.stderr)
                return 1
            syntax = prop.syntax
        else:
            syntax = args.syntax

        if args.check:
            problems = check_syntax(syntax, registry)
            for problem in problems:
                print(problem)
            return 1 if problems else 0

        expanded = syntax if args.raw else expand_tokens(syntax, registry)
        if args.tokens:
            print(expanded)
            return 0

        variations = prop.syntax_parsed if args.property and not args.raw else parse(expanded, depth=args.depth)
        if args.materialize:
            variations = [materialize(v) for v in variations]
        _emit(variations, args.json, args.limit)
        return 0

    except GrammarError as e:
        print(f"vdsparser error: {e}", file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"vdsparser error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(_main())
