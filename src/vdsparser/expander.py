"""
expander.py

Combinator dispatcher for CSS Value Definition Syntax (VDS).

parse(syntax) enumerates every instantiation pattern a grammar admits,
as an ordered list of distinct strings. Checks run lowest precedence first:

  a,b          comma            cross product joined with ","
  a || b       double bar       one or more, any order
  a&&b         double amp       all, any order
  a|b          single bar       exactly one
  a b / a/b    sequence         all, in order
  [a b]        optional group   omitted or present
  [a b]+       group multiplier ?, +, *, #, #{m,n}, {n}, {m,n}, !
  a+           bare multiplier  ?, +, *, #, #{m,n}, {n}, {m,n}
  a            atomic

Unbounded multipliers repeat at most MAX_MULTIPLIER_DEPTH times (or the
`depth` keyword). Input that matches none of the shapes is returned as a
single literal; nothing here raises on malformed grammars.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .combinatorics import all_subsets, cross_product, permutations, unique
from .strings import scan_balanced, split_top_level

MAX_MULTIPLIER_DEPTH = 2

# ============================================================
# Normalizer
# ============================================================

_DOUBLE_BAR_RE = re.compile(r"\s*\|\|\s*")
_DOUBLE_AMP_RE = re.compile(r"\s*&&\s*")
_SINGLE_BAR_RE = re.compile(r"(?<!\|)\s*\|\s*(?!\|)")
_MULT_SPACE_RE = re.compile(r"\s+([*+?#])")
_SPACES_RE = re.compile(r"\s+")


def normalize_syntax(s: str) -> str:
    """
    Canonical combinator spacing:
      "a||b"     -> "a || b"
      "a && b"   -> "a&&b"
      "a | b"    -> "a|b"     ("||" untouched)
      "a *"      -> "a*"
    """
    s = _DOUBLE_BAR_RE.sub(" || ", s)
    s = _DOUBLE_AMP_RE.sub("&&", s)
    s = _SINGLE_BAR_RE.sub("|", s)
    s = _MULT_SPACE_RE.sub(r"\1", s)
    s = _SPACES_RE.sub(" ", s)
    return s.strip()


# ============================================================
# Helpers
# ============================================================

def _by_length(items: List[str]) -> List[str]:
    # stable: equal-length variants keep generation order
    return sorted(items, key=len)


def _join(pieces: List[str], sep: str) -> str:
    return sep.join(p for p in pieces if p != "")


def _expand_operands(combos: List[List[str]], depth: int) -> List[str]:
    """
    For each ordered operand list: join with spaces, split on top-level
    spaces, parse each piece, cross product.
    """
    out: List[str] = []
    for combo in combos:
        pieces = split_top_level(" ".join(combo), " ")
        parsed = [parse(p, depth=depth) for p in pieces]
        for row in cross_product(parsed):
            out.append(_join(row, " ").strip())
    return out


# ============================================================
# Combinators
# ============================================================

def has_comma(s: str) -> bool:
    return len(split_top_level(s, ",")) > 1


def has_double_bar(s: str) -> bool:
    return len(split_top_level(s, "||")) > 1


def has_double_amp(s: str) -> bool:
    return len(split_top_level(s, "&&")) > 1


def has_single_bar(s: str) -> bool:
    return len(split_top_level(s, "|")) > 1


def has_sequence(s: str) -> bool:
    """Space-separated juxtaposition at top level ("a/b" alone is not a sequence)."""
    return len(split_top_level(s, " ")) > 1


def parse_comma(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """a,b -> cross product of each part, joined with ',' (omitted parts are elided)."""
    parts = split_top_level(s, ",")
    if len(parts) < 2:
        return [s]
    parsed = [parse(p, depth=depth) for p in parts]
    return unique(_join(row, ",") for row in cross_product(parsed))


def parse_double_bar(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """a || b -> every non-empty subset in every order."""
    parts = split_top_level(s, "||")
    if len(parts) < 2:
        return [" ".join(parts)]
    combos = [perm for subset in all_subsets(parts) if subset for perm in permutations(subset)]
    return _by_length(unique(_expand_operands(combos, depth)))


def parse_double_amp(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """a&&b -> every ordering of all operands."""
    parts = split_top_level(s, "&&")
    if len(parts) < 2:
        return [" ".join(parts)]
    return _by_length(unique(_expand_operands(permutations(parts), depth)))


def parse_single_bar(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """a|b -> variants of a, then variants of b."""
    parts = split_top_level(s, "|")
    if len(parts) < 2:
        return [" ".join(parts)]
    out: List[str] = []
    for p in parts:
        out.extend(parse(p, depth=depth))
    return _by_length(unique(out))


def parse_sequence(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """
    a b -> cross product of each piece, in order.
    Splits on space, else on '/'; empty pieces leave no stray separators.
    """
    sep = None
    if len(split_top_level(s, " ")) > 1:
        sep = " "
    elif len(split_top_level(s, "/")) > 1:
        sep = "/"
    if sep is None:
        return [s]

    parts = split_top_level(s, sep)
    parsed = [parse(p, depth=depth) for p in parts]
    squeeze = re.compile(r"\s*" + re.escape(sep) + r"\s*")
    out: List[str] = []
    for row in cross_product(parsed):
        joined = squeeze.sub(sep, _join(row, sep)).strip()
        out.append(joined)
    return unique(out)


# ============================================================
# Brackets
# ============================================================

_GROUP_MULT_RE = re.compile(r"^(\[.*\])(\?|\+|\*|!|#\{\d+(?:,\d+)?\}|#|\{\d+(?:,\d+)?\})$", re.S)
_BARE_MULT_RE = re.compile(r"^(.+?)(\?|\+|\*|#\{\d+(?:,\d+)?\}|#|\{\d+(?:,\d+)?\})$", re.S)
_RANGE_RE = re.compile(r"\{(\d+)(?:,(\d+))?\}$")


def _is_closed_group(s: str) -> bool:
    """True when s[0] == '[' and its matching ']' is the last character."""
    if not s.startswith("["):
        return False
    return scan_balanced(s, 0, "[", "]") == len(s)


def multiplier_range(mult: str, depth: int = MAX_MULTIPLIER_DEPTH) -> Optional[Tuple[int, int, str]]:
    """
    Interpret a multiplier suffix as (min, max, joiner):
      "*" -> (0, depth, " ")     "+" -> (1, depth, " ")     "?" -> (0, 1, " ")
      "#" -> (1, depth, ",")     "#{m,n}" -> (m, n, ",")
      "{n}" -> (n, n, " ")       "{m,n}" -> (m, n, " ")
    "+" and "#" still allow one repeat when depth is 0.
    Returns None for anything else.
    """
    if mult == "*":
        return 0, depth, " "
    if mult == "+":
        return 1, max(depth, 1), " "
    if mult == "?":
        return 0, 1, " "
    if mult == "#":
        return 1, max(depth, 1), ","
    joiner = " "
    if mult.startswith("#"):
        joiner = ","
        mult = mult[1:]
    m = _RANGE_RE.fullmatch(mult)
    if not m:
        return None
    lo = int(m.group(1))
    hi = int(m.group(2)) if m.group(2) is not None else lo
    return lo, hi, joiner


def has_brackets(s: str) -> bool:
    return _is_closed_group(s)


def has_brackets_multiplier(s: str) -> bool:
    m = _GROUP_MULT_RE.match(s)
    return bool(m) and _is_closed_group(m.group(1))


def parse_brackets(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """[a b] -> ["", "a b"]; an empty group yields no variants at all."""
    if not _is_closed_group(s):
        return []
    parsed = parse(s[1:-1], depth=depth)
    present = [v for v in parsed if v.strip() != ""]
    if not present:
        return []
    return _by_length(unique([""] + present))


def _repeat(variants: List[str], lo: int, hi: int, joiner: str) -> List[str]:
    out: List[str] = []
    for count in range(lo, hi + 1):
        if count == 0:
            out.append("")
            continue
        for row in cross_product([variants] * count):
            out.append(_join(row, joiner))
    return unique(out)


def parse_brackets_multiplier(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """
    [a|b]+ -> a, b, a a, a b, b a, b b   (with depth 2)
    [a]#   -> a, a,a
    [a b]! -> a b                         (group may not be empty)
    """
    m = _GROUP_MULT_RE.match(s)
    if not m or not _is_closed_group(m.group(1)):
        return [s]
    group, mult = m.group(1), m.group(2)
    variants = parse(group[1:-1], depth=depth)
    # an empty group has no variants, with or without a multiplier
    if not any(v != "" for v in variants):
        return []

    if mult == "!":
        return [v for v in variants if v != ""]

    rng = multiplier_range(mult, depth)
    if rng is None:
        return [s]
    lo, hi, joiner = rng
    return _repeat(variants, lo, hi, joiner)


# ============================================================
# Bare multipliers
# ============================================================

def has_multiplier(s: str) -> bool:
    return bool(_BARE_MULT_RE.match(s))


def duplicate_token(base: str, lo: int, hi: int, joiner: str = " ") -> List[str]:
    """base repeated lo..hi times: ("a", 1, 3) -> ["a", "a a", "a a a"]."""
    return [joiner.join([base] * i) for i in range(lo, hi + 1)]


def parse_multiplier(s: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """
    a?     -> ["", "a"]
    a+     -> ["a", "a a"]            (depth 2)
    a*     -> ["", "a", "a a"]
    a{2,3} -> ["a a", "a a a"]
    a#     -> ["a", "a,a"]
    """
    m = _BARE_MULT_RE.match(s)
    if not m:
        return [s]
    base, mult = m.group(1).strip(), m.group(2)
    rng = multiplier_range(mult, depth)
    if rng is None:
        return [s]
    lo, hi, joiner = rng
    return _by_length(unique(duplicate_token(base, lo, hi, joiner)))


# ============================================================
# Dispatcher
# ============================================================

def parse(syntax: str, *, depth: int = MAX_MULTIPLIER_DEPTH) -> List[str]:
    """
    Expand a VDS grammar into all of its instantiation patterns.

      parse("a|b")   -> ["a", "b"]
      parse("a||b")  -> ["a", "b", "a b", "b a"]
      parse("a&&b")  -> ["a b", "b a"]
      parse("[a b]") -> ["", "a b"]
    """
    s = normalize_syntax(syntax)

    if has_comma(s):
        return parse_comma(s, depth=depth)
    if has_double_bar(s):
        return parse_double_bar(s, depth=depth)
    if has_double_amp(s):
        return parse_double_amp(s, depth=depth)
    if has_single_bar(s):
        return parse_single_bar(s, depth=depth)
    if has_sequence(s) or len(split_top_level(s, "/")) > 1:
        return parse_sequence(s, depth=depth)
    if has_brackets(s):
        return parse_brackets(s, depth=depth)
    if has_brackets_multiplier(s):
        return parse_brackets_multiplier(s, depth=depth)
    if has_multiplier(s):
        return parse_multiplier(s, depth=depth)
    return [s]


# ============================================================
# Selftest
# ============================================================

def _selftest() -> None:
    assert normalize_syntax("a||b") == "a || b"
    assert normalize_syntax("a && b") == "a&&b"
    assert normalize_syntax("a | b") == "a|b"
    assert normalize_syntax("a || b") == "a || b"
    assert normalize_syntax("  a   *") == "a*"

    assert parse("a|b") == ["a", "b"]
    assert parse("wrap|nowrap|wrap-reverse") == ["wrap", "nowrap", "wrap-reverse"]
    assert parse("a?") == ["", "a"]
    assert parse("a+", depth=2) == ["a", "a a"]
    assert parse("a*", depth=2) == ["", "a", "a a"]
    assert parse("a{2,3}") == ["a a", "a a a"]
    assert parse("a||b") == ["a", "b", "a b", "b a"]
    assert parse("a&&b") == ["a b", "b a"]
    assert parse("[a b]") == ["", "a b"]
    assert parse("a,b") == ["a,b"]
    assert parse("[a | b]+") == ["a", "b", "a a", "a b", "b a", "b b"]
    assert parse("[a]#") == ["a", "a,a"]
    assert parse("a || b|c") == ["a", "b", "c", "a b", "a c", "b a", "c a"]
    assert parse("a&&b?") == ["a", "a b", "b a"]
    assert parse("<number> [ / <number> ]") == ["<number>", "<number> / <number>"]
    assert parse("[a]{2,}") == ["[a]{2,}"]

    print("selftest: OK")
