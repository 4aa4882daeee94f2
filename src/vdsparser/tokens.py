# -------------------------------------
# data-type tokens
# -------------------------------------
"""
Token helpers and the token expander.

A token is a data-type reference, optionally range-qualified:
  <length>            canonical "<length>", base "length"
  <length [0,∞]>      canonical "<length>", range "[0,∞]"
  fit-content(<x>)    canonical "fit-content()", base "fit-content"
  auto                keyword, canonical "auto"

expand_tokens() inlines registry definitions recursively. A token already
being expanded on the current path is left as written, so self- and
mutually-referential definitions terminate.
"""
from __future__ import annotations

import ast
import math
import operator as op
import re
from typing import Any, Iterable, List, Mapping, Optional, Set, Tuple

from simpleeval import SimpleEval

from .definitions import PRIMITIVE_TYPES, TOKEN_DEFINITIONS
from .errors import GrammarError
from .strings import extract_between

# <name> or <name [range]> anywhere in a grammar
TOKEN_RE = re.compile(r"<([a-zA-Z0-9-]+)(\s*\[[^\]>]*\])?>")

_FUNCTION_RE = re.compile(r"^([a-zA-Z0-9-]+)\((.*)\)$", re.S)
_DATATYPE_RE = re.compile(r"^<([a-zA-Z0-9-]+)(\s*\[[^\]]+\])?>$")
_KEYWORD_RE = re.compile(r"^[a-zA-Z-]+$")

DIMENSION_TOKENS = ("<length>", "<percentage>", "<angle>", "<flex>")


# ============================================================
# Classification
# ============================================================

def token_canonical(token: str) -> Optional[str]:
    """
    fit-content(<length [10,20]>) -> fit-content()
    <length [0,10]>              -> <length>
    auto                         -> auto
    """
    if not token:
        return None
    m = _FUNCTION_RE.match(token)
    if m:
        return f"{m.group(1)}()"
    m = _DATATYPE_RE.match(token)
    if m:
        return f"<{m.group(1)}>"
    if _KEYWORD_RE.match(token):
        return token
    return None


def token_base(token: str) -> Optional[str]:
    canonical = token_canonical(token)
    if canonical is None:
        return None
    return canonical.replace("<", "").replace(">", "").replace("()", "")


def token_range(token: str) -> Optional[str]:
    """'<length [0,10]>' -> '[0,10]'"""
    inner = extract_between(token, "[]")
    return f"[{inner}]" if inner else None


def is_keyword(token: str) -> bool:
    canonical = token_canonical(token)
    return canonical is not None and bool(_KEYWORD_RE.match(canonical))


def is_dimension(token: str) -> bool:
    return token_canonical(token) in DIMENSION_TOKENS


def is_function(token: str) -> bool:
    canonical = token_canonical(token)
    return canonical is not None and canonical.endswith("()")


def token_type(token: str) -> Optional[str]:
    """keyword | dimension | color | function | integer | number | link"""
    canonical = token_canonical(token)
    if canonical is None:
        return None
    if is_keyword(token):
        return "keyword"
    if is_dimension(token):
        return "dimension"
    if canonical == "<color>":
        return "color"
    if is_function(token):
        return "function"
    if canonical == "<integer>":
        return "integer"
    if canonical == "<number>":
        return "number"
    if canonical == "<link>":
        return "link"
    return None


# ============================================================
# Ranges
# ============================================================

_BOUND_OPS = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.Div: op.truediv,
    ast.USub: op.neg,
    ast.UAdd: op.pos,
}

_BOUND_NAMES = {"inf": math.inf}

# trailing unit after a number: 100% / 10px / 1.5em
_UNIT_RE = re.compile(r"(?<=[\d.])\s*[a-zA-Z%]+$")


def _range_parts(rng: str) -> List[str]:
    body = rng.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1]
    parts = [p.strip() for p in body.split(",")]
    if len(parts) != 2 or not all(parts):
        raise GrammarError(f"range must have exactly two bounds: {rng!r}")
    return parts


def parse_bound(tok: str) -> float:
    """
    Evaluate one range bound:
      "0" -> 0.0   "∞" -> inf   "-∞" -> -inf   "100%" -> 100.0
    """
    t = tok.strip().replace("∞", "inf")
    t = _UNIT_RE.sub("", t)
    se = SimpleEval(names=_BOUND_NAMES, functions={}, operators=_BOUND_OPS)
    try:
        v = se.eval(t)
        return float(v)
    except Exception as e:
        raise GrammarError(f"invalid range bound: {tok!r}") from e


def parse_range(rng: str) -> Tuple[float, float]:
    """'[0,∞]' -> (0.0, inf)"""
    lo, hi = _range_parts(rng)
    return parse_bound(lo), parse_bound(hi)


def token_param(token: str) -> Optional[dict[str, Any]]:
    """
    Parameters carried by a token:
      fit-content(<length>) -> {"syntax": "<length>"}
      <length [0,10]>       -> {"min": 0.0, "max": 10.0}
    """
    kind = token_type(token)
    if kind == "function":
        param = extract_between(token, "()")
        return {"syntax": param} if param else None
    if kind in ("dimension", "number", "integer"):
        rng = token_range(token)
        if rng is None:
            return None
        lo, hi = parse_range(rng)
        return {"min": lo, "max": hi}
    return None


def merge_ranges(inner: str, outer: str) -> str:
    """
    Intersect two ranges, keeping each bound as written:
      merge_ranges("[0,∞]", "[-5,10]") -> "[0,10]"
    Falls back to the outer range when either one does not parse.
    """
    try:
        inner_txt = _range_parts(inner)
        outer_txt = _range_parts(outer)
        i_lo, i_hi = parse_range(inner)
        o_lo, o_hi = parse_range(outer)
    except GrammarError:
        return outer.strip()
    lo = inner_txt[0] if i_lo >= o_lo else outer_txt[0]
    hi = inner_txt[1] if i_hi <= o_hi else outer_txt[1]
    return f"[{lo},{hi}]"


def propagate_range(syntax: str, rng: str) -> str:
    """Attach rng to every token in syntax (intersecting existing ranges)."""
    rng = rng.strip()

    def repl(m: re.Match) -> str:
        name, own = m.group(1), m.group(2)
        merged = merge_ranges(own, rng) if own else rng
        return f"<{name} {merged}>"

    return TOKEN_RE.sub(repl, syntax)


# ============================================================
# Expansion
# ============================================================

def _lookup(definitions: Mapping[str, str], name: str) -> Optional[str]:
    key = f"<{name}>"
    if key in definitions:
        return definitions[key]
    return definitions.get(name)


def expand_tokens(
    syntax: str,
    definitions: Optional[Mapping[str, str]] = None,
    seen: Optional[Set[str]] = None,
) -> str:
    """
    Inline data-type definitions:
      expand_tokens("auto || <ratio>") -> "auto || <number [0,∞]> [ / <number [0,∞]> ]"

    Every occurrence of a token is substituted, including repeats of the
    same name. `seen` holds the tokens on the current expansion path; it is
    restored on return.
    """
    defs = TOKEN_DEFINITIONS if definitions is None else definitions
    path: Set[str] = set() if seen is None else seen

    def repl(m: re.Match) -> str:
        name, rng = m.group(1), m.group(2)
        key = f"<{name}>"
        if key in path:
            return m.group(0)
        definition = _lookup(defs, name)
        if not definition:
            return m.group(0)
        path.add(key)
        try:
            expanded = expand_tokens(definition, defs, path)
        finally:
            path.discard(key)
        if rng:
            expanded = propagate_range(expanded, rng)
        return expanded

    return TOKEN_RE.sub(repl, syntax)


def filter_tokens(
    variations: Iterable[str],
    definitions: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """
    Keep variations whose every <token> is a primitive type or defined in the
    registry; concrete values without tokens are always kept.
    """
    defs = TOKEN_DEFINITIONS if definitions is None else definitions
    out: List[str] = []
    for v in variations:
        ok = True
        for m in TOKEN_RE.finditer(v):
            name = m.group(1)
            if name in PRIMITIVE_TYPES:
                continue
            if _lookup(defs, name) is None:
                ok = False
                break
        if ok:
            out.append(v)
    return out
