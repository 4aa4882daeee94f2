# -------------------------------------
# example values
# -------------------------------------
"""
Value materializer: turn an expanded grammar into a previewable literal.

    materialize("<length> <color>")  -> "0px #ffffff"
    materialize("<length [0,100]>")  -> "0px"
"""
import re
from typing import Iterable, List, Optional

from .expander import normalize_syntax
from .tokens import is_keyword, token_canonical

# One representative literal per data type
TOKEN_DEFAULTS: dict[str, str] = {
    "<length>": "0px",
    "<angle>": "0deg",
    "<percentage>": "0%",
    "<color>": "#ffffff",
    "<number>": "0.0",
    "<integer>": "0",
    "<flex>": "1fr",
    "<ratio>": "1/1",
    "<link>": '"https://example.com/image.png"',
}

VALUE_SEPARATORS = (" ", "/", ",")

# <name>, <name [a,b]>, and the stacked <name [a,b] [c,d]> form
_PLACEHOLDER_RE = re.compile(r"<([a-zA-Z0-9-]+)(?:\s*\[[^\]>]*\])*>")


def materialize(syntax: str) -> str:
    """Replace every data-type token with its default literal; unknown tokens stay."""
    s = normalize_syntax(syntax)
    return _PLACEHOLDER_RE.sub(lambda m: TOKEN_DEFAULTS.get(f"<{m.group(1)}>", m.group(0)), s)


def token_value(token: str) -> Optional[str]:
    """
    auto           -> auto
    <length [0,1]> -> 0px
    10px           -> None
    """
    if is_keyword(token):
        return token
    canonical = token_canonical(token)
    if canonical is None:
        return None
    return TOKEN_DEFAULTS.get(canonical)


def token_values(tokens: Iterable[str]) -> List[str]:
    """token_value for each token, unknown tokens dropped."""
    out = []
    for t in tokens:
        v = token_value(t)
        if v is not None:
            out.append(v)
    return out


# ============================================================
# Separators
# ============================================================

_TOKEN_ANY_RE = re.compile(r"<[^>]*>")
_TIGHT_SEP_RE = re.compile(r"\s*([/,])\s*")
_FUNCTION_ANY_RE = re.compile(r"[^\s/,]*\([^)]*\)")
_SEPARATOR_RE = re.compile(r"[/,]|\s+")


def extract_separators(variations: Iterable[str]) -> List[List[str]]:
    """
    Separators between value slots, one list per variation:
      ["a b / c", "d / e f", "x,y"] -> [[" ", "/"], ["/", " "], [","]]

    Tokens and function calls count as single slots; an empty variation
    has no separators.
    """
    out: List[List[str]] = []
    for v in variations:
        s = re.sub(r"\s+", " ", v)
        s = _TOKEN_ANY_RE.sub("token", s)
        s = _TIGHT_SEP_RE.sub(r"\1", s)
        s = _FUNCTION_ANY_RE.sub("token", s)
        s = s.strip()
        out.append([" " if m.group(0).isspace() else m.group(0) for m in _SEPARATOR_RE.finditer(s)])
    return out
