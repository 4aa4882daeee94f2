# -------------------------------------
# grammar diagnostics
# -------------------------------------
"""
Authoring-time checks for grammar strings.

parse() never fails: malformed punctuation degrades to a literal and
unknown data types pass through. check_syntax() reports those cases so
grammar tables can be validated before they ship.
"""
import re
from typing import List, Mapping, Optional

from .definitions import PRIMITIVE_TYPES, TOKEN_DEFINITIONS
from .errors import GrammarError
from .expander import normalize_syntax
from .tokens import TOKEN_RE, parse_range

_CLOSE_FOR = {"[": "]", "(": ")", "<": ">", "{": "}"}
_OPEN_FOR = {v: k for k, v in _CLOSE_FOR.items()}

_BRACE_RE = re.compile(r"\{([^{}]*)\}")
_MULT_BODY_RE = re.compile(r"^(\d+)(?:,(\d+))?$")
_COMBINATOR = r"(?:\|\||&&|\||,)"
_LEADING_RE = re.compile(r"^" + _COMBINATOR)
_TRAILING_RE = re.compile(_COMBINATOR + r"$")
_OPEN_COMB_RE = re.compile(r"[\[(]\s*" + _COMBINATOR)
_COMB_CLOSE_RE = re.compile(_COMBINATOR + r"\s*[\])]")
_EMPTY_GROUP_RE = re.compile(r"\[\s*\]")


def _check_balance(s: str) -> List[str]:
    problems: List[str] = []
    stack: List[str] = []
    in_quotes = False
    for ch in s:
        if in_quotes:
            if ch == '"':
                in_quotes = False
            continue
        if ch == '"':
            in_quotes = True
        elif ch in _CLOSE_FOR:
            stack.append(ch)
        elif ch in _OPEN_FOR:
            if stack and stack[-1] == _OPEN_FOR[ch]:
                stack.pop()
            else:
                problems.append(f"unexpected '{ch}'")
    if in_quotes:
        problems.append("unterminated quote")
    for ch in reversed(stack):
        problems.append(f"unclosed '{ch}'")
    return problems


def check_syntax(syntax: str, definitions: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Problems found in a grammar string, in discovery order; [] when clean.

      check_syntax("[a | b")      -> ["unclosed '['"]
      check_syntax("a{3,1}")      -> ["invalid multiplier {3,1}"]
      check_syntax("<nope> | a")  -> ["unknown data type <nope>"]
    """
    defs = TOKEN_DEFINITIONS if definitions is None else definitions
    s = normalize_syntax(syntax)
    problems = _check_balance(s)

    for m in TOKEN_RE.finditer(s):
        name, rng = m.group(1), m.group(2)
        if name not in PRIMITIVE_TYPES and f"<{name}>" not in defs and name not in defs:
            problems.append(f"unknown data type <{name}>")
        if rng:
            try:
                lo, hi = parse_range(rng)
            except GrammarError as e:
                problems.append(str(e))
                continue
            if lo > hi:
                problems.append(f"empty range {rng.strip()} on <{name}>")

    # token ranges are checked above; strip them before looking at braces
    bare = TOKEN_RE.sub("<>", s)
    for m in _BRACE_RE.finditer(bare):
        body = m.group(1).replace(" ", "")
        mm = _MULT_BODY_RE.match(body)
        if not mm or (mm.group(2) is not None and int(mm.group(1)) > int(mm.group(2))):
            problems.append(f"invalid multiplier {{{m.group(1)}}}")

    if _LEADING_RE.search(s) or _TRAILING_RE.search(s):
        problems.append("dangling combinator")
    if _OPEN_COMB_RE.search(s) or _COMB_CLOSE_RE.search(s):
        problems.append("combinator without operand inside group")
    if _EMPTY_GROUP_RE.search(bare):
        problems.append("empty group []")

    return problems


def validate_syntax(syntax: str, definitions: Optional[Mapping[str, str]] = None) -> str:
    """Return syntax unchanged, or raise GrammarError listing every problem."""
    problems = check_syntax(syntax, definitions)
    if problems:
        raise GrammarError(f"{syntax!r}: " + "; ".join(problems))
    return syntax
