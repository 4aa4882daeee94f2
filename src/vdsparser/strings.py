# -------------------------------------
# bracket-aware string utilities
# -------------------------------------
"""
Top-level splitting for grammar strings.

A separator only counts at depth 0, i.e. outside every protected region:
  - [...]  groups
  - (...)  function calls
  - <...>  data-type tokens (which may carry a [min,max] range)
  - {...}  multiplier ranges
  - "..."  quoted strings
"""
from typing import List, Optional, Sequence, Union

_PAIRS = {
    "()": ("(", ")"),
    "[]": ("[", "]"),
    "{}": ("{", "}"),
    "<>": ("<", ">"),
}

_OPENERS = {"[": "]", "(": ")", "<": ">", "{": "}"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


def scan_balanced(s: str, start: int, open_ch: str, close_ch: str) -> Optional[int]:
    """
    Given s[start] == open_ch, return index one-past matching close_ch.
    Supports nesting of the same delimiter type.
    """
    depth = 1
    i = start + 1
    n = len(s)
    while i < n and depth > 0:
        if s[i] == open_ch:
            depth += 1
        elif s[i] == close_ch:
            depth -= 1
        i += 1
    return i if depth == 0 else None


def split_top_level(text: str, separators: Union[str, Sequence[str]]) -> List[str]:
    """
    Split text on any of the separators, at depth 0 only.

    Separators are tried in the order given, so list longer ones first when
    one is a prefix of another (e.g. ["||", "|"]). Parts are stripped and
    empty parts are dropped:

      split_top_level("a [b|c] d|e", "|")  -> ["a [b|c] d", "e"]
      split_top_level("x(y z) a|b", " ")   -> ["x(y z)", "a|b"]
      split_top_level("", ",")             -> []
    """
    seps = [separators] if isinstance(separators, str) else list(separators)
    seps = [s for s in seps if s]

    out: List[str] = []
    buf: List[str] = []
    depth = {ch: 0 for ch in _OPENERS}
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if in_quotes:
            if ch == '"':
                in_quotes = False
        elif ch == '"':
            in_quotes = True
        elif ch in _OPENERS:
            depth[ch] += 1
        elif ch in _CLOSERS:
            opener = _CLOSERS[ch]
            if depth[opener] > 0:
                depth[opener] -= 1

        matched = None
        if not in_quotes and not any(depth.values()):
            for sep in seps:
                if text.startswith(sep, i):
                    matched = sep
                    break

        if matched is not None:
            part = "".join(buf).strip()
            if part:
                out.append(part)
            buf.clear()
            i += len(matched)
            continue

        buf.append(ch)
        i += 1

    part = "".join(buf).strip()
    if part:
        out.append(part)
    return out


def extract_between(text: str, pair: str) -> Optional[str]:
    """
    Content of the first outermost pair, e.g.
      extract_between("fit-content(<length [0,10]>)", "()") -> "<length [0,10]>"
    Returns None when no balanced pair exists.
    """
    open_ch, close_ch = _PAIRS[pair]
    start = text.find(open_ch)
    if start < 0:
        return None
    end = scan_balanced(text, start, open_ch, close_ch)
    if end is None:
        return None
    return text[start + 1:end - 1]


def join_with_separators(parts: Sequence[str], separators: Sequence[str]) -> str:
    """
    Join parts using separators[i] after parts[i]; plain space join when no
    separators are known.
    """
    if not separators:
        return " ".join(parts)
    out: List[str] = []
    for i, p in enumerate(parts):
        out.append(p)
        if i < len(separators) and separators[i]:
            out.append(separators[i])
    return "".join(out).strip()
