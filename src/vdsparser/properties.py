# -------------------------------------
# CSS property metadata
# -------------------------------------
"""
Property metadata with lazily computed grammar views.

Each view is computed on first access and memoized on the instance:
  syntax_expanded    data types inlined (expand_tokens)
  syntax_parsed      all variations, unknown data types filtered out
  syntax_set         distinct tokens available in each value slot
  syntax_normalized  variations with every slot reduced to its canonical token
  syntax_separators  separators between slots, per variation
"""
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml

from .combinatorics import column_sets
from .errors import GrammarError
from .expander import MAX_MULTIPLIER_DEPTH, parse
from .strings import split_top_level
from .tokens import expand_tokens, filter_tokens, token_canonical
from .values import VALUE_SEPARATORS, extract_separators

PROPERTY_DEFINITIONS: dict[str, str] = {
    # display and visibility
    "visibility": "visible | hidden | collapse",
    "opacity": "<number [0,1]> | <percentage [0%,100%]>",
    "flex-direction": "row | row-reverse | column | column-reverse",
    "flex-wrap": "nowrap | wrap | wrap-reverse",
    "flex-grow": "<number>",
    "flex-shrink": "<number>",
    "justify-content": "flex-start | flex-end | center | space-between | space-around | space-evenly",
    "align-items": "flex-start | flex-end | center | baseline | stretch",
    "align-content": "flex-start | flex-end | center | space-between | space-around | space-evenly | stretch",
    "justify-items": "flex-start | flex-end | center | baseline | stretch",
    "grid-auto-flow": "row | column | row dense | column dense",
    "grid-template-columns": "<track-list>",
    "grid-auto-columns": "<track-size>+",
    "grid-auto-rows": "<track-size>+",
    "row-gap": "<length-percentage>",
    "column-gap": "<length-percentage>",
    # size
    "width": "auto | <length-percentage [0,∞]> | min-content | max-content | fit-content",
    "min-width": "auto | <length-percentage [0,∞]> | min-content | max-content | fit-content",
    "max-width": "<length-percentage [0,∞]> | min-content | max-content | fit-content",
    "height": "auto | <length-percentage [0,∞]> | min-content | max-content | fit-content",
    "min-height": "auto | <length-percentage [0,∞]> | min-content | max-content | fit-content",
    "max-height": "<length-percentage [0,∞]> | min-content | max-content | fit-content",
    "overflow": "[<overflow-block>]{1,2}",
    "object-fit": "fill|contain|cover|none|scale-down",
    "box-sizing": "content-box | border-box",
    "aspect-ratio": "auto || <ratio>",
    "float": "left | right | none",
    "clear": "none | left | right | both",
    # position and spacing
    "position": "<position>",
    "top": "auto | <length-percentage>",
    "right": "auto | <length-percentage>",
    "bottom": "auto | <length-percentage>",
    "left": "auto | <length-percentage>",
    "z-index": "<integer>",
    "padding-top": "<length-percentage [0,∞]>",
    "padding-right": "<length-percentage [0,∞]>",
    "padding-bottom": "<length-percentage [0,∞]>",
    "padding-left": "<length-percentage [0,∞]>",
    "padding": "[<length-percentage [0,∞]>]{1,4}",
    "margin-top": "auto | <length-percentage>",
    "margin-right": "auto | <length-percentage>",
    "margin-bottom": "auto | <length-percentage>",
    "margin-left": "auto | <length-percentage>",
    "transform": "none | [<transform-function>]+",
    # background and border
    "background-color": "<color>",
    "background-position": "<bg-position>",
    "background-size": "<bg-size>",
    "background-image": "<bg-image>",
    "mix-blend-mode": "<mix-blend-mode>",
    "border-style": "<line-style>",
    "border-width": "<line-width>",
    "border-color": "<color>",
    "border-image-source": "<border-image-source>",
    "border-image-repeat": "<border-image-repeat>",
    # text
    "color": "<color>",
    "font-family": "<generic-family>",
    "font-size": "<length-percentage [0,∞]>",
    "line-height": "normal | <number [0,∞]> | <length-percentage [0,∞]>",
    "text-align": "left | right | center | justify",
    "text-decoration-line": "<text-decoration-line>",
    "text-decoration-style": "<text-decoration-style>",
    "text-decoration-color": "<text-decoration-color>",
    "text-decoration-thickness": "<text-decoration-thickness>",
    # effects
    "filter": "none | <filter-function>",
    "box-shadow": "none | <spread-shadow>",
}


@dataclass
class Property:
    """A CSS property and its grammar, with lazily computed variations."""

    name: str
    syntax: str
    description: str = ""
    definitions: Optional[Mapping[str, str]] = field(default=None, repr=False)
    depth: int = MAX_MULTIPLIER_DEPTH

    @cached_property
    def syntax_expanded(self) -> str:
        return expand_tokens(self.syntax, self.definitions)

    @cached_property
    def syntax_parsed(self) -> List[str]:
        return filter_tokens(parse(self.syntax_expanded, depth=self.depth), self.definitions)

    @cached_property
    def syntax_set(self) -> List[List[str]]:
        rows = [split_top_level(v, VALUE_SEPARATORS) for v in self.syntax_parsed]
        return column_sets(rows)

    @cached_property
    def syntax_normalized(self) -> List[str]:
        out = []
        for v in self.syntax_parsed:
            slots = split_top_level(v, VALUE_SEPARATORS)
            out.append(" ".join(token_canonical(t) or t for t in slots))
        return out

    @cached_property
    def syntax_separators(self) -> List[List[str]]:
        return extract_separators(self.syntax_parsed)


def create_property(
    name: str,
    syntax: str,
    description: str = "",
    *,
    definitions: Optional[Mapping[str, str]] = None,
    depth: int = MAX_MULTIPLIER_DEPTH,
) -> Property:
    return Property(name=name, syntax=syntax, description=description, definitions=definitions, depth=depth)


def get_property(
    name: str,
    properties: Optional[Mapping[str, Any]] = None,
    *,
    definitions: Optional[Mapping[str, str]] = None,
    depth: int = MAX_MULTIPLIER_DEPTH,
) -> Optional[Property]:
    """
    Look up a property by name in `properties` (default PROPERTY_DEFINITIONS).
    Entries may be syntax strings or {syntax, description} mappings.
    Returns None for unknown names.
    """
    table = PROPERTY_DEFINITIONS if properties is None else properties
    entry = table.get(name)
    if entry is None:
        return None
    syntax, description = _entry(name, entry)
    return create_property(name, syntax, description, definitions=definitions, depth=depth)


# ============================================================
# YAML loading
# ============================================================

_PROPERTIES_CACHE: dict[str, dict[str, Any]] = {}


def _entry(name: str, entry: Any) -> tuple[str, str]:
    if isinstance(entry, str):
        return entry, ""
    if isinstance(entry, dict) and isinstance(entry.get("syntax"), str):
        return entry["syntax"], str(entry.get("description", ""))
    raise GrammarError(f"property {name!r} must be a syntax string or a mapping with 'syntax'")


def load_properties(path: str | Path) -> dict[str, dict[str, str]]:
    """
    Load property grammars from a YAML mapping:

        width: "auto | <length-percentage [0,∞]>"
        opacity:
          syntax: "<number [0,1]>"
          description: "Opacity of the element"

    Returns:
        Dict of name -> {"syntax": ..., "description": ...}

    Raises:
        FileNotFoundError: If the file doesn't exist
        GrammarError: If an entry has no usable syntax
    """
    path = Path(path)
    path_str = str(path.resolve())

    if path_str not in _PROPERTIES_CACHE:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise GrammarError(f"invalid YAML in {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise GrammarError(f"{path}: expected a mapping of property definitions")
        table = {}
        for k, v in data.items():
            syntax, description = _entry(str(k), v)
            table[str(k)] = {"syntax": syntax, "description": description}
        _PROPERTIES_CACHE[path_str] = table

    return {k: dict(v) for k, v in _PROPERTIES_CACHE[path_str].items()}


def clear_cache() -> None:
    """Clear the property file cache."""
    _PROPERTIES_CACHE.clear()
