# -------------------------------------
# data-type registry
# -------------------------------------
"""
Data-type definitions: canonical token -> VDS grammar string.

TOKEN_DEFINITIONS is the built-in registry. Primitive types map to
themselves; the token expander's cycle guard leaves them as leaves.
Alternative registries are plain dicts, or YAML files loaded with
load_definitions():

    "<length-percentage>": "<length> | <percentage>"
    ratio:
      syntax: "<number [0,∞]> [ / <number [0,∞]> ]"
"""
from pathlib import Path
from typing import Any

import yaml

from .errors import GrammarError

TOKEN_DEFINITIONS: dict[str, str] = {
    # primitives
    "<number>": "<number>",
    "<integer>": "<integer>",
    "<percentage>": "<percentage>",
    "<length>": "<length>",
    "<angle>": "<angle>",
    "<flex>": "<flex>",
    "<link>": "<link>",
    "<color>": "<color>",
    # composites
    "<length-percentage>": "<length>|<percentage>",
    "<ratio>": "<number [0,∞]> [ / <number [0,∞]> ]",
    "<image>": "url(<link>)",
    "<overflow-block>": "visible | hidden | clip | scroll | auto",
    # grid
    "<track-list>": "[<track-size>|<track-repeat>]+",
    "<track-size>": "[<track-breadth>|minmax(<inflexible-breadth>,<track-breadth>)|fit-content(<length-percentage [0,∞]>)]",
    "<track-breadth>": "<length-percentage [0,∞]>|<flex [0,∞]>|min-content|max-content|auto",
    "<inflexible-breadth>": "<length-percentage [0,∞]>|min-content|max-content|auto",
    "<track-repeat>": "repeat(<integer [1,∞]>,<track-size>+)",
    # transforms
    "<transform-function>": "<translate3d>|<rotate3d>|<scale3d>|<skew>|<perspective>",
    "<translate3d>": "translate3d(<length-percentage>,<length-percentage>,<length>)",
    "<rotate3d>": "rotate3d(<number>,<number>,<number>,<angle>)",
    "<scale3d>": "scale3d(<number>,<number>,<number>)",
    "<skew>": "skew(<angle>,<angle>)",
    "<perspective>": "perspective(<length [0,∞]>)",
    # fonts and text
    "<generic-family>": "<generic-complete>|<generic-incomplete>",
    "<generic-complete>": "serif|sans-serif|system-ui|cursive|fantasy|math|monospace",
    "<generic-incomplete>": "ui-serif|ui-sans-serif|ui-monospace|ui-rounded",
    "<text-decoration-line>": "none|underline|overline|line-through",
    "<text-decoration-style>": "solid|double|dotted|dashed|wavy",
    "<text-decoration-color>": "<color>",
    "<text-decoration-thickness>": "auto|from-font|<length-percentage>",
    # backgrounds and borders
    "<bg-size>": "<length-percentage [0,∞]>|auto|cover|contain",
    "<bg-position>": (
        "[left|center|right|top|bottom|<length-percentage>]"
        " | [[left|center|right|<length-percentage>] [top|center|bottom|<length-percentage>]]"
        " | [center|left|right <length-percentage> && center|top|bottom <length-percentage>]"
    ),
    "<bg-image>": "none|<image>",
    "<mix-blend-mode>": (
        "normal|multiply|screen|overlay|darken|lighten|color-dodge|color-burn|hard-light"
        "|soft-light|difference|exclusion|hue|saturation|color|luminosity"
    ),
    "<position>": "static|relative|absolute|fixed|sticky",
    "<border-image-source>": "none|<image>",
    "<border-image-slice>": "[<number [0,∞]>|<percentage [0,∞]>]{1,4}&&fill?",
    "<border-image-width>": "[<length-percentage [0,∞]>|<number [0,∞]>|auto]{1,4}",
    "<border-image-outset>": "[<length [0,∞]>|<number [0,∞]>]{1,4}",
    "<border-image-repeat>": "[stretch|repeat|round|space]{1,2}",
    "<line-style>": "none|hidden|dotted|dashed|solid|double|groove|ridge|inset|outset",
    "<line-width>": "<length [0,∞]>|thin|medium|thick",
    # effects
    "<filter-function>": (
        "blur(<length [0,∞]>)|brightness(<number [0,∞]>)|contrast(<number [0,∞]>)"
        "|drop-shadow(<length-percentage> <length-percentage> <length-percentage> <color>)"
        "|grayscale(<number [0,∞]>)|hue-rotate(<angle>)|invert(<number [0,∞]>)"
        "|opacity(<number [0,∞]>)|saturate(<number [0,∞]>)|sepia(<number [0,∞]>)"
    ),
    "<spread-shadow>": "<box-shadow-offset> <box-shadow-blur> <box-shadow-spread> <box-shadow-color> <box-shadow-position>?",
    "<box-shadow-position>": "inset",
    "<box-shadow-color>": "<color>",
    "<box-shadow-offset>": "<length> <length>",
    "<box-shadow-blur>": "<length [0,∞]>",
    "<box-shadow-spread>": "<length>",
}

# Primitive data types: always acceptable in expansion results even when a
# registry has no entry for them.
PRIMITIVE_TYPES = ("length", "angle", "percentage", "number", "integer", "flex")


# ============================================================
# YAML loading
# ============================================================

# Module-level cache for loaded registry files
_DEFINITIONS_CACHE: dict[str, dict[str, str]] = {}


def canonical_key(name: str) -> str:
    """'length' / '<length>' -> '<length>'"""
    name = name.strip()
    if name.startswith("<") and name.endswith(">"):
        return name
    return f"<{name}>"


def _entry_syntax(key: str, entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict) and isinstance(entry.get("syntax"), str):
        return entry["syntax"]
    raise GrammarError(f"definition {key!r} must be a syntax string or a mapping with 'syntax'")


def load_definitions(path: str | Path, *, merge: bool = False) -> dict[str, str]:
    """
    Load a data-type registry from a YAML mapping.

    Args:
        path: Path to the YAML file
        merge: If True, entries are layered over TOKEN_DEFINITIONS

    Returns:
        Dict of canonical token -> syntax

    Raises:
        FileNotFoundError: If the file doesn't exist
        GrammarError: If the file is not a mapping of definitions
    """
    path = Path(path)
    path_str = str(path.resolve())

    if path_str not in _DEFINITIONS_CACHE:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise GrammarError(f"invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise GrammarError(f"{path}: expected a mapping of data-type definitions")

        _DEFINITIONS_CACHE[path_str] = {
            canonical_key(str(k)): _entry_syntax(str(k), v) for k, v in data.items()
        }

    loaded = _DEFINITIONS_CACHE[path_str]
    if merge:
        return {**TOKEN_DEFINITIONS, **loaded}
    return dict(loaded)


def clear_cache() -> None:
    """Clear the registry file cache."""
    _DEFINITIONS_CACHE.clear()
