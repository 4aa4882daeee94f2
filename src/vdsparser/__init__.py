# -------------------------------------
# vdsparser
# -------------------------------------
"""
CSS Value Definition Syntax expander.

Turns grammars like "auto | <length> || <percentage>" into the list of
instantiation patterns they admit, inlining data types from a registry.

This package provides:
- Grammar expansion (expander)
- Data-type inlining and token helpers (tokens, definitions)
- Example values and separators (values)
- Per-property grammar views (properties)
- Authoring-time checks (diagnostics)

Imports are lazy so submodules can be run with python -m.
Use: from vdsparser import parse, expand_tokens, etc.
"""

__all__ = [
    # expander
    "MAX_MULTIPLIER_DEPTH",
    "normalize_syntax",
    "parse",
    "parse_comma",
    "parse_double_bar",
    "parse_double_amp",
    "parse_single_bar",
    "parse_sequence",
    "parse_brackets",
    "parse_brackets_multiplier",
    "parse_multiplier",
    "multiplier_range",
    "duplicate_token",
    # tokens
    "expand_tokens",
    "filter_tokens",
    "propagate_range",
    "merge_ranges",
    "parse_range",
    "token_canonical",
    "token_base",
    "token_range",
    "token_type",
    "token_param",
    # definitions
    "TOKEN_DEFINITIONS",
    "PRIMITIVE_TYPES",
    "load_definitions",
    # values
    "TOKEN_DEFAULTS",
    "materialize",
    "token_value",
    "token_values",
    "extract_separators",
    # properties
    "PROPERTY_DEFINITIONS",
    "Property",
    "create_property",
    "get_property",
    "load_properties",
    # diagnostics
    "check_syntax",
    "validate_syntax",
    # errors
    "GrammarError",
]

_LAZY_IMPORTS = {
    # expander
    "MAX_MULTIPLIER_DEPTH": (".expander", "MAX_MULTIPLIER_DEPTH"),
    "normalize_syntax": (".expander", "normalize_syntax"),
    "parse": (".expander", "parse"),
    "parse_comma": (".expander", "parse_comma"),
    "parse_double_bar": (".expander", "parse_double_bar"),
    "parse_double_amp": (".expander", "parse_double_amp"),
    "parse_single_bar": (".expander", "parse_single_bar"),
    "parse_sequence": (".expander", "parse_sequence"),
    "parse_brackets": (".expander", "parse_brackets"),
    "parse_brackets_multiplier": (".expander", "parse_brackets_multiplier"),
    "parse_multiplier": (".expander", "parse_multiplier"),
    "multiplier_range": (".expander", "multiplier_range"),
    "duplicate_token": (".expander", "duplicate_token"),
    # tokens
    "expand_tokens": (".tokens", "expand_tokens"),
    "filter_tokens": (".tokens", "filter_tokens"),
    "propagate_range": (".tokens", "propagate_range"),
    "merge_ranges": (".tokens", "merge_ranges"),
    "parse_range": (".tokens", "parse_range"),
    "token_canonical": (".tokens", "token_canonical"),
    "token_base": (".tokens", "token_base"),
    "token_range": (".tokens", "token_range"),
    "token_type": (".tokens", "token_type"),
    "token_param": (".tokens", "token_param"),
    # definitions
    "TOKEN_DEFINITIONS": (".definitions", "TOKEN_DEFINITIONS"),
    "PRIMITIVE_TYPES": (".definitions", "PRIMITIVE_TYPES"),
    "load_definitions": (".definitions", "load_definitions"),
    # values
    "TOKEN_DEFAULTS": (".values", "TOKEN_DEFAULTS"),
    "materialize": (".values", "materialize"),
    "token_value": (".values", "token_value"),
    "token_values": (".values", "token_values"),
    "extract_separators": (".values", "extract_separators"),
    # properties
    "PROPERTY_DEFINITIONS": (".properties", "PROPERTY_DEFINITIONS"),
    "Property": (".properties", "Property"),
    "create_property": (".properties", "create_property"),
    "get_property": (".properties", "get_property"),
    "load_properties": (".properties", "load_properties"),
    # diagnostics
    "check_syntax": (".diagnostics", "check_syntax"),
    "validate_syntax": (".diagnostics", "validate_syntax"),
    # errors
    "GrammarError": (".errors", "GrammarError"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_name, __package__)
        return getattr(module, attr_name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
