"""Tests for vdsparser.properties module."""

import os
import tempfile

import pytest

from vdsparser.diagnostics import check_syntax
from vdsparser.errors import GrammarError
from vdsparser.properties import (
    PROPERTY_DEFINITIONS,
    Property,
    create_property,
    get_property,
    load_properties,
    clear_cache,
)

N = "<number [0,∞]>"


@pytest.fixture
def properties_file():
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False, encoding="utf-8") as f:
        f.write('width: "auto | <length>"\n')
        f.write("opacity:\n")
        f.write('  syntax: "<number [0,1]>"\n')
        f.write("  description: Opacity of the element\n")
        path = f.name
    yield path
    os.unlink(path)
    clear_cache()


class TestGetProperty:
    def test_unknown(self):
        assert get_property("no-such-property") is None

    def test_width(self):
        prop = get_property("width")
        assert isinstance(prop, Property)
        assert prop.syntax_parsed == [
            "auto",
            "min-content",
            "max-content",
            "fit-content",
            "<length [0,∞]>",
            "<percentage [0,∞]>",
        ]

    def test_width_views(self):
        prop = get_property("width")
        assert prop.syntax_set == [prop.syntax_parsed]
        assert prop.syntax_normalized == [
            "auto",
            "min-content",
            "max-content",
            "fit-content",
            "<length>",
            "<percentage>",
        ]
        assert prop.syntax_separators == [[]] * 6

    def test_aspect_ratio(self):
        prop = get_property("aspect-ratio")
        assert prop.syntax_expanded == f"auto || {N} [ / {N} ]"
        assert prop.syntax_parsed == [
            "auto",
            N,
            f"auto {N}",
            f"{N} auto",
            f"{N} / {N}",
            f"auto {N} / {N}",
            f"{N} / {N} auto",
        ]
        assert prop.syntax_separators[5] == [" ", "/"]
        assert prop.syntax_separators[6] == ["/", " "]

    def test_padding_repeats_whole_data_type(self):
        prop = get_property("padding")
        assert prop.syntax_expanded == "[<length [0,∞]>|<percentage [0,∞]>]{1,4}"
        parsed = prop.syntax_parsed
        assert "<length [0,∞]> <length [0,∞]>" in parsed
        assert "<length [0,∞]> <percentage [0,∞]> <length [0,∞]> <percentage [0,∞]>" in parsed
        assert len(parsed) == 2 + 4 + 8 + 16

    def test_custom_table(self):
        table = {"foo": {"syntax": "a|b", "description": "d"}}
        prop = get_property("foo", table)
        assert prop.description == "d"
        assert prop.syntax_parsed == ["a", "b"]

    def test_depth(self):
        prop = get_property("grid-auto-rows", {"grid-auto-rows": "a+"}, depth=3)
        assert prop.syntax_parsed == ["a", "a a", "a a a"]

    def test_bad_entry(self):
        with pytest.raises(GrammarError):
            get_property("foo", {"foo": 3})

    def test_builtin_grammars_are_clean(self):
        for name, syntax in PROPERTY_DEFINITIONS.items():
            assert check_syntax(syntax) == [], name


class TestProperty:
    def test_views_memoized(self):
        prop = create_property("x", "a | b")
        first = prop.syntax_parsed
        assert prop.syntax_parsed is first

    def test_parsed(self):
        assert create_property("x", "a | b").syntax_parsed == ["a", "b"]

    def test_syntax_set(self):
        assert create_property("x", "a b | c").syntax_set == [["c", "a"], ["b"]]

    def test_normalized(self):
        prop = create_property("x", "<length [0,10]> <color>")
        assert prop.syntax_parsed == ["<length [0,10]> <color>"]
        assert prop.syntax_normalized == ["<length> <color>"]
        assert prop.syntax_separators == [[" "]]

    def test_unknown_tokens_filtered(self):
        assert create_property("x", "auto | <nope>").syntax_parsed == ["auto"]

    def test_custom_definitions(self):
        prop = create_property("x", "<thing>", definitions={"<thing>": "a|b"})
        assert prop.syntax_expanded == "a|b"
        assert prop.syntax_parsed == ["a", "b"]


class TestLoadProperties:
    def test_load(self, properties_file):
        table = load_properties(properties_file)
        assert table == {
            "width": {"syntax": "auto | <length>", "description": ""},
            "opacity": {"syntax": "<number [0,1]>", "description": "Opacity of the element"},
        }

    def test_get_from_loaded(self, properties_file):
        prop = get_property("width", load_properties(properties_file))
        assert prop.syntax_parsed == ["auto", "<length>"]

    def test_returns_copy(self, properties_file):
        table = load_properties(properties_file)
        table["width"]["syntax"] = "none"
        table["height"] = {"syntax": "auto", "description": ""}
        fresh = load_properties(properties_file)
        assert fresh["width"]["syntax"] == "auto | <length>"
        assert "height" not in fresh

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_properties("/nonexistent/properties.yml")
