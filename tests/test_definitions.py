"""Tests for vdsparser.definitions module."""

import os
import tempfile

import pytest

from vdsparser.definitions import (
    TOKEN_DEFINITIONS,
    PRIMITIVE_TYPES,
    canonical_key,
    load_definitions,
    clear_cache,
)
from vdsparser.diagnostics import check_syntax
from vdsparser.errors import GrammarError


def _write(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return f.name


@pytest.fixture
def registry_file():
    path = _write(
        'length-percentage: "<length>|<percentage>"\n'
        '"<ratio>":\n'
        '  syntax: "<number>"\n'
        '  description: "two numbers"\n'
    )
    yield path
    os.unlink(path)
    clear_cache()


class TestBuiltins:
    def test_primitives_map_to_themselves(self):
        for name in PRIMITIVE_TYPES:
            assert TOKEN_DEFINITIONS[f"<{name}>"] == f"<{name}>"

    def test_keys_are_canonical(self):
        assert all(k.startswith("<") and k.endswith(">") for k in TOKEN_DEFINITIONS)

    def test_definitions_are_clean(self):
        for key, syntax in TOKEN_DEFINITIONS.items():
            assert check_syntax(syntax) == [], key


class TestCanonicalKey:
    def test_bare(self):
        assert canonical_key("length") == "<length>"

    def test_bracketed(self):
        assert canonical_key(" <length> ") == "<length>"


class TestLoadDefinitions:
    def test_load(self, registry_file):
        defs = load_definitions(registry_file)
        assert defs == {
            "<length-percentage>": "<length>|<percentage>",
            "<ratio>": "<number>",
        }

    def test_merge(self, registry_file):
        defs = load_definitions(registry_file, merge=True)
        assert defs["<ratio>"] == "<number>"
        assert defs["<color>"] == TOKEN_DEFINITIONS["<color>"]

    def test_cached_until_cleared(self, registry_file):
        assert load_definitions(registry_file)["<ratio>"] == "<number>"
        with open(registry_file, "w", encoding="utf-8") as f:
            f.write('ratio: "<integer>"\n')
        assert load_definitions(registry_file)["<ratio>"] == "<number>"
        clear_cache()
        assert load_definitions(registry_file) == {"<ratio>": "<integer>"}

    def test_returns_copy(self, registry_file):
        defs = load_definitions(registry_file)
        defs["<x>"] = "y"
        assert "<x>" not in load_definitions(registry_file)

    def test_empty_file(self):
        path = _write("")
        try:
            assert load_definitions(path) == {}
        finally:
            os.unlink(path)
            clear_cache()

    def test_not_a_mapping(self):
        path = _write("- a\n- b\n")
        try:
            with pytest.raises(GrammarError, match="expected a mapping"):
                load_definitions(path)
        finally:
            os.unlink(path)
            clear_cache()

    def test_bad_entry(self):
        path = _write("ratio: 3\n")
        try:
            with pytest.raises(GrammarError, match="syntax"):
                load_definitions(path)
        finally:
            os.unlink(path)
            clear_cache()

    def test_invalid_yaml(self):
        path = _write("a: [\n")
        try:
            with pytest.raises(GrammarError, match="invalid YAML"):
                load_definitions(path)
        finally:
            os.unlink(path)
            clear_cache()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_definitions("/nonexistent/definitions.yml")
