"""
Unit tests for the column type mapping table.

Covers every known source type token plus the permissive fallback for
unrecognized tokens.
"""

import pytest

from dbd_converter.mapping.type_mapping import (
    resolve_column_type,
    is_known_type,
    ResolvedType,
    TYPE_MAPPING,
)


@pytest.mark.parametrize("source_type, declared_size, expected", [
    ("INTEGER", None, ResolvedType("integer", 4)),
    ("STRING", "255", ResolvedType("string", "255")),
    ("CHAR", None, ResolvedType("string", 1)),
    ("TEXT", None, ResolvedType("string", 4000)),
    ("TIMESTAMP", None, ResolvedType("timestamp", None)),
    ("DATE", None, ResolvedType("date", None)),
    ("DATETIME", None, ResolvedType("datetime", None)),
    ("FLOAT", None, ResolvedType("float", None)),
    ("BOOLEAN", None, ResolvedType("boolean", None)),
    ("BLOB", None, ResolvedType("", None)),
])
def test_mapping_table(source_type, declared_size, expected):
    assert resolve_column_type(source_type, declared_size) == expected


def test_mapping_table_has_nine_known_types():
    assert sorted(TYPE_MAPPING) == sorted([
        "INTEGER", "STRING", "CHAR", "TEXT", "TIMESTAMP", "DATE", "DATETIME", "FLOAT", "BOOLEAN"
    ])


class TestIntegerSize:
    """INTEGER keeps a declared non-zero size and defaults to 4 otherwise."""

    def test_declared_size_passes_through_unchanged(self):
        assert resolve_column_type("INTEGER", "10").size == "10"

    @pytest.mark.parametrize("declared_size", [None, "", "0"])
    def test_missing_or_zero_size_defaults_to_four(self, declared_size):
        assert resolve_column_type("INTEGER", declared_size).size == 4


class TestStringSize:

    def test_empty_size_is_kept(self):
        assert resolve_column_type("STRING", "").size == ""

    def test_absent_size_renders_as_empty(self):
        assert resolve_column_type("STRING", None).size == ""


def test_fixed_sizes_ignore_declared_size():
    assert resolve_column_type("CHAR", "20").size == 1
    assert resolve_column_type("TEXT", "20").size == 4000


def test_sizeless_types_ignore_declared_size():
    assert resolve_column_type("DATE", "8").size is None


@pytest.mark.parametrize("token", [None, "", "integer", "VARCHAR", "ENUM"])
def test_unknown_tokens_degrade_to_empty_type(token):
    resolved = resolve_column_type(token, "12")
    assert resolved.type == ""
    assert resolved.size is None
    assert not is_known_type(token)


def test_is_known_type():
    assert is_known_type("BOOLEAN")
    assert not is_known_type("boolean")
