from __future__ import annotations

import pytest

from modelgen.core.type_map import SQL_TO_GO_TYPE, UNKNOWN_TYPE, resolve_go_type, strip_type_length


def test_length_suffix_is_irrelevant():
    assert resolve_go_type("varchar(255)") == resolve_go_type("varchar") == "string"


def test_strip_type_length_drops_everything_after_paren():
    assert strip_type_length("decimal(10,2)") == "decimal"
    assert strip_type_length("bigint(20) unsigned") == "bigint"
    assert strip_type_length("text") == "text"


@pytest.mark.parametrize(
    "sql_type, go_type",
    [
        ("int", "int64"),
        ("bigint unsigned", "int64"),
        ("tinyint(1)", "int64"),
        ("bit", "int64"),
        ("bool", "bool"),
        ("enum('a','b')", "string"),
        ("longtext", "string"),
        ("varbinary(16)", "string"),
        ("date", "carbon.Date"),
        ("datetime", "carbon.DateTime"),
        ("timestamp", "carbon.Timestamp"),
        ("time", "string"),
        ("decimal(10,2)", "float64"),
        ("double", "float64"),
        ("json", "json.RawMessage"),
    ],
)
def test_known_types(sql_type: str, go_type: str):
    assert resolve_go_type(sql_type) == go_type


def test_unknown_type_resolves_to_empty_marker():
    assert resolve_go_type("geometry") == UNKNOWN_TYPE
    assert resolve_go_type("") == UNKNOWN_TYPE


def test_lookup_is_case_sensitive():
    assert resolve_go_type("VARCHAR(32)") == UNKNOWN_TYPE


def test_mapping_table_is_read_only():
    with pytest.raises(TypeError):
        SQL_TO_GO_TYPE["uuid"] = "string"  # type: ignore[index]
