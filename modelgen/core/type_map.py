from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# SQL column type (without length suffix) -> Go type used in the model struct.
# Lookups are case-sensitive; catalogs report lower-case type names.
SQL_TO_GO_TYPE: Mapping[str, str] = MappingProxyType(
    {
        "int": "int64",
        "integer": "int64",
        "tinyint": "int64",
        "smallint": "int64",
        "mediumint": "int64",
        "bigint": "int64",
        "int unsigned": "int64",
        "integer unsigned": "int64",
        "tinyint unsigned": "int64",
        "smallint unsigned": "int64",
        "mediumint unsigned": "int64",
        "bigint unsigned": "int64",
        "bit": "int64",
        "bool": "bool",
        "enum": "string",
        "set": "string",
        "varchar": "string",
        "char": "string",
        "tinytext": "string",
        "mediumtext": "string",
        "text": "string",
        "longtext": "string",
        "blob": "string",
        "tinyblob": "string",
        "mediumblob": "string",
        "longblob": "string",
        "date": "carbon.Date",
        "datetime": "carbon.DateTime",
        "timestamp": "carbon.Timestamp",
        "time": "string",
        "float": "float64",
        "double": "float64",
        "decimal": "float64",
        "binary": "string",
        "varbinary": "string",
        "json": "json.RawMessage",
    }
)

UNKNOWN_TYPE = ""


def strip_type_length(sql_type: str) -> str:
    """``varchar(32)`` -> ``varchar``; ``bigint(20) unsigned`` -> ``bigint``."""
    idx = sql_type.find("(")
    if idx == -1:
        return sql_type
    return sql_type[:idx]


def resolve_go_type(sql_type: str) -> str:
    """
    Map a SQL column type to its Go type.

    Unknown types resolve to the empty string so a table with exotic columns
    still produces a (partially typed) model instead of failing.
    """
    return SQL_TO_GO_TYPE.get(strip_type_length(sql_type), UNKNOWN_TYPE)
