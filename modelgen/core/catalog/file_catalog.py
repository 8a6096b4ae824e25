"""
Schema catalog read from a YAML/JSON document.

Format:
    tables:
      users:
        - {name: id, type: "bigint(20) unsigned"}
        - {name: name, type: "varchar(255)"}
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from modelgen.core.models import ColumnDescriptor
from modelgen.errors import CatalogError, TableNotFoundError


def _column(table: str, raw: Any) -> ColumnDescriptor:
    if not isinstance(raw, dict) or "name" not in raw:
        raise CatalogError(f"Invalid column entry in table {table}: {raw!r}")
    sql_type = raw.get("type", raw.get("sql_type", ""))
    return ColumnDescriptor(name=str(raw["name"]), sql_type=str(sql_type or ""))


class FileSchemaCatalog:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._tables = self._load()

    def _load(self) -> Dict[str, List[ColumnDescriptor]]:
        try:
            raw_text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read schema file {self.path}: {exc}") from exc

        try:
            if self.path.suffix.lower() == ".json":
                data = json.loads(raw_text)
            else:
                data = yaml.safe_load(raw_text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise CatalogError(f"Malformed schema file {self.path}: {exc}") from exc

        tables = data.get("tables") if isinstance(data, dict) else None
        if not isinstance(tables, dict):
            raise CatalogError(f"Schema file {self.path} must contain a 'tables' mapping")

        return {str(name): [_column(str(name), c) for c in (cols or [])] for name, cols in tables.items()}

    def close(self) -> None:
        pass

    def list_tables(self) -> List[str]:
        return list(self._tables)

    def columns_of(self, table: str) -> List[ColumnDescriptor]:
        try:
            return list(self._tables[table])
        except KeyError:
            raise TableNotFoundError(table) from None
