from __future__ import annotations

from pathlib import Path
from typing import Union

from .base import SchemaCatalog
from .file_catalog import FileSchemaCatalog
from .sql_catalog import SqlSchemaCatalog, column_type_name

FILE_CATALOG_SUFFIXES = (".yaml", ".yml", ".json")


def open_catalog(source: Union[str, Path]) -> Union[FileSchemaCatalog, SqlSchemaCatalog]:
    """Schema files (.yaml/.yml/.json) open a FileSchemaCatalog; anything else is a database URL."""
    if isinstance(source, Path) or str(source).lower().endswith(FILE_CATALOG_SUFFIXES):
        return FileSchemaCatalog(Path(source))
    return SqlSchemaCatalog(str(source))


__all__ = ["FileSchemaCatalog", "SchemaCatalog", "SqlSchemaCatalog", "column_type_name", "open_catalog"]
