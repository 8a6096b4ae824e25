from __future__ import annotations

import logging
import re
from typing import List, Union

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Dialect, Engine
from sqlalchemy.exc import CompileError, NoSuchTableError, SQLAlchemyError
from sqlalchemy.types import TypeEngine

from modelgen.core.models import ColumnDescriptor
from modelgen.errors import CatalogError, TableNotFoundError

_log = logging.getLogger("modelgen.catalog")

# Column attributes MySQL appends after the type itself.
_TYPE_ATTRIBUTES = re.compile(r"\s+(?:character set|charset|collate|ascii|unicode|binary)\b.*$", re.DOTALL)


def column_type_name(type_: TypeEngine, dialect: Dialect) -> str:
    """
    Bare, lower-cased column type as the dialect spells it
    (``varchar(255)``, ``bigint unsigned``), without charset or collation.
    """
    try:
        compiled = str(type_.compile(dialect=dialect))
    except CompileError:
        compiled = type(type_).__name__
    return _TYPE_ATTRIBUTES.sub("", compiled.lower())


class SqlSchemaCatalog:
    """
    Schema catalog backed by SQLAlchemy's runtime inspector.

    Column types are reported lower-cased as the database dialect spells them
    (``varchar(255)``, ``bigint unsigned``, ``datetime``).
    """

    def __init__(self, bind: Union[str, Engine]):
        self._owns_engine = isinstance(bind, str)
        try:
            self._engine: Engine = create_engine(bind) if isinstance(bind, str) else bind
        except (SQLAlchemyError, ImportError, ValueError) as exc:
            raise CatalogError(f"Cannot open database {bind!r}: {exc}") from exc

    def __enter__(self) -> "SqlSchemaCatalog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_engine:
            self._engine.dispose()

    def list_tables(self) -> List[str]:
        try:
            return list(inspect(self._engine).get_table_names())
        except SQLAlchemyError as exc:
            raise CatalogError(f"Failed to list tables: {exc}") from exc

    def columns_of(self, table: str) -> List[ColumnDescriptor]:
        try:
            inspector = inspect(self._engine)
            if not inspector.has_table(table):
                raise TableNotFoundError(table)
            raw = inspector.get_columns(table)
        except NoSuchTableError as exc:
            raise TableNotFoundError(table) from exc
        except SQLAlchemyError as exc:
            raise CatalogError(f"Failed to get columns: {exc}") from exc

        dialect = self._engine.dialect
        columns = [ColumnDescriptor(name=c["name"], sql_type=column_type_name(c["type"], dialect)) for c in raw]
        _log.debug("Read %d columns from %s", len(columns), table)
        return columns

