from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from modelgen.core.models import ColumnDescriptor


@runtime_checkable
class SchemaCatalog(Protocol):
    """Read-only view of a database schema."""

    def list_tables(self) -> List[str]: ...

    def columns_of(self, table: str) -> List[ColumnDescriptor]: ...

    def close(self) -> None: ...
