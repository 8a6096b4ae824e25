from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MARKER_PREFIX = "orm."

MODEL_MARKER = "orm.Model"
TIMESTAMPS_MARKER = "orm.Timestamps"
SOFT_DELETES_MARKER = "orm.SoftDeletes"


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    sql_type: str


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One line of the generated struct.

    Either a direct column mapping (type_name + tags) or a convention marker
    such as ``orm.Model`` that only carries a name.
    """

    name: str
    type_name: str = ""
    tags: Tuple[str, ...] = ()

    @property
    def is_marker(self) -> bool:
        return self.name.startswith(MARKER_PREFIX)

    @classmethod
    def marker(cls, name: str) -> "FieldDescriptor":
        return cls(name=name)


@dataclass(frozen=True)
class ModelStruct:
    package_name: str
    imports: Tuple[str, ...] = ()
    fields: Tuple[FieldDescriptor, ...] = ()
    # Raw column names in table order, kept even when a field was folded away.
    column_names: Tuple[str, ...] = ()

