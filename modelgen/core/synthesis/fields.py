from __future__ import annotations

from typing import List, Sequence, Tuple

from modelgen.core.models import ColumnDescriptor, FieldDescriptor
from modelgen.core.naming import camel_case, small_camel_case
from modelgen.core.type_map import resolve_go_type

PRIMARY_KEY_TAG = 'gorm:"primaryKey"'


def column_tags(column_name: str) -> Tuple[str, ...]:
    key = small_camel_case(column_name)
    tags: List[str] = [f'json:"{key}"', f'form:"{key}"']
    if column_name.lower() == "id":
        tags.append(PRIMARY_KEY_TAG)
    return tuple(tags)


def synthesize_field(column: ColumnDescriptor) -> FieldDescriptor:
    return FieldDescriptor(
        name=camel_case(column.name),
        type_name=resolve_go_type(column.sql_type),
        tags=column_tags(column.name),
    )


def synthesize_fields(columns: Sequence[ColumnDescriptor]) -> Tuple[FieldDescriptor, ...]:
    """One field per column, in column order."""
    return tuple(synthesize_field(c) for c in columns)
