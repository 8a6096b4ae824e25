"""
Convention folding.

Goravel models embed ``orm.Model`` (id + created_at + updated_at),
``orm.Timestamps`` (created_at + updated_at) and ``orm.SoftDeletes``
(deleted_at) instead of declaring those columns one by one. This module
swaps the matching synthesized fields for those embedded markers.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Set, Tuple

from modelgen.core.models import (
    MODEL_MARKER,
    SOFT_DELETES_MARKER,
    TIMESTAMPS_MARKER,
    FieldDescriptor,
)

ID_FIELD = "ID"
CREATED_AT_FIELD = "CreatedAt"
UPDATED_AT_FIELD = "UpdatedAt"
DELETED_AT_FIELD = "DeletedAt"

_CONVENTION_FIELDS = (ID_FIELD, CREATED_AT_FIELD, UPDATED_AT_FIELD, DELETED_AT_FIELD)


def _locate(fields: Sequence[FieldDescriptor]) -> Dict[str, int]:
    positions: Dict[str, int] = {}
    for i, f in enumerate(fields):
        if f.name in _CONVENTION_FIELDS:
            positions.setdefault(f.name, i)
    return positions


def fold_convention_fields(fields: Sequence[FieldDescriptor]) -> Tuple[FieldDescriptor, ...]:
    """
    Return a new field sequence with convention columns collapsed.

    Soft delete is folded independently. Then the first matching rule wins:
    ID + CreatedAt + UpdatedAt -> orm.Model at the ID position; otherwise
    CreatedAt + UpdatedAt -> orm.Timestamps at the UpdatedAt position.
    """
    pos = _locate(fields)
    replace: Dict[int, FieldDescriptor] = {}
    drop: Set[int] = set()

    if DELETED_AT_FIELD in pos:
        replace[pos[DELETED_AT_FIELD]] = FieldDescriptor.marker(SOFT_DELETES_MARKER)

    if all(name in pos for name in (ID_FIELD, CREATED_AT_FIELD, UPDATED_AT_FIELD)):
        replace[pos[ID_FIELD]] = FieldDescriptor.marker(MODEL_MARKER)
        drop.update((pos[CREATED_AT_FIELD], pos[UPDATED_AT_FIELD]))
    elif CREATED_AT_FIELD in pos and UPDATED_AT_FIELD in pos:
        drop.add(pos[CREATED_AT_FIELD])
        replace[pos[UPDATED_AT_FIELD]] = FieldDescriptor.marker(TIMESTAMPS_MARKER)

    folded: List[FieldDescriptor] = []
    for i, f in enumerate(fields):
        if i in drop:
            continue
        folded.append(replace.get(i, f))
    return tuple(folded)
