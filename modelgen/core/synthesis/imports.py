from __future__ import annotations

from typing import List, Sequence, Tuple

from modelgen.core.models import FieldDescriptor

CARBON_IMPORT = "github.com/goravel/framework/support/carbon"
ORM_IMPORT = "github.com/goravel/framework/database/orm"
JSON_IMPORT = "encoding/json"


def _field_imports(f: FieldDescriptor) -> List[str]:
    out: List[str] = []
    if "carbon" in f.type_name:
        out.append(CARBON_IMPORT)
    if f.type_name.startswith("json."):
        out.append(JSON_IMPORT)
    if f.is_marker:
        out.append(ORM_IMPORT)
    return out


def resolve_imports(fields: Sequence[FieldDescriptor]) -> Tuple[str, ...]:
    """Import paths needed by the (folded) fields, deduplicated in first-seen order."""
    seen: List[str] = []
    for f in fields:
        for pkg in _field_imports(f):
            if pkg not in seen:
                seen.append(pkg)
    return tuple(seen)
