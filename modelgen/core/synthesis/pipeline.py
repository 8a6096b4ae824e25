from __future__ import annotations

from typing import Sequence

from modelgen.core.models import ColumnDescriptor, ModelStruct
from modelgen.core.synthesis.fields import synthesize_fields
from modelgen.core.synthesis.folding import fold_convention_fields
from modelgen.core.synthesis.imports import resolve_imports

DEFAULT_PACKAGE_NAME = "models"


def build_model_struct(
    columns: Sequence[ColumnDescriptor],
    package_name: str = DEFAULT_PACKAGE_NAME,
) -> ModelStruct:
    """columns -> fields -> folded fields -> imports, as one pure pass."""
    fields = fold_convention_fields(synthesize_fields(columns))
    return ModelStruct(
        package_name=package_name,
        imports=resolve_imports(fields),
        fields=fields,
        column_names=tuple(c.name for c in columns),
    )
