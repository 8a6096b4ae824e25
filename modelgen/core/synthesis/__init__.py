from .fields import synthesize_field, synthesize_fields
from .folding import fold_convention_fields
from .imports import resolve_imports
from .pipeline import DEFAULT_PACKAGE_NAME, build_model_struct

__all__ = [
    "DEFAULT_PACKAGE_NAME",
    "build_model_struct",
    "fold_convention_fields",
    "resolve_imports",
    "synthesize_field",
    "synthesize_fields",
]
