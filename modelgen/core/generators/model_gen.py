from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from modelgen.core.models import ColumnDescriptor, FieldDescriptor, ModelStruct
from modelgen.core.naming import camel_case
from modelgen.core.observability.metrics import record_render
from modelgen.core.synthesis import DEFAULT_PACKAGE_NAME, build_model_struct
from modelgen.core.type_map import UNKNOWN_TYPE

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
MODEL_TEMPLATE = "go/model.go.j2"

_log = logging.getLogger("modelgen.generator")


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=()),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def field_line(f: FieldDescriptor) -> str:
    if f.is_marker:
        return f"\t{f.name}"
    line = f"\t{f.name} {f.type_name}"
    if f.tags:
        line += " `" + " ".join(f.tags) + "`"
    return line


def column_field_name(column: str) -> str:
    name = camel_case(column)
    # Unreachable via camel_case, which upper-cases id segments itself.
    if name == "Id":
        name = name.upper()
    return name


def column_fields(column_names: Sequence[str]) -> List[Tuple[str, str]]:
    return [(column_field_name(c), c) for c in column_names]


def render_model(struct_name: str, table_name: str, model: ModelStruct) -> str:
    """Render the Go model file for an already-built ModelStruct."""
    template = _environment().get_template(MODEL_TEMPLATE)
    return template.render(
        package_name=model.package_name,
        imports=list(model.imports),
        struct_name=struct_name,
        table_name=table_name,
        field_lines=[field_line(f) for f in model.fields],
        column_fields=column_fields(model.column_names),
    )


def model_file_name(table_name: str) -> str:
    return f"{table_name}.go"


@dataclass(frozen=True)
class RenderedModel:
    struct_name: str
    file_name: str
    model: ModelStruct
    code: str


def render_table_model(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    package_name: str = DEFAULT_PACKAGE_NAME,
    source: str = "cli",
) -> RenderedModel:
    """Build, render and account for one table's model."""
    model = build_model_struct(columns, package_name=package_name)
    unmapped = [f.name for f in model.fields if not f.is_marker and f.type_name == UNKNOWN_TYPE]
    if unmapped:
        _log.warning("No Go type for columns of %s: %s", table_name, ", ".join(unmapped))

    struct_name = camel_case(table_name)
    code = render_model(struct_name, table_name, model)
    record_render(source, len(unmapped))
    _log.info(
        "Rendered model for %s (%d columns, %d fields, %d imports)",
        table_name,
        len(model.column_names),
        len(model.fields),
        len(model.imports),
    )
    return RenderedModel(
        struct_name=struct_name,
        file_name=model_file_name(table_name),
        model=model,
        code=code,
    )


def generate_model(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    package_name: str = DEFAULT_PACKAGE_NAME,
    source: str = "cli",
) -> Dict[str, str]:
    """
    Canonical model generator.

    Returns:
      {"<table_name>.go": "<go source>"}
    """
    rendered = render_table_model(table_name, columns, package_name=package_name, source=source)
    return {rendered.file_name: rendered.code}
