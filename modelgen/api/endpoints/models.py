from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from modelgen.api.schemas import FieldModel, RenderModelRequest, RenderModelResponse
from modelgen.config import ModelGenSettings, load_settings
from modelgen.core.catalog import open_catalog
from modelgen.core.generators.model_gen import render_table_model
from modelgen.core.models import ColumnDescriptor

router = APIRouter(prefix="/api/v1", tags=["models"])


def get_settings() -> ModelGenSettings:
    return load_settings()


def _render(table_name: str, package_name: str, columns: List[ColumnDescriptor]) -> RenderModelResponse:
    rendered = render_table_model(table_name, columns, package_name=package_name, source="api")
    model = rendered.model
    return RenderModelResponse(
        struct_name=rendered.struct_name,
        file_name=rendered.file_name,
        package_name=model.package_name,
        imports=list(model.imports),
        fields=[
            FieldModel(name=f.name, type_name=f.type_name, tags=list(f.tags), marker=f.is_marker)
            for f in model.fields
        ],
        source=rendered.code,
    )


@router.post("/models/render", response_model=RenderModelResponse)
def render_model(req: RenderModelRequest, settings: ModelGenSettings = Depends(get_settings)):
    columns = [ColumnDescriptor(name=c.name, sql_type=c.sql_type) for c in req.columns]
    return _render(req.table_name, req.package_name or settings.package_name, columns)


@router.get("/tables")
def list_tables(settings: ModelGenSettings = Depends(get_settings)):
    catalog = open_catalog(settings.database_url)
    try:
        return {"tables": catalog.list_tables()}
    finally:
        catalog.close()


@router.get("/tables/{table_name}/model", response_model=RenderModelResponse)
def table_model(table_name: str, settings: ModelGenSettings = Depends(get_settings)):
    catalog = open_catalog(settings.database_url)
    try:
        columns = catalog.columns_of(table_name)
    finally:
        catalog.close()
    return _render(table_name, settings.package_name, columns)
