from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ColumnModel(BaseModel):
    name: str = Field(..., min_length=1, description="Raw column name")
    sql_type: str = Field("", description="Column type as reported by the database, e.g. varchar(255)")


class RenderModelRequest(BaseModel):
    table_name: str = Field(..., min_length=1)
    package_name: Optional[str] = Field(default=None, description="Go package; defaults to settings")
    columns: List[ColumnModel] = Field(default_factory=list)


class FieldModel(BaseModel):
    name: str
    type_name: str = ""
    tags: List[str] = Field(default_factory=list)
    marker: bool = False


class RenderModelResponse(BaseModel):
    struct_name: str
    file_name: str
    package_name: str
    imports: List[str]
    fields: List[FieldModel]
    source: str
