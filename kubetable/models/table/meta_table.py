"""Server-side table response models.

The API server can answer list calls with a ready-made table: column
definitions plus one row of cells per object.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ColumnDefinition(BaseModel):
    """One server-side column."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str = "string"
    format: str = ""
    description: str = ""
    priority: int = 0


class ObjectMeta(BaseModel):
    """Identity of the object behind a table row."""

    name: str
    namespace: str = ""


class MetaTableRow(BaseModel):
    """Cells of one row plus the object it describes."""

    cells: list[Any] = Field(default_factory=list)
    object: ObjectMeta


class MetaTable(BaseModel):
    """Server-side table response."""

    model_config = ConfigDict(populate_by_name=True)

    column_definitions: list[ColumnDefinition] = Field(
        default_factory=list, alias="columnDefinitions"
    )
    rows: list[MetaTableRow] = Field(default_factory=list)
