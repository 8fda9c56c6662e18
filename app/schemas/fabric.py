from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import as_utc


class FabricInstallIn(BaseModel):
    code: str = Field(..., alias="codigo", min_length=1, max_length=64)
    filter_index: int = Field(..., alias="filtro")
    board_index: int = Field(..., alias="placa")
    side: str = Field(..., alias="lado", min_length=1, max_length=32)
    installed_at: Optional[datetime] = Field(None, alias="instalado_em")
    installer: str = Field(..., alias="instalador", min_length=1, max_length=120)
    notes: Optional[str] = Field(None, alias="observacoes")

    # Stored as UTC so ordering holds across offsets
    @field_validator("installed_at")
    @classmethod
    def installed_at_utc(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class FabricOut(BaseModel):
    code: str = Field(serialization_alias="codigo")
    filter_index: int = Field(serialization_alias="filtro")
    board_index: int = Field(serialization_alias="placa")
    side: str = Field(serialization_alias="lado")
    installed_at: datetime = Field(serialization_alias="instalado_em")
    installer: str = Field(serialization_alias="instalador")
    notes: Optional[str] = Field(None, serialization_alias="observacoes")
    status: str
    removed_at: Optional[datetime] = Field(None, serialization_alias="removido_em")
    created_at: Optional[datetime] = None

    @field_validator("installed_at", "removed_at", "created_at")
    @classmethod
    def timestamps_utc(cls, v):
        return as_utc(v)

    class Config: from_attributes = True
