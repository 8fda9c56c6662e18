from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import as_utc


class AnomalyIn(BaseModel):
    fabric_code: str = Field(..., alias="tecido_codigo", min_length=1, max_length=64)
    observed_at: Optional[datetime] = Field(None, alias="data")
    quadrant: str = Field(..., alias="quadrante", min_length=1, max_length=32)
    condition: str = Field(..., alias="condicao", min_length=1, max_length=120)
    observer: str = Field(..., alias="responsavel", min_length=1, max_length=120)
    notes: Optional[str] = Field(None, alias="observacoes")

    @field_validator("observed_at")
    @classmethod
    def observed_at_utc(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class AnomalyOut(BaseModel):
    id: int
    fabric_code: str = Field(serialization_alias="tecido_codigo")
    observed_at: datetime = Field(serialization_alias="data")
    quadrant: str = Field(serialization_alias="quadrante")
    condition: str = Field(serialization_alias="condicao")
    observer: str = Field(serialization_alias="responsavel")
    notes: Optional[str] = Field(None, serialization_alias="observacoes")
    logged_at: Optional[datetime] = Field(None, serialization_alias="timestamp")

    @field_validator("observed_at", "logged_at")
    @classmethod
    def timestamps_utc(cls, v):
        return as_utc(v)

    class Config: from_attributes = True
