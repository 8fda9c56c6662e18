# app/models/anomaly.py
from __future__ import annotations
from datetime import datetime
from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from app.core.database import Base


# Append-only. No foreign key: anomalies may name unknown fabric codes
class Anomaly(Base):
    __tablename__ = "anomalias"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fabric_code: Mapped[str] = mapped_column("tecido_codigo", String(64), nullable=False, index=True)
    observed_at: Mapped[datetime] = mapped_column("data", DateTime(timezone=True), nullable=False)
    quadrant: Mapped[str] = mapped_column("quadrante", String(32), nullable=False)
    condition: Mapped[str] = mapped_column("condicao", String(120), nullable=False)
    observer: Mapped[str] = mapped_column("responsavel", String(120), nullable=False)
    notes: Mapped[str | None] = mapped_column("observacoes", Text, nullable=True)
    logged_at: Mapped[datetime] = mapped_column("timestamp", DateTime(timezone=True), server_default=func.now(), nullable=False)
