# app/services/anomalies.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.anomaly import Anomaly
from app.schemas.anomaly import AnomalyIn

logger = logging.getLogger("inspection.anomalies")
logger.setLevel(logging.INFO)


class AnomalyLog:
    """Append-only log of anomalies observed on installed fabrics."""

    def __init__(self, db: Session):
        self.db = db

    def list_anomalies(self) -> List[Anomaly]:
        stmt = select(Anomaly).order_by(Anomaly.observed_at.desc(), Anomaly.id.desc())
        return list(self.db.scalars(stmt).all())

    def report(self, payload: AnomalyIn) -> Anomaly:
        # No check that fabric_code exists or is still in operation
        entry = Anomaly(
            fabric_code=payload.fabric_code,
            observed_at=payload.observed_at or datetime.now(timezone.utc),
            quadrant=payload.quadrant,
            condition=payload.condition,
            observer=payload.observer,
            notes=payload.notes,
        )
        try:
            self.db.add(entry)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(entry)
        logger.info(f"Anomaly {entry.id} logged for fabric {entry.fabric_code}: {entry.condition} @ {entry.quadrant}")
        return entry
