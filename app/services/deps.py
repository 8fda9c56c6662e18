from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.services.anomalies import AnomalyLog
from app.services.positions import PositionRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_position_registry(db: Session = Depends(get_db)) -> PositionRegistry:
    return PositionRegistry(db)

def get_anomaly_log(db: Session = Depends(get_db)) -> AnomalyLog:
    return AnomalyLog(db)
