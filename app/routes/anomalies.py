from typing import List

from fastapi import APIRouter, Depends

from app.schemas.anomaly import AnomalyIn, AnomalyOut
from app.schemas.common import ActionResult, ErrorOut
from app.services.anomalies import AnomalyLog
from app.services.deps import get_anomaly_log

router = APIRouter(prefix="/api/anomalias", tags=["anomalias"])


@router.get("", response_model=List[AnomalyOut], responses={500: {"model": ErrorOut}})
def list_anomalies(log: AnomalyLog = Depends(get_anomaly_log)):
    return log.list_anomalies()

@router.post("", response_model=ActionResult, responses={500: {"model": ErrorOut}})
def report_anomaly(payload: AnomalyIn, log: AnomalyLog = Depends(get_anomaly_log)):
    log.report(payload)
    return ActionResult(message="Anomalia registrada com sucesso!")
