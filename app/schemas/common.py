from datetime import datetime, timezone
from typing import Any, List, Optional
from pydantic import BaseModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware values are converted to UTC; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ActionResult(BaseModel):
    success: bool = True
    message: str


class ErrorOut(BaseModel):
    error: str
    details: Optional[List[Any]] = None


class HealthOut(BaseModel):
    status: str = "OK"
    message: str
    environment: str
