import os

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.core.config import Settings
from app.schemas.common import HealthOut
from app.services.deps import get_settings

STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static")

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthOut)
def health(settings: Settings = Depends(get_settings)):
    return HealthOut(
        message="Sistema de inspeção na nuvem funcionando!",
        environment=settings.environment_name,
    )

@router.get("/", include_in_schema=False)
def index():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"), media_type="text/html")
