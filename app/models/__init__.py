# app/models/__init__.py
from app.core.database import Base  # re-export for convenience

# Import all model modules so their tables attach to Base.metadata
from app.models.fabric import FabricInstallation, STATUS_IN_OPERATION, STATUS_REPLACED
from app.models.anomaly import Anomaly

__all__ = [
    "Base",
    "FabricInstallation",
    "Anomaly",
    "STATUS_IN_OPERATION",
    "STATUS_REPLACED",
]
