# app/services/positions.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.fabric import FabricInstallation, STATUS_IN_OPERATION, STATUS_REPLACED
from app.schemas.fabric import FabricInstallIn

logger = logging.getLogger("inspection.positions")
logger.setLevel(logging.INFO)


class DuplicateFabricCode(Exception):
    def __init__(self, code: str):
        super().__init__(f"Fabric code {code} already exists")
        self.code = code


class PositionRegistry:
    """
    Tracks which fabric occupies each (filter, board, side) position.

    Installing at an occupied position replaces the active fabric: the old
    row moves to `substituido` with `removido_em` stamped, and the new row
    becomes the one `em_operacao`. Both steps commit together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_installations(self) -> List[FabricInstallation]:
        stmt = select(FabricInstallation).order_by(
            FabricInstallation.installed_at.desc(),
            FabricInstallation.created_at.desc(),
        )
        return list(self.db.scalars(stmt).all())

    def active_at(self, filter_index: int, board_index: int, side: str, lock: bool = False) -> Optional[FabricInstallation]:
        stmt = select(FabricInstallation).where(
            FabricInstallation.filter_index == filter_index,
            FabricInstallation.board_index == board_index,
            FabricInstallation.side == side,
            FabricInstallation.status == STATUS_IN_OPERATION,
        )
        if lock:
            stmt = stmt.with_for_update()
        return self.db.scalars(stmt).first()

    def install(self, payload: FabricInstallIn) -> FabricInstallation:
        now = datetime.now(timezone.utc)
        try:
            # Codes are never reused, even after replacement
            if self.db.get(FabricInstallation, payload.code) is not None:
                raise DuplicateFabricCode(payload.code)

            previous = self.active_at(payload.filter_index, payload.board_index, payload.side, lock=True)
            if previous is not None:
                previous.status = STATUS_REPLACED
                previous.removed_at = now
                # The partial unique index must see the old row leave first
                self.db.flush()

            fabric = FabricInstallation(
                code=payload.code,
                filter_index=payload.filter_index,
                board_index=payload.board_index,
                side=payload.side,
                installed_at=payload.installed_at or now,
                installer=payload.installer,
                notes=payload.notes,
                status=STATUS_IN_OPERATION,
            )
            self.db.add(fabric)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(fabric)
        if previous is not None:
            logger.info(
                f"Fabric {fabric.code} installed at filter={fabric.filter_index} "
                f"board={fabric.board_index} side={fabric.side}, replacing {previous.code}"
            )
        else:
            logger.info(
                f"Fabric {fabric.code} installed at filter={fabric.filter_index} "
                f"board={fabric.board_index} side={fabric.side}"
            )
        return fabric
