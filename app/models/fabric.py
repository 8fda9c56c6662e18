# app/models/fabric.py
from sqlalchemy import CheckConstraint, Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from app.core.database import Base

STATUS_IN_OPERATION = "em_operacao"
STATUS_REPLACED = "substituido"
FabricStatus = (STATUS_IN_OPERATION, STATUS_REPLACED)


class FabricInstallation(Base):
    __tablename__ = "tecidos"

    code = Column("codigo", String(64), primary_key=True)
    filter_index = Column("filtro", Integer, nullable=False)
    board_index = Column("placa", Integer, nullable=False)
    side = Column("lado", String(32), nullable=False)
    installed_at = Column("instalado_em", DateTime(timezone=True), nullable=False)
    installer = Column("instalador", String(120), nullable=False)
    notes = Column("observacoes", Text)
    status = Column(String(20), nullable=False, default=STATUS_IN_OPERATION, server_default=STATUS_IN_OPERATION)
    removed_at = Column("removido_em", DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in FabricStatus) + ")",
            name="ck_tecidos_status",
        ),
    )


# At most one fabric in operation per (filter, board, side)
Index(
    "uq_tecidos_active_position",
    FabricInstallation.filter_index,
    FabricInstallation.board_index,
    FabricInstallation.side,
    unique=True,
    postgresql_where=FabricInstallation.status == STATUS_IN_OPERATION,
    sqlite_where=FabricInstallation.status == STATUS_IN_OPERATION,
)
