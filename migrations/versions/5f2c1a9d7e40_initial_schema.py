"""Initial schema

Revision ID: 5f2c1a9d7e40
Revises:
Create Date: 2025-09-02 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5f2c1a9d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ----- Fabric installations -----
    op.create_table(
        "tecidos",
        sa.Column("codigo", sa.String(length=64), primary_key=True),
        sa.Column("filtro", sa.Integer(), nullable=False),
        sa.Column("placa", sa.Integer(), nullable=False),
        sa.Column("lado", sa.String(length=32), nullable=False),
        sa.Column("instalado_em", sa.DateTime(timezone=True), nullable=False),
        sa.Column("instalador", sa.String(length=120), nullable=False),
        sa.Column("observacoes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="em_operacao"),
        sa.Column("removido_em", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("status IN ('em_operacao', 'substituido')", name="ck_tecidos_status"),
    )
    # One fabric in operation per position (partial unique index)
    op.create_index(
        "uq_tecidos_active_position",
        "tecidos",
        ["filtro", "placa", "lado"],
        unique=True,
        postgresql_where=sa.text("status = 'em_operacao'"),
        sqlite_where=sa.text("status = 'em_operacao'"),
    )

    # ----- Anomalies (no FK to tecidos) -----
    op.create_table(
        "anomalias",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tecido_codigo", sa.String(length=64), nullable=False),
        sa.Column("data", sa.DateTime(timezone=True), nullable=False),
        sa.Column("quadrante", sa.String(length=32), nullable=False),
        sa.Column("condicao", sa.String(length=120), nullable=False),
        sa.Column("responsavel", sa.String(length=120), nullable=False),
        sa.Column("observacoes", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_anomalias_tecido_codigo", "anomalias", ["tecido_codigo"])


def downgrade() -> None:
    op.drop_index("ix_anomalias_tecido_codigo", table_name="anomalias")
    op.drop_table("anomalias")
    op.drop_index("uq_tecidos_active_position", table_name="tecidos")
    op.drop_table("tecidos")
