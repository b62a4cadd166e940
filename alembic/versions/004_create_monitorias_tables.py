"""Create monitorias and justificaciones tables

Revision ID: 004
Revises: 003
Create Date: 2025-08-03

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "004"
down_revision: str | None = "003"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _fk(column: str, table: str) -> sa.Column:
    return sa.Column(column, sa.Integer(), sa.ForeignKey(f"{table}.id", ondelete="CASCADE"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "monitorias",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _fk("persona_id", "personas"),
        _fk("tipo_monitoria_id", "tipos_monitoria"),
        _fk("dependencia_id", "dependencias"),
        _fk("periodo_academico_id", "periodos_academicos"),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        sa.Column("inicio", sa.Date(), nullable=False),
        sa.Column("fin", sa.Date(), nullable=False),
        sa.Column("horas_asignadas", sa.Integer(), nullable=False),
        sa.Column("estado", sa.String(length=16), nullable=False, server_default="activo"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("persona_id", "tipo_monitoria_id", "dependencia_id", "periodo_academico_id"):
        op.create_index(op.f(f"ix_monitorias_{column}"), "monitorias", [column])

    op.create_table(
        "justificaciones",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _fk("monitoria_id", "monitorias"),
        _fk("persona_id", "personas"),
        _fk("periodo_academico_id", "periodos_academicos"),
        _fk("tipo_justificacion_id", "tipos_justificacion"),
        sa.Column("descripcion", sa.Text(), nullable=False),
        sa.Column("fecha", sa.Date(), nullable=True),
        sa.Column("estado", sa.String(length=16), nullable=False, server_default="pendiente"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("monitoria_id", "persona_id", "periodo_academico_id", "tipo_justificacion_id"):
        op.create_index(op.f(f"ix_justificaciones_{column}"), "justificaciones", [column])


def downgrade() -> None:
    for column in ("monitoria_id", "persona_id", "periodo_academico_id", "tipo_justificacion_id"):
        op.drop_index(op.f(f"ix_justificaciones_{column}"), table_name="justificaciones")
    op.drop_table("justificaciones")
    for column in ("persona_id", "tipo_monitoria_id", "dependencia_id", "periodo_academico_id"):
        op.drop_index(op.f(f"ix_monitorias_{column}"), table_name="monitorias")
    op.drop_table("monitorias")
