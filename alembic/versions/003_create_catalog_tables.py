"""Create reference catalog tables

Revision ID: 003
Revises: 002
Create Date: 2025-08-02

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "personas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tipo_documento", sa.String(length=50), nullable=False),
        sa.Column("numero_documento", sa.String(length=45), nullable=True),
        sa.Column("nombre_a", sa.String(length=45), nullable=True),
        sa.Column("nombre_b", sa.String(length=45), nullable=True),
        sa.Column("apellido_a", sa.String(length=45), nullable=True),
        sa.Column("apellido_b", sa.String(length=45), nullable=True),
        sa.Column("correo_electronico", sa.String(length=100), nullable=True),
        sa.Column("telefono", sa.String(length=20), nullable=True),
        sa.Column("fecha_nacimiento", sa.Date(), nullable=True),
        sa.Column("direccion", sa.String(length=255), nullable=True),
        sa.Column("estado", sa.String(length=1), nullable=False, server_default="1"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("numero_documento"),
    )
    op.create_table(
        "dependencias",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        sa.Column("estado", sa.String(length=16), nullable=False, server_default="activo"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nombre"),
    )
    op.create_table(
        "periodos_academicos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=45), nullable=False),
        sa.Column("fecha_inicio", sa.Date(), nullable=False),
        sa.Column("fecha_fin", sa.Date(), nullable=False),
        sa.Column("estado", sa.String(length=16), nullable=False, server_default="activo"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nombre"),
    )
    op.create_table(
        "tipos_monitoria",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        sa.Column("estado", sa.String(length=16), nullable=False, server_default="activo"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nombre"),
    )
    op.create_table(
        "tipos_justificacion",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nombre"),
    )


def downgrade() -> None:
    op.drop_table("tipos_justificacion")
    op.drop_table("tipos_monitoria")
    op.drop_table("periodos_academicos")
    op.drop_table("dependencias")
    op.drop_table("personas")
