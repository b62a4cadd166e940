"""Monitoria and justificacion models."""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text

from app.database import Base


class Monitoria(Base):
    """Teaching-assistant assignment of a persona for an academic period."""

    __tablename__ = "monitorias"

    id = Column(Integer, primary_key=True, autoincrement=True)
    persona_id = Column(Integer, ForeignKey("personas.id", ondelete="CASCADE"), nullable=False, index=True)
    tipo_monitoria_id = Column(
        Integer, ForeignKey("tipos_monitoria.id", ondelete="CASCADE"), nullable=False, index=True
    )
    dependencia_id = Column(Integer, ForeignKey("dependencias.id", ondelete="CASCADE"), nullable=False, index=True)
    periodo_academico_id = Column(
        Integer, ForeignKey("periodos_academicos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    descripcion = Column(String(255), nullable=True)
    inicio = Column(Date, nullable=False)
    fin = Column(Date, nullable=False)
    horas_asignadas = Column(Integer, nullable=False)
    estado = Column(String(16), nullable=False, default="activo")  # activo, inactivo
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class Justificacion(Base):
    """Justification filed against a monitoria."""

    __tablename__ = "justificaciones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    monitoria_id = Column(Integer, ForeignKey("monitorias.id", ondelete="CASCADE"), nullable=False, index=True)
    persona_id = Column(Integer, ForeignKey("personas.id", ondelete="CASCADE"), nullable=False, index=True)
    periodo_academico_id = Column(
        Integer, ForeignKey("periodos_academicos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tipo_justificacion_id = Column(
        Integer, ForeignKey("tipos_justificacion.id", ondelete="CASCADE"), nullable=False, index=True
    )
    descripcion = Column(Text, nullable=False)
    fecha = Column(Date, nullable=True)
    estado = Column(String(16), nullable=False, default="pendiente")  # pendiente, aprobada, rechazada
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
