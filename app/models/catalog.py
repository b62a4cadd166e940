"""Reference catalog models: personas, dependencias, periodos and tipos."""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Integer, String

from app.database import Base


class Persona(Base):
    """Person who can hold a monitoria."""

    __tablename__ = "personas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo_documento = Column(String(50), nullable=False)
    numero_documento = Column(String(45), unique=True, nullable=True)
    nombre_a = Column(String(45), nullable=True)
    nombre_b = Column(String(45), nullable=True)
    apellido_a = Column(String(45), nullable=True)
    apellido_b = Column(String(45), nullable=True)
    correo_electronico = Column(String(100), nullable=True)
    telefono = Column(String(20), nullable=True)
    fecha_nacimiento = Column(Date, nullable=True)
    direccion = Column(String(255), nullable=True)
    estado = Column(String(1), nullable=False, default="1")  # 1: activo, 0: inactivo
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class Dependencia(Base):
    """Academic unit a monitoria is attached to."""

    __tablename__ = "dependencias"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), unique=True, nullable=False)
    descripcion = Column(String(255), nullable=True)
    estado = Column(String(16), nullable=False, default="activo")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class PeriodoAcademico(Base):
    """Academic term."""

    __tablename__ = "periodos_academicos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(45), unique=True, nullable=False)
    fecha_inicio = Column(Date, nullable=False)
    fecha_fin = Column(Date, nullable=False)
    estado = Column(String(16), nullable=False, default="activo")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class TipoMonitoria(Base):
    """Kind of monitoria (academic, administrative, ...)."""

    __tablename__ = "tipos_monitoria"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), unique=True, nullable=False)
    descripcion = Column(String(255), nullable=True)
    estado = Column(String(16), nullable=False, default="activo")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class TipoJustificacion(Base):
    """Kind of justification (illness, technical problems, ...)."""

    __tablename__ = "tipos_justificacion"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), unique=True, nullable=False)
    descripcion = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
