"""Pydantic schemas for the reference catalogs."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

Estado = Literal["activo", "inactivo"]


class PersonaCreate(BaseModel):
    tipo_documento: str = Field(min_length=1, max_length=50)
    numero_documento: str | None = Field(default=None, max_length=45)
    nombre_a: str | None = Field(default=None, max_length=45)
    nombre_b: str | None = Field(default=None, max_length=45)
    apellido_a: str | None = Field(default=None, max_length=45)
    apellido_b: str | None = Field(default=None, max_length=45)
    correo_electronico: EmailStr | None = None
    telefono: str | None = Field(default=None, max_length=20)
    fecha_nacimiento: date | None = None
    direccion: str | None = Field(default=None, max_length=255)
    estado: Literal["1", "0"] = "1"


class PersonaResponse(PersonaCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DependenciaCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    descripcion: str | None = Field(default=None, max_length=255)
    estado: Estado = "activo"


class DependenciaResponse(DependenciaCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PeriodoAcademicoCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=45)
    fecha_inicio: date
    fecha_fin: date
    estado: Estado = "activo"

    @field_validator("fecha_fin")
    @classmethod
    def fin_after_inicio(cls, value: date, info: ValidationInfo) -> date:
        inicio = info.data.get("fecha_inicio")
        if inicio and value < inicio:
            raise ValueError("La fecha de fin debe ser igual o posterior a la fecha de inicio")
        return value


class PeriodoAcademicoResponse(PeriodoAcademicoCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TipoMonitoriaCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    descripcion: str | None = Field(default=None, max_length=255)
    estado: Estado = "activo"


class TipoMonitoriaResponse(TipoMonitoriaCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TipoJustificacionCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    descripcion: str | None = Field(default=None, max_length=255)


class TipoJustificacionResponse(TipoJustificacionCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
