"""Pydantic schemas for monitoria and justificacion endpoints."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class MonitoriaCreate(BaseModel):
    persona_id: int
    tipo_monitoria_id: int
    dependencia_id: int
    periodo_academico_id: int
    descripcion: str | None = Field(default=None, max_length=255)
    inicio: date
    fin: date
    horas_asignadas: int = Field(ge=1)
    estado: Literal["activo", "inactivo"]

    @field_validator("fin")
    @classmethod
    def fin_after_inicio(cls, value: date, info: ValidationInfo) -> date:
        inicio = info.data.get("inicio")
        if inicio and value < inicio:
            raise ValueError("La fecha de fin debe ser igual o posterior a la fecha de inicio")
        return value


class MonitoriaResponse(BaseModel):
    id: int
    persona_id: int
    tipo_monitoria_id: int
    dependencia_id: int
    periodo_academico_id: int
    descripcion: str | None
    inicio: date
    fin: date
    horas_asignadas: int
    estado: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class JustificacionCreate(BaseModel):
    monitoria_id: int
    persona_id: int
    periodo_academico_id: int
    tipo_justificacion_id: int
    descripcion: str = Field(min_length=1)
    fecha: date | None = None
    estado: Literal["pendiente", "aprobada", "rechazada"] = "pendiente"


class JustificacionResponse(BaseModel):
    id: int
    monitoria_id: int
    persona_id: int
    periodo_academico_id: int
    tipo_justificacion_id: int
    descripcion: str
    fecha: date | None
    estado: str
    created_at: datetime

    model_config = {"from_attributes": True}
