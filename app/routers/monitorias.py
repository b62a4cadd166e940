"""Monitoria and justificacion API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_session
from app.errors import ApiError
from app.models.monitoria import Justificacion, Monitoria
from app.schemas.common import DataResponse, ListResponse
from app.schemas.monitoria import JustificacionCreate, JustificacionResponse, MonitoriaCreate, MonitoriaResponse
from app.services.monitoria import get_justificacion_service, get_monitoria_service

router = APIRouter(prefix="/api/monitorias", tags=["Monitorias"], dependencies=[Depends(get_current_session)])
justificaciones_router = APIRouter(
    prefix="/api/justificaciones",
    tags=["Justificaciones"],
    dependencies=[Depends(get_current_session)],
)


def _get_monitoria(db: Session, monitoria_id: int) -> Monitoria:
    monitoria = get_monitoria_service().get(db, monitoria_id)
    if not monitoria:
        raise ApiError.not_found("Monitoria no encontrada")
    return monitoria


def _get_justificacion(db: Session, justificacion_id: int) -> Justificacion:
    justificacion = get_justificacion_service().get(db, justificacion_id)
    if not justificacion:
        raise ApiError.not_found("Justificación no encontrada")
    return justificacion


@router.get("/", response_model=ListResponse[MonitoriaResponse])
def list_monitorias(
    persona_id: int | None = None,
    periodo_academico_id: int | None = None,
    db: Session = Depends(get_db),
) -> ListResponse[MonitoriaResponse]:
    """List monitorias, optionally filtered by persona or period."""
    items = get_monitoria_service().list_all(db, persona_id=persona_id, periodo_academico_id=periodo_academico_id)
    return ListResponse[MonitoriaResponse](
        data=[MonitoriaResponse.model_validate(m) for m in items],
        total=len(items),
    )


@router.get("/{monitoria_id}", response_model=DataResponse[MonitoriaResponse])
def get_monitoria(monitoria_id: int, db: Session = Depends(get_db)) -> DataResponse[MonitoriaResponse]:
    """Get a single monitoria by ID."""
    return DataResponse[MonitoriaResponse](data=MonitoriaResponse.model_validate(_get_monitoria(db, monitoria_id)))


@router.post("/", response_model=DataResponse[MonitoriaResponse], status_code=201)
def create_monitoria(body: MonitoriaCreate, db: Session = Depends(get_db)) -> DataResponse[MonitoriaResponse]:
    """Create a monitoria. Every referenced record must exist."""
    service = get_monitoria_service()
    data = body.model_dump()
    errors = service.validate(db, data)
    if errors:
        raise ApiError.validation(errors)

    monitoria = service.create(db, data)
    return DataResponse[MonitoriaResponse](
        message="Monitoria created successfully",
        data=MonitoriaResponse.model_validate(monitoria),
    )


@router.put("/{monitoria_id}", response_model=DataResponse[MonitoriaResponse])
def update_monitoria(
    monitoria_id: int,
    body: MonitoriaCreate,
    db: Session = Depends(get_db),
) -> DataResponse[MonitoriaResponse]:
    """Replace a monitoria's fields."""
    service = get_monitoria_service()
    monitoria = _get_monitoria(db, monitoria_id)
    data = body.model_dump()
    errors = service.validate(db, data, exclude_id=monitoria_id)
    if errors:
        raise ApiError.validation(errors)

    monitoria = service.update(db, monitoria, data)
    return DataResponse[MonitoriaResponse](
        message="Monitoria updated successfully",
        data=MonitoriaResponse.model_validate(monitoria),
    )


@router.delete("/{monitoria_id}")
def delete_monitoria(monitoria_id: int, db: Session = Depends(get_db)) -> dict:
    """Delete a monitoria and its justificaciones."""
    get_monitoria_service().delete(db, _get_monitoria(db, monitoria_id))
    return {"success": True, "message": "Monitoria deleted successfully"}


@justificaciones_router.get("/", response_model=ListResponse[JustificacionResponse])
def list_justificaciones(
    monitoria_id: int | None = None,
    db: Session = Depends(get_db),
) -> ListResponse[JustificacionResponse]:
    """List justificaciones, optionally for one monitoria."""
    items = get_justificacion_service().list_all(db, monitoria_id=monitoria_id)
    return ListResponse[JustificacionResponse](
        data=[JustificacionResponse.model_validate(j) for j in items],
        total=len(items),
    )


@justificaciones_router.get("/{justificacion_id}", response_model=DataResponse[JustificacionResponse])
def get_justificacion(justificacion_id: int, db: Session = Depends(get_db)) -> DataResponse[JustificacionResponse]:
    """Get a single justificacion by ID."""
    justificacion = _get_justificacion(db, justificacion_id)
    return DataResponse[JustificacionResponse](data=JustificacionResponse.model_validate(justificacion))


@justificaciones_router.post("/", response_model=DataResponse[JustificacionResponse], status_code=201)
def create_justificacion(
    body: JustificacionCreate,
    db: Session = Depends(get_db),
) -> DataResponse[JustificacionResponse]:
    """File a justificacion against a monitoria."""
    service = get_justificacion_service()
    data = body.model_dump()
    errors = service.validate(db, data)
    if errors:
        raise ApiError.validation(errors)

    justificacion = service.create(db, data)
    return DataResponse[JustificacionResponse](
        message="Justificación registrada exitosamente",
        data=JustificacionResponse.model_validate(justificacion),
    )


@justificaciones_router.delete("/{justificacion_id}")
def delete_justificacion(justificacion_id: int, db: Session = Depends(get_db)) -> dict:
    """Delete a justificacion."""
    get_justificacion_service().delete(db, _get_justificacion(db, justificacion_id))
    return {"success": True, "message": "Justificación eliminada exitosamente"}
