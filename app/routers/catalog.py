"""Reference catalog API endpoints.

The five catalogs share the same CRUD shape, so their routers are built from
one template.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_session
from app.errors import ApiError
from app.schemas.catalog import (
    DependenciaCreate,
    DependenciaResponse,
    PeriodoAcademicoCreate,
    PeriodoAcademicoResponse,
    PersonaCreate,
    PersonaResponse,
    TipoJustificacionCreate,
    TipoJustificacionResponse,
    TipoMonitoriaCreate,
    TipoMonitoriaResponse,
)
from app.schemas.common import DataResponse, ListResponse
from app.services.catalog import get_catalog_service


def build_catalog_router(
    slug: str,
    tag: str,
    create_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    """Build list/get/create/update/delete routes for the catalog registered under ``slug``."""
    router = APIRouter(
        prefix=f"/api/{slug}",
        tags=[tag],
        dependencies=[Depends(get_current_session)],
    )
    service = get_catalog_service(slug)

    def load(db: Session, item_id: int):
        item = service.get(db, item_id)
        if not item:
            raise ApiError.not_found(f"Registro de {service.label} no encontrado")
        return item

    @router.get("/", response_model=ListResponse[response_schema])
    def list_items(db: Session = Depends(get_db)):
        items = service.list_all(db)
        return ListResponse[response_schema](
            data=[response_schema.model_validate(i) for i in items],
            total=len(items),
        )

    @router.get("/{item_id}", response_model=DataResponse[response_schema])
    def get_item(item_id: int, db: Session = Depends(get_db)):
        return DataResponse[response_schema](data=response_schema.model_validate(load(db, item_id)))

    @router.post("/", response_model=DataResponse[response_schema], status_code=201)
    def create_item(body: create_schema, db: Session = Depends(get_db)):  # type: ignore[valid-type]
        data = body.model_dump()
        errors = service.validate(db, data)
        if errors:
            raise ApiError.validation(errors)
        item = service.create(db, data)
        return DataResponse[response_schema](
            message=f"Registro de {service.label} creado exitosamente",
            data=response_schema.model_validate(item),
        )

    @router.put("/{item_id}", response_model=DataResponse[response_schema])
    def update_item(item_id: int, body: create_schema, db: Session = Depends(get_db)):  # type: ignore[valid-type]
        item = load(db, item_id)
        data = body.model_dump()
        errors = service.validate(db, data, exclude_id=item_id)
        if errors:
            raise ApiError.validation(errors)
        item = service.update(db, item, data)
        return DataResponse[response_schema](
            message=f"Registro de {service.label} actualizado exitosamente",
            data=response_schema.model_validate(item),
        )

    @router.delete("/{item_id}")
    def delete_item(item_id: int, db: Session = Depends(get_db)) -> dict:
        service.delete(db, load(db, item_id))
        return {"success": True, "message": f"Registro de {service.label} eliminado exitosamente"}

    return router


personas_router = build_catalog_router("personas", "Personas", PersonaCreate, PersonaResponse)
dependencias_router = build_catalog_router("dependencias", "Dependencias", DependenciaCreate, DependenciaResponse)
periodos_router = build_catalog_router(
    "periodos-academicos", "Periodos académicos", PeriodoAcademicoCreate, PeriodoAcademicoResponse
)
tipos_monitoria_router = build_catalog_router(
    "tipos-monitoria", "Tipos de monitoria", TipoMonitoriaCreate, TipoMonitoriaResponse
)
tipos_justificacion_router = build_catalog_router(
    "tipos-justificacion", "Tipos de justificación", TipoJustificacionCreate, TipoJustificacionResponse
)
