"""API routers."""

from app.routers.auth import router as auth_router
from app.routers.catalog import (
    dependencias_router,
    periodos_router,
    personas_router,
    tipos_justificacion_router,
    tipos_monitoria_router,
)
from app.routers.monitorias import justificaciones_router
from app.routers.monitorias import router as monitorias_router

__all__ = [
    "auth_router",
    "monitorias_router",
    "justificaciones_router",
    "personas_router",
    "dependencias_router",
    "periodos_router",
    "tipos_monitoria_router",
    "tipos_justificacion_router",
]
