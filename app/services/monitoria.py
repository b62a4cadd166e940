"""Monitoria and justificacion services."""

from app.models.catalog import Dependencia, PeriodoAcademico, Persona, TipoJustificacion, TipoMonitoria
from app.models.monitoria import Justificacion, Monitoria
from app.services.catalog import CatalogService


class MonitoriaService(CatalogService[Monitoria]):
    """Monitoria CRUD with reference checks."""

    def __init__(self) -> None:
        super().__init__(
            Monitoria,
            "Monitoria",
            references={
                "persona_id": Persona,
                "tipo_monitoria_id": TipoMonitoria,
                "dependencia_id": Dependencia,
                "periodo_academico_id": PeriodoAcademico,
            },
        )


class JustificacionService(CatalogService[Justificacion]):
    """Justificacion CRUD with reference checks."""

    def __init__(self) -> None:
        super().__init__(
            Justificacion,
            "Justificación",
            references={
                "monitoria_id": Monitoria,
                "persona_id": Persona,
                "periodo_academico_id": PeriodoAcademico,
                "tipo_justificacion_id": TipoJustificacion,
            },
        )


_monitoria_service: MonitoriaService | None = None
_justificacion_service: JustificacionService | None = None


def get_monitoria_service() -> MonitoriaService:
    """Get singleton monitoria service instance."""
    global _monitoria_service
    if _monitoria_service is None:
        _monitoria_service = MonitoriaService()
    return _monitoria_service


def get_justificacion_service() -> JustificacionService:
    """Get singleton justificacion service instance."""
    global _justificacion_service
    if _justificacion_service is None:
        _justificacion_service = JustificacionService()
    return _justificacion_service
