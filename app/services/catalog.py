"""CRUD service for the reference catalogs and the records that point at them."""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from app.database import Base
from app.models.catalog import Dependencia, PeriodoAcademico, Persona, TipoJustificacion, TipoMonitoria

ModelT = TypeVar("ModelT", bound=Base)


class CatalogService(Generic[ModelT]):
    """Create/read/update/delete for one model.

    ``unique_fields`` are checked before writing so duplicates come back as
    field errors instead of integrity failures. ``references`` maps a foreign
    key field to the model it must exist in.
    """

    def __init__(
        self,
        model: type[ModelT],
        label: str,
        unique_fields: tuple[str, ...] = (),
        references: dict[str, type[Base]] | None = None,
    ) -> None:
        self.model = model
        self.label = label
        self.unique_fields = unique_fields
        self.references = references or {}

    def list_all(self, db: Session, **filters: Any) -> list[ModelT]:
        """Get all records, oldest first, optionally filtered by column equality."""
        query = db.query(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, column) == value)
        return query.order_by(self.model.id).all()

    def get(self, db: Session, item_id: int) -> ModelT | None:
        """Get a single record by ID."""
        return db.get(self.model, item_id)

    def validate(self, db: Session, data: dict[str, Any], exclude_id: int | None = None) -> dict[str, list[str]]:
        """Return field errors for duplicate unique values and dangling references."""
        errors: dict[str, list[str]] = {}

        for column in self.unique_fields:
            value = data.get(column)
            if value is None:
                continue
            query = db.query(self.model).filter(getattr(self.model, column) == value)
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first():
                errors.setdefault(column, []).append(f"El valor de {column} ya está en uso")

        for column, target in self.references.items():
            value = data.get(column)
            if value is not None and db.get(target, value) is None:
                errors.setdefault(column, []).append(f"El {column} seleccionado no es válido")

        return errors

    def create(self, db: Session, data: dict[str, Any]) -> ModelT:
        """Insert a record."""
        item = self.model(**data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update(self, db: Session, item: ModelT, data: dict[str, Any]) -> ModelT:
        """Overwrite a record's fields."""
        for key, value in data.items():
            setattr(item, key, value)
        db.commit()
        db.refresh(item)
        return item

    def delete(self, db: Session, item: ModelT) -> None:
        """Delete a record. Dependent rows go with it (ON DELETE CASCADE)."""
        db.delete(item)
        db.commit()


_catalogs: dict[str, CatalogService] = {
    "personas": CatalogService(Persona, "Persona", unique_fields=("numero_documento",)),
    "dependencias": CatalogService(Dependencia, "Dependencia", unique_fields=("nombre",)),
    "periodos-academicos": CatalogService(PeriodoAcademico, "Periodo académico", unique_fields=("nombre",)),
    "tipos-monitoria": CatalogService(TipoMonitoria, "Tipo de monitoria", unique_fields=("nombre",)),
    "tipos-justificacion": CatalogService(TipoJustificacion, "Tipo de justificación", unique_fields=("nombre",)),
}


def get_catalog_service(slug: str) -> CatalogService:
    """Get the catalog service registered under a URL slug."""
    return _catalogs[slug]
