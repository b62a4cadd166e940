"""Seed default reference data and users.

Run with ``python -m app.seed`` after ``alembic upgrade head``. Safe to run
more than once: existing rows are left alone.
"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.models.catalog import TipoJustificacion
from app.models.user import User
from app.services.auth import hash_password

logger = logging.getLogger("monitorias.seed")

TIPOS_JUSTIFICACION = [
    ("Enfermedad", "Justificación por enfermedad"),
    ("Compromiso personal", "Justificación por compromiso personal"),
    ("Problemas técnicos", "Justificación por problemas técnicos"),
    ("Otro", "Otra justificación"),
]

DEFAULT_USERS = [
    ("Administrador", "admin@ejemplo.com"),
    ("Usuario Normal", "usuario@ejemplo.com"),
    ("Usuario Prueba", "prueba@ejemplo.com"),
]
DEFAULT_PASSWORD = "password123"


def seed_tipos_justificacion(db: Session) -> int:
    """Insert the default justification types. Returns the number inserted."""
    existing = {nombre for (nombre,) in db.query(TipoJustificacion.nombre).all()}
    created = 0
    for nombre, descripcion in TIPOS_JUSTIFICACION:
        if nombre in existing:
            continue
        db.add(TipoJustificacion(nombre=nombre, descripcion=descripcion))
        created += 1
    db.commit()
    return created


def seed_users(db: Session, password: str = DEFAULT_PASSWORD) -> int:
    """Insert the default verified users. Returns the number inserted."""
    existing = {email for (email,) in db.query(User.email).all()}
    created = 0
    for name, email in DEFAULT_USERS:
        if email in existing:
            continue
        db.add(
            User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                email_verified_at=datetime.utcnow(),
            )
        )
        created += 1
    db.commit()
    return created


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    db = SessionLocal()
    try:
        tipos = seed_tipos_justificacion(db)
        users = seed_users(db)
    finally:
        db.close()
    logger.info("Seeded %d justification type(s) and %d user(s)", tipos, users)


if __name__ == "__main__":
    main()
