"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_db
from app.models.access_token import PersonalAccessToken  # noqa: F401
from app.models.catalog import Dependencia, PeriodoAcademico, Persona, TipoJustificacion, TipoMonitoria
from app.models.monitoria import Justificacion, Monitoria  # noqa: F401
from app.models.user import User  # noqa: F401
from app.services.auth import AuthService


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def client_fixture(db_session: Session):
    """Create a test client with overridden DB dependency."""
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(name="test_user")
def test_user_fixture(db_session: Session):
    """Register a test user and return its data plus the issued token."""
    auth_service = AuthService()
    result = auth_service.register(db_session, "Test User", "test@example.com", "password123")

    return {
        "user_id": result.user.id,
        "email": result.user.email,
        "name": result.user.name,
        "token": result.token,
    }


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(test_user: dict) -> dict:
    """Authorization header for the test user."""
    return {"Authorization": f"Bearer {test_user['token']}"}


@pytest.fixture(name="references")
def references_fixture(db_session: Session) -> dict:
    """Create one row in every reference catalog and return their IDs."""
    persona = Persona(tipo_documento="CC", numero_documento="1001", nombre_a="Ana", apellido_a="Gómez")
    tipo = TipoMonitoria(nombre="Académica", descripcion="Apoyo a cursos")
    dependencia = Dependencia(nombre="Facultad de Ingeniería")
    periodo = PeriodoAcademico(nombre="2025-2", fecha_inicio=date(2025, 8, 1), fecha_fin=date(2025, 12, 15))
    tipo_justificacion = TipoJustificacion(nombre="Enfermedad", descripcion="Justificación por enfermedad")
    db_session.add_all([persona, tipo, dependencia, periodo, tipo_justificacion])
    db_session.commit()

    return {
        "persona_id": persona.id,
        "tipo_monitoria_id": tipo.id,
        "dependencia_id": dependencia.id,
        "periodo_academico_id": periodo.id,
        "tipo_justificacion_id": tipo_justificacion.id,
    }
