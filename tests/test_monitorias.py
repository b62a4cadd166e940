"""Tests for monitoria and justificacion endpoints."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models.catalog import Persona
from app.models.monitoria import Justificacion, Monitoria


def _payload(references: dict, **overrides) -> dict:
    payload = {
        "persona_id": references["persona_id"],
        "tipo_monitoria_id": references["tipo_monitoria_id"],
        "dependencia_id": references["dependencia_id"],
        "periodo_academico_id": references["periodo_academico_id"],
        "descripcion": "Apoyo en laboratorio",
        "inicio": "2025-08-04",
        "fin": "2025-08-11",
        "horas_asignadas": 10,
        "estado": "activo",
    }
    payload.update(overrides)
    return payload


def _create(client: TestClient, headers: dict, references: dict, **overrides) -> dict:
    response = client.post("/api/monitorias/", json=_payload(references, **overrides), headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


class TestMonitoriaCreate:
    """Tests for creating monitorias."""

    def test_create_valid(self, client: TestClient, auth_headers: dict, references: dict, db_session: Session):
        """Create a monitoria with valid data."""
        response = client.post("/api/monitorias/", json=_payload(references), headers=auth_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Monitoria created successfully"
        assert body["data"]["descripcion"] == "Apoyo en laboratorio"

        stored = db_session.query(Monitoria).filter(Monitoria.persona_id == references["persona_id"]).first()
        assert stored.descripcion == "Apoyo en laboratorio"

    def test_create_empty_payload(self, client: TestClient, auth_headers: dict):
        """Every required field is reported."""
        response = client.post("/api/monitorias/", json={}, headers=auth_headers)
        assert response.status_code == 422
        errors = response.json()["errors"]
        for field in (
            "persona_id",
            "tipo_monitoria_id",
            "dependencia_id",
            "periodo_academico_id",
            "inicio",
            "fin",
            "horas_asignadas",
            "estado",
        ):
            assert field in errors

    def test_create_fin_before_inicio(self, client: TestClient, auth_headers: dict, references: dict):
        """fin must not precede inicio."""
        response = client.post(
            "/api/monitorias/",
            json=_payload(references, inicio="2025-08-11", fin="2025-08-04"),
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert "fin" in response.json()["errors"]

    def test_create_same_day_range(self, client: TestClient, auth_headers: dict, references: dict):
        """A one-day monitoria is allowed."""
        data = _create(client, auth_headers, references, inicio="2025-08-04", fin="2025-08-04")
        assert data["inicio"] == data["fin"]

    def test_create_invalid_hours_and_estado(self, client: TestClient, auth_headers: dict, references: dict):
        """horas_asignadas >= 1 and estado from the fixed set."""
        response = client.post(
            "/api/monitorias/",
            json=_payload(references, horas_asignadas=0, estado="suspendido"),
            headers=auth_headers,
        )
        assert response.status_code == 422
        errors = response.json()["errors"]
        assert "horas_asignadas" in errors
        assert "estado" in errors

    def test_create_unknown_references(self, client: TestClient, auth_headers: dict, references: dict):
        """References that do not exist are field errors."""
        response = client.post(
            "/api/monitorias/",
            json=_payload(references, persona_id=999, dependencia_id=999),
            headers=auth_headers,
        )
        assert response.status_code == 422
        errors = response.json()["errors"]
        assert set(errors) == {"persona_id", "dependencia_id"}

    def test_create_requires_auth(self, client: TestClient, references: dict):
        """Monitoria endpoints are protected."""
        response = client.post("/api/monitorias/", json=_payload(references))
        assert response.status_code == 401


class TestMonitoriaReadUpdateDelete:
    """Tests for listing, updating and deleting monitorias."""

    def test_list_and_filter(self, client: TestClient, auth_headers: dict, references: dict, db_session: Session):
        """List all and filter by persona."""
        _create(client, auth_headers, references)
        other = Persona(tipo_documento="TI", numero_documento="2002")
        db_session.add(other)
        db_session.commit()
        _create(client, auth_headers, references, persona_id=other.id)

        response = client.get("/api/monitorias/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["total"] == 2

        filtered = client.get(f"/api/monitorias/?persona_id={other.id}", headers=auth_headers)
        assert filtered.json()["total"] == 1
        assert filtered.json()["data"][0]["persona_id"] == other.id

    def test_get_by_id(self, client: TestClient, auth_headers: dict, references: dict):
        """Fetch a single monitoria."""
        created = _create(client, auth_headers, references)
        response = client.get(f"/api/monitorias/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["horas_asignadas"] == 10

    def test_get_missing(self, client: TestClient, auth_headers: dict):
        """Unknown id is 404."""
        response = client.get("/api/monitorias/999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_update(self, client: TestClient, auth_headers: dict, references: dict):
        """PUT replaces the fields."""
        created = _create(client, auth_headers, references)
        response = client.put(
            f"/api/monitorias/{created['id']}",
            json=_payload(references, horas_asignadas=20, estado="inactivo"),
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["horas_asignadas"] == 20
        assert response.json()["data"]["estado"] == "inactivo"

    def test_delete(self, client: TestClient, auth_headers: dict, references: dict):
        """Delete removes the monitoria."""
        created = _create(client, auth_headers, references)
        response = client.delete(f"/api/monitorias/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert client.get(f"/api/monitorias/{created['id']}", headers=auth_headers).status_code == 404

    def test_deleting_persona_cascades(
        self, client: TestClient, auth_headers: dict, references: dict, db_session: Session
    ):
        """Removing a referenced persona removes its monitorias."""
        _create(client, auth_headers, references)
        response = client.delete(f"/api/personas/{references['persona_id']}", headers=auth_headers)
        assert response.status_code == 200
        assert db_session.query(Monitoria).count() == 0


class TestJustificaciones:
    """Tests for justificacion endpoints."""

    def _justificacion(self, references: dict, monitoria_id: int) -> dict:
        return {
            "monitoria_id": monitoria_id,
            "persona_id": references["persona_id"],
            "periodo_academico_id": references["periodo_academico_id"],
            "tipo_justificacion_id": references["tipo_justificacion_id"],
            "descripcion": "Incapacidad médica",
            "fecha": "2025-08-05",
        }

    def test_create_and_list(self, client: TestClient, auth_headers: dict, references: dict):
        """File a justificacion and list it by monitoria."""
        monitoria = _create(client, auth_headers, references)
        response = client.post(
            "/api/justificaciones/",
            json=self._justificacion(references, monitoria["id"]),
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["data"]["estado"] == "pendiente"

        listed = client.get(f"/api/justificaciones/?monitoria_id={monitoria['id']}", headers=auth_headers)
        assert listed.json()["total"] == 1
        assert client.get("/api/justificaciones/?monitoria_id=999", headers=auth_headers).json()["total"] == 0

    def test_create_unknown_monitoria(self, client: TestClient, auth_headers: dict, references: dict):
        """The monitoria must exist."""
        response = client.post(
            "/api/justificaciones/",
            json=self._justificacion(references, 999),
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert "monitoria_id" in response.json()["errors"]

    def test_delete_monitoria_cascades(
        self, client: TestClient, auth_headers: dict, references: dict, db_session: Session
    ):
        """Deleting a monitoria removes its justificaciones."""
        monitoria = _create(client, auth_headers, references)
        client.post(
            "/api/justificaciones/",
            json=self._justificacion(references, monitoria["id"]),
            headers=auth_headers,
        )

        client.delete(f"/api/monitorias/{monitoria['id']}", headers=auth_headers)
        assert db_session.query(Justificacion).count() == 0

    def test_get_and_delete(self, client: TestClient, auth_headers: dict, references: dict):
        """Fetch then delete a justificacion."""
        monitoria = _create(client, auth_headers, references)
        created = client.post(
            "/api/justificaciones/",
            json=self._justificacion(references, monitoria["id"]),
            headers=auth_headers,
        ).json()["data"]

        assert client.get(f"/api/justificaciones/{created['id']}", headers=auth_headers).status_code == 200
        assert client.delete(f"/api/justificaciones/{created['id']}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/justificaciones/{created['id']}", headers=auth_headers).status_code == 404
