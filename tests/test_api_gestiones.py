"""API de gestiones académicas y grados."""
import pytest

pytestmark = pytest.mark.anyio


@pytest.fixture
async def headers(crear_usuario, token_de):
    admin = await crear_usuario("Admin", rol="admin")
    return token_de(admin)


async def test_crear_y_activar_gestion(client, headers, catalogo):
    response = await client.post(
        "/api/v1/gestiones",
        json={"nombre": "2027-2028", "fecha_inicio": "2027-08-01", "fecha_fin": "2028-06-30"},
        headers=headers,
    )
    assert response.status_code == 201
    nueva = response.json()
    assert nueva["activa"] is False

    response = await client.patch(f"/api/v1/gestiones/{nueva['id']}/activar", headers=headers)
    assert response.json()["activa"] is True

    response = await client.get("/api/v1/gestiones", headers=headers)
    gestiones = response.json()["gestiones"]
    assert [(g["nombre"], g["activa"]) for g in gestiones] == [("2027-2028", True), ("2026-2027", False)]


async def test_gestion_duplicada_devuelve_409(client, headers, catalogo):
    response = await client.post(
        "/api/v1/gestiones",
        json={"nombre": "2026-2027", "fecha_inicio": "2026-08-01", "fecha_fin": "2027-06-30"},
        headers=headers,
    )
    assert response.status_code == 409


async def test_fechas_invertidas_devuelven_422(client, headers):
    response = await client.post(
        "/api/v1/gestiones",
        json={"nombre": "2030", "fecha_inicio": "2030-12-01", "fecha_fin": "2030-01-01"},
        headers=headers,
    )
    assert response.status_code == 422


async def test_activar_gestion_inexistente(client, headers):
    response = await client.patch("/api/v1/gestiones/999/activar", headers=headers)
    assert response.status_code == 404


async def test_listar_grados_en_orden(client, headers, catalogo):
    response = await client.get("/api/v1/grados", headers=headers)
    assert [g["nombre"] for g in response.json()["grados"]] == ["Grade 1", "Grade 2"]
