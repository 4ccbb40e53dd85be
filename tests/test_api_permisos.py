"""API de permisos: reglas por rol, permisos individuales y /me."""
import pytest

from app.models import Modulo
from app.services import permisos_store

pytestmark = pytest.mark.anyio


@pytest.fixture
async def admin(crear_usuario):
    return await crear_usuario("Admin", rol="admin")


async def test_sin_token_devuelve_401(client):
    response = await client.get("/api/v1/permisos/roles")
    assert response.status_code == 401


async def test_token_invalido_devuelve_401(client):
    response = await client.get("/api/v1/me", headers={"Authorization": "Bearer no-es-un-jwt"})
    assert response.status_code == 401


async def test_login_devuelve_rol_normalizado(client, crear_usuario):
    await crear_usuario("Directora", rol="admin", password="clave-segura")
    response = await client.post(
        "/api/v1/auth/login", json={"email": "directora@escuela.edu", "password": "clave-segura"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["rol"] == "admin"
    assert body["token_type"] == "bearer"

    response = await client.post(
        "/api/v1/auth/login", json={"email": "directora@escuela.edu", "password": "otra"}
    )
    assert response.status_code == 401


async def test_rol_sin_permiso_de_configuracion_recibe_403(client, db, crear_usuario, token_de):
    docente = await crear_usuario("Docente")
    await permisos_store.set_permiso_rol(db, "teacher", "Settings", False)
    await db.commit()

    response = await client.get("/api/v1/permisos/roles", headers=token_de(docente, "teacher"))
    assert response.status_code == 403


async def test_actualizar_y_leer_reglas_de_rol(client, admin, token_de):
    headers = token_de(admin)
    response = await client.put(
        "/api/v1/permisos/roles/Teacher/Reports", json={"habilitado": False}, headers=headers
    )
    assert response.status_code == 200
    assert response.json() == {"rol": "teacher", "permisos": {"Reports": False}}

    # Última escritura gana
    await client.put("/api/v1/permisos/roles/teacher/Reports", json={"habilitado": True}, headers=headers)

    response = await client.get("/api/v1/permisos/roles/TEACHER", headers=headers)
    assert response.json()["permisos"] == {"Reports": True}

    response = await client.get("/api/v1/permisos/roles", headers=headers)
    assert response.json()["roles"] == {"teacher": {"Reports": True}}


async def test_rol_vacio_devuelve_422(client, admin, token_de):
    response = await client.put(
        "/api/v1/permisos/roles/%20%20/Reports", json={"habilitado": True}, headers=token_de(admin)
    )
    assert response.status_code == 422


async def test_reemplazar_y_limpiar_permisos_individuales(client, admin, crear_usuario, token_de):
    docente = await crear_usuario("Docente")
    headers = token_de(admin)
    url = f"/api/v1/permisos/usuarios/{docente.id}"

    response = await client.put(
        url,
        json={
            "entradas": [
                {"modulo": "Reports", "puede_ver": True, "puede_editar": False},
                {"modulo": "Students", "puede_ver": False, "puede_editar": False},
            ]
        },
        headers=headers,
    )
    assert response.status_code == 200
    assert [e["modulo"] for e in response.json()["entradas"]] == ["Reports", "Students"]

    # El nuevo conjunto reemplaza al anterior por completo
    response = await client.put(
        url, json={"entradas": [{"modulo": "Reports", "puede_ver": True, "puede_editar": True}]}, headers=headers
    )
    assert response.json()["entradas"] == [{"modulo": "Reports", "puede_ver": True, "puede_editar": True}]

    response = await client.put(url, json={"entradas": []}, headers=headers)
    assert response.json()["entradas"] == []

    response = await client.get(url, headers=headers)
    assert response.json() == {"usuario_id": docente.id, "entradas": []}


async def test_permisos_de_usuario_inexistente_devuelve_404(client, admin, token_de):
    response = await client.get("/api/v1/permisos/usuarios/999", headers=token_de(admin))
    assert response.status_code == 404


async def test_evaluar_aplica_precedencia(client, db, crear_usuario, token_de):
    docente = await crear_usuario("Docente")
    await permisos_store.set_permiso_rol(db, "teacher", "Reports", False)
    await db.commit()
    headers = token_de(docente, "teacher")

    response = await client.get("/api/v1/permisos/evaluar", params={"modulo": "Reports"}, headers=headers)
    assert response.json() == {"modulo": "Reports", "puede_ver": False, "puede_editar": False}

    response = await client.get("/api/v1/permisos/evaluar", params={"modulo": "Nuevo"}, headers=headers)
    assert response.json()["puede_ver"] is True

    await permisos_store.set_overrides_usuario(
        db, docente.id, [permisos_store.EntradaOverride("Reports", True, False)]
    )
    await db.commit()
    response = await client.get("/api/v1/permisos/evaluar", params={"modulo": "Reports"}, headers=headers)
    assert response.json() == {"modulo": "Reports", "puede_ver": True, "puede_editar": False}


async def test_me_lista_modulos_visibles(client, db, crear_usuario, token_de):
    docente = await crear_usuario("Docente")
    db.add_all(
        [
            Modulo(nombre="Dashboard", orden=1),
            Modulo(nombre="Reports", orden=2),
            Modulo(nombre="Settings", orden=3),
        ]
    )
    await permisos_store.set_permiso_rol(db, "teacher", "Settings", False)
    await db.commit()

    response = await client.get("/api/v1/me", headers=token_de(docente, "teacher"))
    assert response.status_code == 200
    body = response.json()
    assert body["rol"] == "teacher"
    assert body["modulos"] == ["Dashboard", "Reports"]


async def test_evaluar_modulo_en_blanco_devuelve_422(client, admin, token_de):
    response = await client.get(
        "/api/v1/permisos/evaluar", params={"modulo": "   "}, headers=token_de(admin)
    )
    assert response.status_code == 422


async def test_me_con_rol_guardado_en_blanco(client, db, crear_usuario, token_de):
    usuario = await crear_usuario("Sin Rol", rol="   ")
    db.add(Modulo(nombre="Dashboard", orden=1))
    await db.commit()

    response = await client.get("/api/v1/me", headers=token_de(usuario, "   "))
    assert response.status_code == 200
    assert response.json()["modulos"] == ["Dashboard"]
