"""Almacén de permisos: reglas por rol y reemplazo completo de permisos individuales."""
import pytest

from app.services import permisos_store
from app.services.permisos_store import EntradaOverride

pytestmark = pytest.mark.anyio


async def test_regla_de_rol_ultima_escritura_gana(db):
    await permisos_store.set_permiso_rol(db, "teacher", "Finance", True)
    await permisos_store.set_permiso_rol(db, "teacher", "Finance", False)
    assert await permisos_store.get_permisos_rol(db, "teacher") == {"Finance": False}


async def test_regla_de_rol_es_idempotente(db):
    await permisos_store.set_permiso_rol(db, "teacher", "Finance", False)
    await permisos_store.set_permiso_rol(db, "teacher", "Finance", False)
    await db.commit()
    assert await permisos_store.get_permisos_rol(db, "teacher") == {"Finance": False}


async def test_roles_y_modulos_desconocidos_se_aceptan(db):
    await permisos_store.set_permiso_rol(db, "Librarian", "Modulo Nuevo", False)
    assert await permisos_store.get_permisos_rol(db, "librarian") == {"Modulo Nuevo": False}


async def test_rol_se_normaliza_al_leer_y_escribir(db):
    await permisos_store.set_permiso_rol(db, "TEACHER", "Settings", False)
    assert await permisos_store.get_permisos_rol(db, " teacher ") == {"Settings": False}
    assert await permisos_store.get_regla_rol(db, "Teacher", "Settings") is False


async def test_rol_sin_reglas_devuelve_vacio(db):
    assert await permisos_store.get_permisos_rol(db, "student") == {}
    assert await permisos_store.get_regla_rol(db, "student", "Chat") is None


async def test_matriz_agrupa_por_rol(db):
    await permisos_store.set_permiso_rol(db, "admin", "Settings", True)
    await permisos_store.set_permiso_rol(db, "teacher", "Settings", False)
    await permisos_store.set_permiso_rol(db, "teacher", "Chat", True)
    assert await permisos_store.get_todos_permisos(db) == {
        "admin": {"Settings": True},
        "teacher": {"Chat": True, "Settings": False},
    }


async def test_overrides_reemplazan_el_conjunto_completo(db, crear_usuario):
    usuario = await crear_usuario("Ana Cruz")
    await permisos_store.set_overrides_usuario(
        db,
        usuario.id,
        [EntradaOverride("Finance", True, True), EntradaOverride("Reports", False, False)],
    )
    await permisos_store.set_overrides_usuario(db, usuario.id, [EntradaOverride("Chat", True, False)])

    assert await permisos_store.get_overrides_usuario(db, usuario.id) == [
        EntradaOverride("Chat", True, False)
    ]


async def test_lista_vacia_limpia_los_overrides(db, crear_usuario):
    usuario = await crear_usuario("Beto Diaz")
    await permisos_store.set_overrides_usuario(db, usuario.id, [EntradaOverride("Finance", False, False)])
    await permisos_store.set_overrides_usuario(db, usuario.id, [])
    assert await permisos_store.get_overrides_usuario(db, usuario.id) == []
    assert await permisos_store.get_override(db, usuario.id, "Finance") is None


async def test_clave_repetida_vale_la_ultima(db, crear_usuario):
    usuario = await crear_usuario("Carla Reyes")
    await permisos_store.set_overrides_usuario(
        db,
        usuario.id,
        [EntradaOverride("Finance", False, False), EntradaOverride("Finance", True, True)],
    )
    assert await permisos_store.get_override(db, usuario.id, "Finance") == EntradaOverride(
        "Finance", True, True
    )


async def test_overrides_de_otro_usuario_no_se_tocan(db, crear_usuario):
    ana = await crear_usuario("Ana Lopez")
    beto = await crear_usuario("Beto Lopez")
    await permisos_store.set_overrides_usuario(db, ana.id, [EntradaOverride("Finance", True, False)])
    await permisos_store.set_overrides_usuario(db, beto.id, [])
    assert await permisos_store.get_overrides_usuario(db, ana.id) == [
        EntradaOverride("Finance", True, False)
    ]
