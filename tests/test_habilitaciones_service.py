"""Índice de habilitaciones docente-materia."""
import pytest

from app.services import habilitaciones_service

pytestmark = pytest.mark.anyio


async def test_docentes_habilitados_por_materia(db, crear_usuario, catalogo, habilitar):
    t1 = await crear_usuario("T1")
    t2 = await crear_usuario("T2")
    await habilitar(t1.id, catalogo["math"])
    await habilitar(t2.id, catalogo["math"])
    await habilitar(t2.id, catalogo["science"])

    assert await habilitaciones_service.docentes_habilitados(db, catalogo["math"]) == {t1.id, t2.id}
    assert await habilitaciones_service.docentes_habilitados(db, catalogo["science"]) == {t2.id}
    assert await habilitaciones_service.materias_de_docente(db, t2.id) == {
        catalogo["math"],
        catalogo["science"],
    }


async def test_materia_sin_docentes(db, catalogo):
    assert await habilitaciones_service.docentes_habilitados(db, catalogo["science"]) == set()


async def test_habilitar_es_idempotente(db, crear_usuario, catalogo):
    t1 = await crear_usuario("T1")
    assert await habilitaciones_service.habilitar_docente(db, t1.id, catalogo["math"]) is True
    assert await habilitaciones_service.habilitar_docente(db, t1.id, catalogo["math"]) is False
    assert await habilitaciones_service.docentes_habilitados(db, catalogo["math"]) == {t1.id}


async def test_revocar_habilitacion(db, crear_usuario, catalogo, habilitar):
    t1 = await crear_usuario("T1")
    await habilitar(t1.id, catalogo["math"])

    assert await habilitaciones_service.revocar_habilitacion(db, t1.id, catalogo["math"]) is True
    assert await habilitaciones_service.docentes_habilitados(db, catalogo["math"]) == set()
    assert await habilitaciones_service.revocar_habilitacion(db, t1.id, catalogo["math"]) is False
