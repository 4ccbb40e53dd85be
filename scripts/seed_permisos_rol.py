"""Carga la matriz de permisos por rol por defecto.

Solo inserta las reglas que faltan: nunca pisa un cambio hecho por un
administrador desde la pantalla de configuración.
"""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.database import AsyncSessionLocal
from app.models import PermisoRolModulo, Rol
from scripts.seed_modulos import MODULOS

# Módulos habilitados por rol; el resto del catálogo queda deshabilitado
HABILITADOS = {
    "admin": set(MODULOS),
    "principal": set(MODULOS),
    "teacher": {
        "Dashboard", "Announcements", "Student Records", "Classroom", "Classes",
        "Reports", "Chat", "Calendar", "Suggestions",
    },
    "student": {"Dashboard", "Announcements", "Classroom", "Chat", "Calendar", "Suggestions"},
    "finance": {
        "Dashboard", "Announcements", "Student Records", "Accounting", "Finance",
        "Reports", "Chat", "Calendar",
    },
    "registrar": {
        "Dashboard", "Announcements", "Student Records", "Grade Levels", "Classes",
        "Registrars", "Academic Years", "Reports", "Chat", "Calendar",
    },
    "accounting": {
        "Dashboard", "Announcements", "Student Records", "Accounting", "Finance",
        "Reports", "Chat", "Calendar",
    },
}


async def seed_permisos_rol():
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Rol.nombre))
        roles_existentes = set(result.scalars().all())
        for rol in HABILITADOS:
            if rol not in roles_existentes:
                session.add(Rol(nombre=rol))

        result = await session.execute(select(PermisoRolModulo.rol, PermisoRolModulo.modulo))
        reglas_existentes = set(result.all())

        nuevas = 0
        for rol, habilitados in HABILITADOS.items():
            for modulo in MODULOS:
                if (rol, modulo) in reglas_existentes:
                    continue
                session.add(PermisoRolModulo(rol=rol, modulo=modulo, habilitado=modulo in habilitados))
                nuevas += 1
        await session.commit()
    print(f"Reglas creadas: {nuevas} ({len(HABILITADOS)} roles x {len(MODULOS)} módulos)")


if __name__ == "__main__":
    asyncio.run(seed_permisos_rol())
