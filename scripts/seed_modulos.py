"""Crea en la tabla modulos las claves de módulo que usa el frontend."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.database import AsyncSessionLocal
from app.models import Modulo

# Mismo orden que el menú lateral
MODULOS = [
    "Dashboard",
    "Announcements",
    "Student Records",
    "Classroom",
    "Grade Levels",
    "Classes",
    "Teachers",
    "Admins",
    "Principals",
    "Registrars",
    "Accounting",
    "Finance",
    "Academic Years",
    "Reports",
    "Chat",
    "Calendar",
    "Suggestions",
    "Settings",
]


async def seed_modulos():
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Modulo))
        existentes = {m.nombre: m for m in result.scalars().all()}

        creados = []
        for orden, nombre in enumerate(MODULOS):
            if nombre in existentes:
                existentes[nombre].orden = orden
            else:
                session.add(Modulo(nombre=nombre, orden=orden))
                creados.append(nombre)
        await session.commit()

        if creados:
            print(f"Módulos creados: {creados}")
        else:
            print("Todos los módulos ya existen, no se crearon nuevos.")

        result = await session.execute(select(Modulo).order_by(Modulo.orden, Modulo.id))
        print("\nMódulos actuales en la BD:")
        for m in result.scalars().all():
            print(f"  id={m.id} | orden={m.orden} | nombre={m.nombre}")


if __name__ == "__main__":
    asyncio.run(seed_modulos())
