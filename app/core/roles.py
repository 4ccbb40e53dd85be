"""Normalización de nombres de rol y claves de módulo.

Los roles son un vocabulario abierto (roles personalizados creados en tiempo
de ejecución), por eso se guardan como texto y no como un enum. Lo único que
se exige es una forma canónica: sin espacios sobrantes y en minúsculas, de
modo que "Teacher", " teacher " y "TEACHER" apunten a las mismas reglas.

Las funciones `clave_*` dan la forma canónica sin validar y son las que usan
las lecturas: una clave vacía o demasiado larga nunca tiene filas guardadas,
así que simplemente no encuentra reglas. Las `normalizar_*` validan y son las
que usan las escrituras.
"""
import re

LONGITUD_MAXIMA_ROL = 64

_ESPACIOS = re.compile(r"\s+")


def clave_rol(nombre: str | None) -> str:
    return _ESPACIOS.sub(" ", (nombre or "").strip()).lower()


def clave_modulo(clave: str | None) -> str:
    return (clave or "").strip()


def normalizar_rol(nombre: str | None) -> str:
    """Devuelve el nombre de rol canónico o lanza ValueError si está vacío o es demasiado largo."""
    limpio = clave_rol(nombre)
    if not limpio:
        raise ValueError("El nombre del rol no puede estar vacío")
    if len(limpio) > LONGITUD_MAXIMA_ROL:
        raise ValueError(f"El nombre del rol supera {LONGITUD_MAXIMA_ROL} caracteres")
    return limpio


def normalizar_modulo(clave: str | None) -> str:
    """Las claves de módulo se comparan tal cual, solo sin espacios en los extremos."""
    limpio = clave_modulo(clave)
    if not limpio:
        raise ValueError("La clave del módulo no puede estar vacía")
    return limpio
