"""Modelos SQLAlchemy (tablas de la base de datos)."""
from app.models.role import Rol
from app.models.user import Usuario
from app.models.modulo import Modulo, UsuarioModulo
from app.models.permiso_rol import PermisoRolModulo
from app.models.subject import Materia
from app.models.grado import Grado
from app.models.gestion_academica import GestionAcademica
from app.models.docente_materia import DocenteMateria
from app.models.asignacion_docente import AsignacionDocente

__all__ = [
    "Rol",
    "Usuario",
    "Modulo",
    "UsuarioModulo",
    "PermisoRolModulo",
    "Materia",
    "Grado",
    "GestionAcademica",
    "DocenteMateria",
    "AsignacionDocente",
]
