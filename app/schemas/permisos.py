"""Esquemas para reglas de rol, permisos individuales y evaluación de acceso."""
from pydantic import BaseModel, Field


class PermisoRolUpdate(BaseModel):
    """Body para habilitar o deshabilitar un módulo para un rol."""

    habilitado: bool = Field(description="True habilita el módulo para el rol; False lo oculta")


class PermisosRolResponse(BaseModel):
    """Reglas de un rol. Los módulos ausentes se consideran habilitados."""

    rol: str = Field(description="Rol normalizado")
    permisos: dict[str, bool] = Field(description="Clave de módulo -> habilitado")


class MatrizPermisosResponse(BaseModel):
    """Todas las reglas agrupadas por rol."""

    roles: dict[str, dict[str, bool]]


class OverrideItem(BaseModel):
    """Permiso individual de un usuario sobre un módulo."""

    modulo: str = Field(description="Clave del módulo", min_length=1)
    puede_ver: bool = Field(default=True, description="Puede ver el módulo")
    puede_editar: bool = Field(default=False, description="Puede modificar datos del módulo")


class OverridesUsuario(BaseModel):
    """Conjunto completo de permisos individuales. Al guardar reemplaza todo lo anterior."""

    entradas: list[OverrideItem] = Field(
        default_factory=list,
        description="Estado completo deseado. Lista vacía elimina todos los permisos individuales.",
    )


class OverridesUsuarioResponse(OverridesUsuario):
    usuario_id: int


class EvaluacionAcceso(BaseModel):
    """Resultado de evaluar un módulo para el usuario actual."""

    modulo: str
    puede_ver: bool
    puede_editar: bool
