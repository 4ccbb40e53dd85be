"""Esquemas para autenticación y JWT."""
from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Body del endpoint de login."""

    email: EmailStr = Field(description="Correo electrónico del usuario", examples=["admin@escuela.edu"])
    password: str = Field(description="Contraseña en texto plano", min_length=1)


class TokenResponse(BaseModel):
    """Respuesta con access_token JWT y rol del usuario."""

    access_token: str = Field(description="Token JWT para enviar en header Authorization: Bearer <token>")
    token_type: str = Field(default="bearer", description="Tipo de token (siempre 'bearer')")
    rol: str = Field(description="Rol normalizado del usuario autenticado")


class MeResponse(BaseModel):
    """Usuario autenticado con los módulos que puede ver."""

    id: int
    nombre: str
    email: str
    rol: str
    estado: str
    modulos: list[str] = Field(default_factory=list, description="Claves de módulos habilitados para el usuario")
