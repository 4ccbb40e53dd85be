"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.core.config import settings
from app.core.database import init_db
from app.models import *  # noqa: F401, F403 - Registra modelos en Base.metadata antes de init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "auth", "description": "Autenticación: login con correo y contraseña. Devuelve un JWT."},
    {"name": "api", "description": "Usuario actual y módulos visibles."},
    {
        "name": "permisos",
        "description": "Reglas de acceso por rol y permisos individuales por usuario. Un módulo sin regla está habilitado.",
    },
    {"name": "modulos", "description": "Catálogo de módulos del sistema."},
    {"name": "roles", "description": "Registro de roles, incluidos los personalizados."},
    {"name": "materias", "description": "Materias y habilitación de docentes por materia."},
    {"name": "grados", "description": "Niveles escolares."},
    {"name": "gestiones", "description": "Gestiones académicas: crear, listar y activar años lectivos."},
    {
        "name": "asignaciones",
        "description": "Asignación de docentes habilitados a cupos (materia, grado, gestión).",
    },
    {"name": "salud", "description": "Comprobación del estado del servicio."},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestiona el ciclo de vida: crea las tablas al iniciar."""
    await init_db()
    logger.info("Base de datos inicializada")
    yield


app = FastAPI(
    title=settings.app_name,
    description="API REST de control de acceso por módulos y asignación de docentes.",
    version="0.1.0",
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
    swagger_ui_parameters={"persistAuthorization": True},
)

# CORS: permitir acceso desde cualquier origen (frontend en otro puerto/dominio)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get(
    "/health",
    tags=["salud"],
    summary="Estado del servicio",
)
async def health_check():
    """Comprueba que el servicio está activo. No requiere autenticación."""
    return {"status": "ok", "message": "Servicio en ejecución"}
