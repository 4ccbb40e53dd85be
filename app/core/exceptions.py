"""Errores de dominio de la asignación de docentes.

Los servicios los lanzan; los endpoints los traducen a HTTPException.
Los errores de infraestructura (SQLAlchemyError) no se envuelven.
"""


class AsignacionError(Exception):
    """Base de los resultados rechazados al asignar o quitar docentes."""


class DocenteNoHabilitadoError(AsignacionError):
    """El docente no tiene la habilitación para la materia solicitada."""

    def __init__(self, docente_id: int, materia_id: int) -> None:
        self.docente_id = docente_id
        self.materia_id = materia_id
        super().__init__(f"docente {docente_id} no habilitado para materia {materia_id}")


class ConflictoCupoError(AsignacionError):
    """El registro de asignaciones rechazó la escritura: el cupo ya tiene docente."""

    def __init__(self, materia_id: int, grado_id: int, gestion_id: int, docente_id: int | None = None) -> None:
        self.materia_id = materia_id
        self.grado_id = grado_id
        self.gestion_id = gestion_id
        self.docente_id = docente_id
        super().__init__(
            f"cupo (materia={materia_id}, grado={grado_id}, gestion={gestion_id}) ocupado"
        )


class CupoOcupadoError(ConflictoCupoError):
    """Conflicto de cupo tal como lo reporta el asignador a sus llamadores."""


class AsignacionNoEncontradaError(AsignacionError):
    """La asignación a quitar no existe (nunca existió o ya fue quitada)."""

    def __init__(self, asignacion_id: int) -> None:
        self.asignacion_id = asignacion_id
        super().__init__(f"asignación {asignacion_id} no encontrada")


class DocenteInactivoError(DocenteNoHabilitadoError):
    """El docente tiene la habilitación pero su usuario está dado de baja."""
