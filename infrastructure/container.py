import logging
import os

from core.application.task_service import TaskService
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

SUPPORTED_ORMS = ("peewee", "sqlalchemy", "mongo", "memory")


def build_task_repository(orm: str | None = None) -> TaskRepository:
    """
    Crea el adaptador de persistencia indicado por `orm` o por la variable ORM.

    Los adaptadores se importan aquí para no abrir conexiones de backends
    que no se usan.
    """
    orm = (orm or os.getenv("ORM", "peewee")).lower()
    logger.info(f"Usando repositorio de tareas: {orm}")

    if orm == "mongo":
        from infrastructure.mongo.repository.task_repository import MongoTaskRepository

        return MongoTaskRepository()
    elif orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    elif orm == "memory":
        from infrastructure.memory.repository.task_repository import (
            InMemoryTaskRepository,
        )

        return InMemoryTaskRepository()
    elif orm == "peewee":
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        return PeeweeTaskRepository()

    raise ValueError(f"ORM no soportado: {orm!r} (opciones: {', '.join(SUPPORTED_ORMS)})")


def build_task_service(repository: TaskRepository) -> TaskService:
    return TaskService(repository=repository)
