import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """
    Casos de uso de tareas sobre el puerto TaskRepository.

    Todo es delegación directa salvo `update`, que comprueba antes que la
    tarea exista.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def create(self, task: Task) -> Task:
        created = self._repository.save(task)
        logger.info(f"Tarea {created.id} creada")
        return created

    def find_all(self) -> list[Task]:
        return self._repository.find_all()

    def find_by_id(self, task_id: int) -> Task | None:
        return self._repository.find_by_id(task_id)

    def update(self, task_id: int, updated: Task) -> Task | None:
        """
        Reemplaza todos los campos de la tarea `task_id`.

        Returns:
            La tarea guardada, o None si no existía (sin llamar a save).
        """
        if self._repository.find_by_id(task_id) is None:
            logger.info(f"Tarea {task_id} no encontrada, no se actualiza")
            return None

        task = Task(
            id=task_id,
            title=updated.title,
            description=updated.description,
            completed=updated.completed,
        )
        return self._repository.save(task)

    def delete(self, task_id: int) -> None:
        self._repository.delete_by_id(task_id)
        logger.debug(f"Tarea {task_id} eliminada (si existía)")
