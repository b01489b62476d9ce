from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Puerto de persistencia de tareas.

    La ausencia de una tarea se devuelve como None, nunca como excepción.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Libera la conexión del adaptador. Por defecto no hace nada."""
        return None
