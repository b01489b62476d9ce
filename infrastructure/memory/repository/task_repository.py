import threading
from itertools import count

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Repositorio en memoria con IDs secuenciales desde 1. Útil para tests."""

    def __init__(self) -> None:
        self._data: dict[int, Task] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def save(self, task: Task) -> Task:
        with self._lock:
            if task.id is None:
                task = task.with_id(next(self._ids))
            self._data[task.id] = task
            return task

    def find_by_id(self, task_id: int) -> Task | None:
        with self._lock:
            return self._data.get(task_id)

    def find_all(self) -> list[Task]:
        with self._lock:
            return list(self._data.values())

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            self._data.pop(task_id, None)
