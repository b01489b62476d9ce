import logging
from typing import Any

from pymongo import ReturnDocument
from pymongo.collection import Collection

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import close_client, get_db

logger = logging.getLogger(__name__)

_COUNTER_ID = "tasks"


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    Los IDs son enteros secuenciales tomados de la colección `counters`,
    igual que la clave autoincremental de las implementaciones SQL.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks
        self.counters: Collection[Any] = self.db.counters

    def _next_id(self) -> int:
        counter = self.counters.find_one_and_update(
            {"_id": _COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def save(self, task: Task) -> Task:
        """
        Inserta la tarea (asignando ID) o la sobrescribe si ya tiene uno.

        Argumentos:
            task (Task): La tarea a guardar.

        Retorna:
            Task: La tarea guardada, con ID.
        """
        if task.id is None:
            task = task.with_id(self._next_id())

        task_dict = TaskMongo.from_domain(task).model_dump(by_alias=True)
        self.collection.update_one(
            {"_id": task_dict["_id"]}, {"$set": task_dict}, upsert=True
        )
        logger.debug(f"Tarea {task.id} guardada en MongoDB")
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            task_id (int): El ID de la tarea.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": task_id})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def find_all(self) -> list[Task]:
        docs = self.collection.find()
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def delete_by_id(self, task_id: int) -> None:
        self.collection.delete_one({"_id": task_id})

    def close(self) -> None:
        close_client()
        logger.info("Cliente MongoDB cerrado")
