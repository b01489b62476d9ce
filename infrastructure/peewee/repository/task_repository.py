import logging
from typing import List
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db

logger = logging.getLogger(__name__)

class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Sin migraciones: la tabla se crea al arrancar si no existe.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)
        logger.info(f"Peewee conectado a {db.database}")

    @staticmethod
    def _to_domain(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            completed=model.completed,
        )

    def save(self, task: Task) -> Task:
        with db.atomic():
            if task.id is None:
                created = TaskModel.create(
                    title=task.title,
                    description=task.description,
                    completed=task.completed,
                )
                logger.debug(f"Tarea {created.id} insertada")
                return task.with_id(created.id)

            try:
                existing = TaskModel.get(TaskModel.id == task.id)
                existing.title = task.title
                existing.description = task.description
                existing.completed = task.completed
                existing.save()
            except TaskModel.DoesNotExist:
                TaskModel.create(
                    id=task.id,
                    title=task.title,
                    description=task.description,
                    completed=task.completed,
                )
            logger.debug(f"Tarea {task.id} guardada")
            return task

    def find_by_id(self, task_id: int) -> Task | None:
        try:
            return self._to_domain(TaskModel.get(TaskModel.id == task_id))
        except TaskModel.DoesNotExist:
            return None

    def find_all(self) -> List[Task]:
        return [self._to_domain(t) for t in TaskModel.select()]

    def delete_by_id(self, task_id: int) -> None:
        query = TaskModel.delete().where(TaskModel.id == task_id)
        query.execute()

    def close(self) -> None:
        # Solo cierra la conexión del hilo actual; las de los hilos del
        # threadpool se liberan al terminar el proceso.
        if not db.is_closed():
            db.close()
            logger.info("Conexión Peewee cerrada")
