import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.session.db import engine, get_session, init_db
from infrastructure.sqlalchemy.model.models import TaskModel

logger = logging.getLogger(__name__)


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        completed=task_model.completed,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()
        logger.info(f"SQLAlchemy conectado a {engine.url.render_as_string(hide_password=True)}")

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            task_model = TaskModel(
                id=task.id,
                title=task.title,
                description=task.description,
                completed=task.completed,
            )
            if task.id is None:
                session.add(task_model)
            else:
                task_model = session.merge(task_model)
            session.commit()
            logger.debug(f"Tarea {task_model.id} guardada")
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def find_by_id(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def find_all(self) -> list[Task]:
        session = get_session()
        try:
            return [_to_domain(task_model) for task_model in session.query(TaskModel).all()]
        finally:
            session.close()

    def delete_by_id(self, task_id: int) -> None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        engine.dispose()
        logger.info("Engine SQLAlchemy liberado")
