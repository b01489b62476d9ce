from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskMongo(BaseModel):
    """
    Modelo de Task para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: int = Field(alias="_id")
    title: str
    description: str | None = None
    completed: bool = False

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Convierte el documento al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Crea un TaskMongo a partir de una tarea que ya tiene ID.

        Argumentos:
            task (Task): La entidad de dominio.

        Retorna:
            TaskMongo: El documento de MongoDB.
        """
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
        )
