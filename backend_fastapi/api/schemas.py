from pydantic import BaseModel, Field, field_validator

from core.domain.models.task import Task


class TaskRequest(BaseModel):
    """
    Cuerpo de POST /tasks y PUT /tasks/{task_id}.
    """

    title: str = Field(..., description="Título obligatorio, no puede estar en blanco")
    description: str | None = Field(default=None, description="Descripción opcional")
    completed: bool = Field(default=False, description="Estado de finalización; null equivale a false")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("El título no puede estar vacío")
        return value

    @field_validator("completed", mode="before")
    @classmethod
    def completed_null_is_false(cls, value):
        return False if value is None else value

    def to_domain(self, task_id: int | None = None) -> Task:
        return Task(
            id=task_id,
            title=self.title,
            description=self.description,
            completed=self.completed,
        )
