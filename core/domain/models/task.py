from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Task:
    id: int | None
    title: str
    description: str | None = None
    completed: bool = False

    def with_id(self, new_id: int) -> "Task":
        """Copia de la tarea con otro ID y el resto de campos intacto."""
        return replace(self, id=new_id)
