from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from core.domain.models.task import Task

from backend_fastapi.api.deps import task_service
from backend_fastapi.api.schemas import TaskRequest
from core.application.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Rango de un entero con signo de 64 bits; fuera de él es un 400.
TaskId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def _not_found(task_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"Task {task_id} not found"
    )


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_200_OK,
    summary="Crear tarea",
    responses={400: {"description": "Datos inválidos"}},
)
def create_task(
    body: TaskRequest,
    service: TaskService = Depends(task_service),
) -> Task:
    """
    Crea una nueva tarea. El ID lo asigna el almacén.

    - **title**: Título de la tarea (obligatorio, no vacío).
    - **description**: Descripción opcional.
    - **completed**: Estado de finalización (por defecto false).
    """
    return service.create(body.to_domain())


@router.get(
    "",
    response_model=list[Task],
    summary="Listar tareas",
)
def list_tasks(
    service: TaskService = Depends(task_service),
) -> list[Task]:
    """
    Devuelve todas las tareas, sin orden garantizado.
    """
    return service.find_all()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Obtener tarea por ID",
    responses={404: {"description": "No encontrada"}},
)
def get_task(
    task_id: TaskId,
    service: TaskService = Depends(task_service),
) -> Task:
    task = service.find_by_id(task_id)
    if task is None:
        raise _not_found(task_id)
    return task


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Actualizar tarea por ID",
    responses={400: {"description": "Datos inválidos"}, 404: {"description": "No encontrada"}},
)
def update_task(
    task_id: TaskId,
    body: TaskRequest,
    service: TaskService = Depends(task_service),
) -> Task:
    """
    Reemplaza todos los campos de una tarea existente.

    - **task_id**: ID de la tarea a modificar.
    - **title**: Nuevo título.
    - **description**: Nueva descripción.
    - **completed**: Nuevo estado.
    """
    updated = service.update(task_id, body.to_domain(task_id))
    if updated is None:
        raise _not_found(task_id)
    return updated


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar tarea por ID",
)
def delete_task(
    task_id: TaskId,
    service: TaskService = Depends(task_service),
) -> None:
    """
    Elimina una tarea. Responde 204 aunque la tarea no existiera.
    """
    service.delete(task_id)
