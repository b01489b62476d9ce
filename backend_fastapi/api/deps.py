from fastapi import Request

from core.application.task_service import TaskService


def task_service(request: Request) -> TaskService:
    # Creado en el lifespan de la app (ver backend_fastapi.main).
    return request.app.state.task_service
