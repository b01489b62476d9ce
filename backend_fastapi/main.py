import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import build_task_repository, build_task_service

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

API_CONTACT = {
    "name": "Laura Arvez",
    "email": "arvezlau@hotmail.com",
    "url": "https://lauraarvez.github.io",
}
API_LICENSE = {"name": "Apache 2.0"}
API_EXTERNAL_DOCS = {
    "description": "Portafolio / Documentación adicional",
    "url": "https://lauraarvez.github.io",
}


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Los datos inválidos son un 400, no el 422 por defecto de FastAPI.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def _cors_origins() -> list[str]:
    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins == "*":
        return ["*"]
    return [origin.strip() for origin in cors_origins.split(",")]


def create_app(repository: TaskRepository | None = None) -> FastAPI:
    """
    Construye la aplicación.

    Args:
        repository: Repositorio a usar. Si es None, el lifespan lo crea con
            el container según la variable ORM. En ambos casos se cierra al
            apagar la aplicación.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        repo = repository if repository is not None else build_task_repository()
        app.state.task_service = build_task_service(repo)
        try:
            yield
        finally:
            repo.close()
            logger.info("Repositorio de tareas cerrado")

    app = FastAPI(
        title="Task Manager API",
        description="API de gestión de tareas (CRUD)",
        version="v1",
        contact=API_CONTACT,
        license_info=API_LICENSE,
        lifespan=lifespan,
    )

    # Configure CORS for frontend from environment variables
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
        allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(tasks_router)

    base_openapi = app.openapi

    def openapi() -> dict:
        # FastAPI cachea el esquema; externalDocs se añade una sola vez.
        schema = base_openapi()
        schema.setdefault("externalDocs", API_EXTERNAL_DOCS)
        return schema

    app.openapi = openapi
    return app


app = create_app()
