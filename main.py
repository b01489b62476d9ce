import copy
import logging
import logging.config
import os

import uvicorn
from dotenv import load_dotenv
from uvicorn.config import LOGGING_CONFIG

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def build_log_config(log_level: str) -> dict:
    """
    Config de uvicorn ampliada con el logger raíz para los logs de la app.

    Se pasa a uvicorn.run para que también la aplique el proceso hijo que
    sirve la app cuando RELOAD está activo.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["formatters"]["app"] = {
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    }
    config["handlers"]["app"] = {
        "class": "logging.StreamHandler",
        "formatter": "app",
        "stream": "ext://sys.stderr",
    }
    config["root"] = {"handlers": ["app"], "level": log_level.upper()}
    return config


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port_str = os.getenv("PORT", "8000")
    port = int(port_str)
    reload = _as_bool(os.getenv("RELOAD", "true"))
    log_level = os.getenv("LOG_LEVEL", "info")
    log_config = build_log_config(log_level)

    logging.config.dictConfig(log_config)
    logging.getLogger(__name__).info(
        f"Starting server at http://{host}:{port} (Reload: {reload}, ORM: {os.getenv('ORM', 'peewee')})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        log_config=log_config,
    )


if __name__ == "__main__":
    run()
