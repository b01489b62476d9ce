import logging.config

import main


def test_log_config_adds_root_logger():
    config = main.build_log_config("debug")

    assert config["root"] == {"handlers": ["app"], "level": "DEBUG"}
    assert "app" in config["handlers"]
    # Los loggers de uvicorn se mantienen.
    assert "uvicorn.access" in config["loggers"]


def test_log_config_is_valid_for_dict_config():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    try:
        logging.config.dictConfig(main.build_log_config("warning"))

        assert root.level == logging.WARNING
    finally:
        root.setLevel(level)
        root.handlers[:] = handlers


def test_run_passes_log_config_to_uvicorn(monkeypatch):
    captured = {}
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: captured.update(kwargs))
    monkeypatch.setattr(main.logging.config, "dictConfig", lambda config: None)
    monkeypatch.setenv("RELOAD", "true")
    monkeypatch.setenv("LOG_LEVEL", "info")

    main.run()

    assert captured["reload"] is True
    assert captured["log_config"]["root"]["level"] == "INFO"
