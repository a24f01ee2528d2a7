import logging
from pathlib import Path

from flask import Flask

from . import config
from .services.api_client import EntriesClient
from .store import EntryStore

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)

    # Basis-Konfiguration
    app.config.from_object(config)

    # Lokale Instanz-Config (instance/config.py), falls vorhanden
    app.config.from_pyfile("config.py", silent=True)

    # Test-Config überschreibt alles (z. B. für Tests)
    if test_config:
        app.config.update(test_config)

    # Instance-Ordner sicherstellen
    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    _configure_logging(app.config["LOG_LEVEL"])

    # Entry Store: einmal pro App-Prozess, Client austauschbar (Tests)
    client = app.config.get("ENTRIES_CLIENT") or EntriesClient(
        app.config["ENTRIES_API_URL"],
        timeout=app.config["ENTRIES_API_TIMEOUT"],
    )
    app.extensions["coachlog.store"] = EntryStore(client)

    # Healthcheck
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Blueprints registrieren
    from .blueprints.dashboard import bp as dashboard_bp
    app.register_blueprint(dashboard_bp)

    return app


def _configure_logging(level: str) -> None:
    logger = logging.getLogger(__name__)
    logger.setLevel(level)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
