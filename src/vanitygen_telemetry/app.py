"""Application factory for the telemetry ingestion service."""
from __future__ import annotations

from flask import Flask

from .api.dependencies import HANDLER_EXTENSION
from .api.routes import ingest_bp
from .config.settings import ServiceSettings, load_settings
from .ingest.handler import IngestionHandler
from .storage.base import TelemetryStore
from .storage.sql import SQLTelemetryStore


def create_app(
    store: TelemetryStore | None = None,
    settings: ServiceSettings | None = None,
) -> Flask:
    """Build the Flask app around ``store``.

    When no store is given a ``SQLTelemetryStore`` is opened at
    ``settings.database_url`` (settings default to the environment).
    """
    if store is None:
        settings = settings or load_settings()
        store = SQLTelemetryStore(settings.database_url)

    app = Flask(__name__, static_folder=None)
    # Doubled slashes are routed as-is rather than redirected.
    app.url_map.merge_slashes = False
    app.extensions[HANDLER_EXTENSION] = IngestionHandler(store)
    app.register_blueprint(ingest_bp)
    return app
