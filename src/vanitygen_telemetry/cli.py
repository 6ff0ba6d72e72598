"""Command-line entry points for the telemetry service."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .app import create_app
from .config.settings import load_settings
from .logging import configure_logging
from .storage.sql import SQLTelemetryStore

logger = logging.getLogger(__name__)

DB_URL_HELP = "SQLAlchemy database URL (default from TELEMETRY_DATABASE_URL)"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vanitygen-telemetry",
        description="Receive anonymous vanity generator telemetry and store it in a SQL database.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP ingestion endpoint")
    serve.add_argument("--host", help="Interface to bind (default from TELEMETRY_HOST)")
    serve.add_argument("--port", type=int, help="Port to listen on (default from TELEMETRY_PORT)")
    serve.add_argument("--db-url", dest="database_url", help=DB_URL_HELP)

    init_db = subparsers.add_parser("init-db", help="Create the telemetry table")
    init_db.add_argument("--db-url", dest="database_url", help=DB_URL_HELP)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        database_url=args.database_url,
    )
    configure_logging(settings.log_level)

    store = SQLTelemetryStore(settings.database_url)
    if args.command == "init-db":
        store.create_schema()
        return 0

    app = create_app(store=store, settings=settings)
    logger.info("Serving telemetry on %s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=False, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
