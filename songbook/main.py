"""Command that serves the catalogue API over HTTP."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from werkzeug.serving import make_server

from songbook.router import new_router

logger = logging.getLogger(__name__)

DB_USER = "root"
DB_PASSWORD = "password"
DB_HOST = "localhost:13306"
DB_NAME = "myapp"
LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8888

_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone().isoformat(),
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname),
            "msg": record.getMessage(),
        }
        entry.update(getattr(record, "fields", {}))
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(stream: TextIO | None = None) -> logging.Handler:
    """Send all log records at DEBUG and above to ``stream`` as JSON lines."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, _JSONFormatter):
            root.removeHandler(existing)
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(_JSONFormatter())
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler


def main(argv: list[str] | None = None) -> int:
    """Serve the API on port 8888 until interrupted."""
    parser = argparse.ArgumentParser(
        prog="songbook", description="Serve the singer and album catalogue over HTTP."
    )
    parser.parse_args(argv)
    configure_logging(sys.stdout)

    try:
        app = new_router(DB_USER, DB_PASSWORD, DB_HOST, DB_NAME)
    except Exception as exc:
        logger.error("new app error: %s", exc)
        return 1

    try:
        server = make_server(LISTEN_HOST, LISTEN_PORT, app, threaded=True)
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("server start running at :%d", LISTEN_PORT)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    logger.error("server closed")
    return 1


if __name__ == "__main__":
    sys.exit(main())