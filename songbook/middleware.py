"""WSGI middleware that logs each request and the status it received."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

from werkzeug.wsgi import ClosingIterator

logger = logging.getLogger(__name__)

_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def _request_uri(environ: dict[str, Any]) -> str:
    raw = environ.get("REQUEST_URI") or environ.get("RAW_URI")
    if raw:
        return str(raw)
    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    uri = quote(path.encode("latin-1"), safe=_PATH_SAFE)
    query = environ.get("QUERY_STRING")
    return f"{uri}?{query}" if query else uri


class _StatusRecorder:
    """Wraps ``start_response`` and remembers the status code it was given."""

    def __init__(self, start_response: Callable[..., Any]) -> None:
        self._start_response = start_response
        self.code = int(HTTPStatus.INTERNAL_SERVER_ERROR)

    def __call__(self, status: str, headers: list[tuple[str, str]], exc_info: Any = None) -> Any:
        self.code = int(status.split(None, 1)[0])
        return self._start_response(status, headers, exc_info)

    def log_response(self) -> int:
        """Write the ``response`` entry and return the recorded code."""
        code = self.code
        logger.info("response", extra={"fields": {"code": code}})
        return code


class LoggingMiddleware:
    """Log an ``access`` entry before and a ``response`` entry after each request."""

    def __init__(self, app: Callable[..., Iterable[bytes]]) -> None:
        self.app = app

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        logger.info(
            "access",
            extra={
                "fields": {
                    "uri": _request_uri(environ),
                    "method": environ.get("REQUEST_METHOD", ""),
                }
            },
        )
        recorder = _StatusRecorder(start_response)
        result = self.app(environ, recorder)
        return ClosingIterator(result, recorder.log_response)