"""HTTP handlers for the singer and album endpoints."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from werkzeug.wrappers import Request, Response

from songbook.model import Album, Singer
from songbook.service import AlbumService, SingerService

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_DECODER = json.JSONDecoder()


def _encode(payload: Any) -> bytes:
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return (text + "\n").encode("utf-8")


def _json_response(payload: Any, status: int = 200) -> Response:
    return Response(_encode(payload), status=status, content_type="application/json")


def _no_content() -> Response:
    response = Response(status=204)
    del response.headers["Content-Type"]
    return response


def error_response(status_code: int, message: str) -> Response:
    """Log an error and build a JSON ``{"message": ...}`` response."""
    logger.error("error occurred", extra={"fields": {"message": message}})
    return _json_response({"message": message}, status_code)


def _parse_id(text: str) -> int:
    quoted = json.dumps(text, ensure_ascii=False)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"parsing {quoted}: invalid syntax")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"parsing {quoted}: value out of range")
    return value


def _decode_body(request: Request) -> Any:
    text = request.get_data().decode("utf-8").lstrip()
    if not text:
        raise ValueError("EOF")
    value, _ = _DECODER.raw_decode(text)
    return value


def _album_view(album: Album, singer: Singer) -> dict[str, Any]:
    return {"id": album.id, "title": album.title, "singer": singer.to_dict()}


class SingerController:
    """Handlers for the ``/singers`` endpoints."""

    def __init__(self, service: SingerService) -> None:
        self.service = service

    def list_singers(self, request: Request) -> Response:
        try:
            singers = self.service.list_singers()
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response([singer.to_dict() for singer in singers])

    def get_singer(self, request: Request, id: str) -> Response:
        try:
            singer_id = _parse_id(id)
        except ValueError as exc:
            return error_response(400, f"invalid path param: {exc}")
        try:
            singer = self.service.get_singer(singer_id)
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response(singer.to_dict())

    def post_singer(self, request: Request) -> Response:
        try:
            singer = Singer.from_dict(_decode_body(request))
        except ValueError as exc:
            return error_response(400, f"invalid body param: {exc}")
        try:
            self.service.add_singer(singer)
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response(singer.to_dict())

    def delete_singer(self, request: Request, id: str) -> Response:
        try:
            singer_id = _parse_id(id)
        except ValueError as exc:
            return error_response(400, f"invalid path param: {exc}")
        try:
            self.service.delete_singer(singer_id)
        except Exception as exc:
            return error_response(500, str(exc))
        return _no_content()


class AlbumController:
    """Handlers for the ``/albums`` endpoints; albums are shown with their singer."""

    def __init__(self, album_service: AlbumService, singer_service: SingerService) -> None:
        self.album_service = album_service
        self.singer_service = singer_service

    def list_albums(self, request: Request) -> Response:
        try:
            albums = self.album_service.list_albums()
            views = [
                _album_view(album, self.singer_service.get_singer(album.singer_id))
                for album in albums
            ]
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response(views)

    def get_album(self, request: Request, id: str) -> Response:
        try:
            album_id = _parse_id(id)
        except ValueError as exc:
            return error_response(400, f"invalid path param: {exc}")
        try:
            album = self.album_service.get_album(album_id)
            singer = self.singer_service.get_singer(album.singer_id)
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response(_album_view(album, singer))

    def post_album(self, request: Request) -> Response:
        try:
            album = Album.from_dict(_decode_body(request))
        except ValueError as exc:
            return error_response(400, f"invalid body param: {exc}")
        try:
            self.album_service.add_album(album)
        except Exception as exc:
            return error_response(500, str(exc))
        return _json_response(album.to_dict())

    def delete_album(self, request: Request, id: str) -> Response:
        try:
            album_id = _parse_id(id)
        except ValueError as exc:
            return error_response(400, f"invalid path param: {exc}")
        try:
            self.album_service.delete_album(album_id)
        except Exception as exc:
            return error_response(500, str(exc))
        return _no_content()