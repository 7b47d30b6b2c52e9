"""URL routing for the catalogue API."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from songbook.controller import AlbumController, SingerController
from songbook.middleware import LoggingMiddleware
from songbook.mysqldb import MySQLAlbumRepository, MySQLSingerRepository, connect
from songbook.service import AlbumService, SingerService


class _Dispatcher:
    def __init__(self, url_map: Map) -> None:
        self.url_map = url_map

    def _respond(self, environ: dict[str, Any]) -> Response:
        adapter = self.url_map.bind_to_environ(environ)
        try:
            handler, args = adapter.match()
        except NotFound:
            return Response("404 page not found\n", status=404, content_type="text/plain; charset=utf-8")
        except MethodNotAllowed as exc:
            response = Response(
                "Method Not Allowed\n", status=405, content_type="text/plain; charset=utf-8"
            )
            response.headers["Allow"] = ", ".join(sorted(exc.valid_methods or ()))
            return response
        except HTTPException as exc:
            return exc.get_response(environ)
        return handler(Request(environ), **args)

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        return self._respond(environ)(environ, start_response)


def build_app(singer_service: SingerService, album_service: AlbumService) -> LoggingMiddleware:
    """Build the WSGI application serving singers and albums."""
    singers = SingerController(singer_service)
    albums = AlbumController(album_service, singer_service)
    url_map = Map(
        [
            Rule("/singers", methods=["GET"], endpoint=singers.list_singers),
            Rule("/singers/<id>", methods=["GET"], endpoint=singers.get_singer),
            Rule("/singers", methods=["POST"], endpoint=singers.post_singer),
            Rule("/singers/<id>", methods=["DELETE"], endpoint=singers.delete_singer),
            Rule("/albums", methods=["GET"], endpoint=albums.list_albums),
            Rule("/albums/<id>", methods=["GET"], endpoint=albums.get_album),
            Rule("/albums", methods=["POST"], endpoint=albums.post_album),
            Rule("/albums/<id>", methods=["DELETE"], endpoint=albums.delete_album),
        ]
    )
    return LoggingMiddleware(_Dispatcher(url_map))


def new_router(db_user: str, db_pass: str, db_host: str, db_name: str) -> LoggingMiddleware:
    """Connect to MySQL, check the connection and build the application on it."""
    db = connect(db_user, db_pass, db_host, db_name)
    db.ping()
    singer_service = SingerService(MySQLSingerRepository(db))
    album_service = AlbumService(MySQLAlbumRepository(db))
    return build_app(singer_service, album_service)