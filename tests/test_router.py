from unittest.mock import MagicMock, patch

import pymysql
import pytest
from werkzeug.test import Client

from songbook.model import NotFoundError
from songbook.repository import AlbumRepository, SingerRepository
from songbook.router import build_app, new_router
from songbook.service import AlbumService, SingerService


class MemorySingers(SingerRepository):
    def __init__(self):
        self.items = {}

    def get_all(self):
        return [self.items[key] for key in sorted(self.items)]

    def get(self, singer_id):
        try:
            return self.items[singer_id]
        except KeyError:
            raise NotFoundError() from None

    def add(self, singer):
        self.items[singer.id] = singer

    def delete(self, singer_id):
        self.items.pop(singer_id, None)


class MemoryAlbums(AlbumRepository):
    def __init__(self):
        self.items = {}

    def get_all(self):
        return [self.items[key] for key in sorted(self.items)]

    def get(self, album_id):
        try:
            return self.items[album_id]
        except KeyError:
            raise NotFoundError() from None

    def add(self, album):
        self.items[album.id] = album

    def delete(self, album_id):
        self.items.pop(album_id, None)


@pytest.fixture
def client():
    app = build_app(SingerService(MemorySingers()), AlbumService(MemoryAlbums()))
    return Client(app)


def test_full_flow(client):
    assert client.post("/singers", json={"id": 1, "name": "Alice"}).status_code == 200
    assert client.post("/albums", json={"id": 10, "title": "Debut", "singer_id": 1}).status_code == 200
    assert client.get("/singers").get_json() == [{"id": 1, "name": "Alice"}]
    assert client.get("/singers/1").get_json() == {"id": 1, "name": "Alice"}
    assert client.get("/albums").get_json() == [
        {"id": 10, "title": "Debut", "singer": {"id": 1, "name": "Alice"}}
    ]
    assert client.delete("/albums/10").status_code == 204
    missing = client.get("/albums/10")
    assert missing.status_code == 500
    assert missing.get_json() == {"message": "not found"}


def test_delete_singer_route(client):
    client.post("/singers", json={"id": 2, "name": "Bob"})
    assert client.delete("/singers/2").status_code == 204
    assert client.get("/singers").get_json() == []


def test_unknown_path_is_404(client):
    assert client.get("/nothing").status_code == 404
    assert client.get("/singers/1/extra").status_code == 404


def test_wrong_method_is_405(client):
    response = client.put("/singers")
    assert response.status_code == 405
    allowed = {m.strip() for m in response.headers["Allow"].split(",")}
    assert {"GET", "POST"} <= allowed


def test_head_is_served(client):
    assert client.head("/singers").status_code == 200


def test_bad_path_id(client):
    response = client.get("/singers/abc")
    assert response.status_code == 400
    assert response.get_json()["message"].startswith("invalid path param: ")


def test_new_router_uses_database():
    db = MagicMock()
    cursor = db.cursor.return_value.__enter__.return_value
    cursor.fetchall.return_value = [(1, "Alice")]
    user, database = "root", "myapp"
    with patch("pymysql.connect", return_value=db) as connect:
        app = new_router(user, "placeholder", "localhost:13306", database)
    db.ping.assert_called_once()
    kwargs = connect.call_args.kwargs
    assert kwargs["host"] == "localhost"
    assert kwargs["port"] == 13306
    assert kwargs["database"] == database
    assert Client(app).get("/singers").get_json() == [{"id": 1, "name": "Alice"}]


def test_new_router_ping_failure():
    db = MagicMock()
    db.ping.side_effect = pymysql.err.OperationalError(2003, "unreachable")
    with patch("pymysql.connect", return_value=db):
        with pytest.raises(pymysql.err.OperationalError):
            new_router("root", "placeholder", "localhost:13306", "myapp")