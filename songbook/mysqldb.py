"""MySQL-backed repositories."""

from __future__ import annotations

from typing import Any

import pymysql

from songbook.model import Album, NotFoundError, Singer
from songbook.repository import AlbumRepository, SingerRepository

DEFAULT_PORT = 3306


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        return address, DEFAULT_PORT
    return host, int(port)


def connect(user: str, password: str, host: str, name: str) -> Any:
    """Open a connection to database ``name`` at ``host`` given as "host[:port]"."""
    hostname, port = _split_address(host)
    return pymysql.connect(
        user=user,
        password=password,
        host=hostname,
        port=port,
        database=name,
        autocommit=True,
    )


def _query(db: Any, query: str, args: tuple[Any, ...] | None = None) -> list[tuple[Any, ...]]:
    with db.cursor() as cursor:
        cursor.execute(query, args)
        return list(cursor.fetchall())


def _execute(db: Any, query: str, args: tuple[Any, ...]) -> None:
    with db.cursor() as cursor:
        cursor.execute(query, args)


class MySQLSingerRepository(SingerRepository):
    """Singers stored in the ``singers`` table."""

    def __init__(self, db: Any) -> None:
        self.db = db

    @staticmethod
    def _row(row: tuple[Any, ...]) -> Singer:
        singer_id, name = row
        return Singer(id=int(singer_id), name=str(name))

    def get_all(self) -> list[Singer]:
        rows = _query(self.db, "SELECT id, name FROM singers ORDER BY id ASC")
        return [singer for singer in map(self._row, rows) if singer.id != 0]

    def get(self, singer_id: int) -> Singer:
        rows = _query(self.db, "SELECT id, name FROM singers WHERE id = %s", (singer_id,))
        singer = Singer()
        for row in rows:
            singer = self._row(row)
        if singer.id == 0:
            raise NotFoundError()
        return singer

    def add(self, singer: Singer) -> None:
        _execute(
            self.db,
            "INSERT INTO singers (id, name) VALUES (%s, %s)",
            (singer.id, singer.name),
        )

    def delete(self, singer_id: int) -> None:
        _execute(self.db, "DELETE FROM singers WHERE id = %s", (singer_id,))


class MySQLAlbumRepository(AlbumRepository):
    """Albums stored in the ``albums`` table."""

    def __init__(self, db: Any) -> None:
        self.db = db

    @staticmethod
    def _row(row: tuple[Any, ...]) -> Album:
        album_id, title, singer_id = row
        return Album(id=int(album_id), title=str(title), singer_id=int(singer_id))

    def get_all(self) -> list[Album]:
        rows = _query(self.db, "SELECT id, title, singer_id FROM albums ORDER BY id ASC")
        return [album for album in map(self._row, rows) if album.id != 0]

    def get(self, album_id: int) -> Album:
        rows = _query(
            self.db, "SELECT id, title, singer_id FROM albums WHERE id = %s", (album_id,)
        )
        album = Album()
        for row in rows:
            album = self._row(row)
        if album.id == 0:
            raise NotFoundError()
        return album

    def add(self, album: Album) -> None:
        _execute(
            self.db,
            "INSERT INTO albums (id, title, singer_id) VALUES (%s, %s, %s)",
            (album.id, album.title, album.singer_id),
        )

    def delete(self, album_id: int) -> None:
        _execute(self.db, "DELETE FROM albums WHERE id = %s", (album_id,))