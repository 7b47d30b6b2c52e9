"""Business operations on singers and albums."""

from __future__ import annotations

from songbook.model import Album, Singer
from songbook.repository import AlbumRepository, SingerRepository


class SingerService:
    """Validates and forwards singer operations to a repository."""

    def __init__(self, repository: SingerRepository) -> None:
        self.repository = repository

    def list_singers(self) -> list[Singer]:
        return self.repository.get_all()

    def get_singer(self, singer_id: int) -> Singer:
        return self.repository.get(singer_id)

    def add_singer(self, singer: Singer) -> None:
        """Validate the singer, then store it."""
        singer.validate()
        self.repository.add(singer)

    def delete_singer(self, singer_id: int) -> None:
        self.repository.delete(singer_id)


class AlbumService:
    """Validates and forwards album operations to a repository."""

    def __init__(self, repository: AlbumRepository) -> None:
        self.repository = repository

    def list_albums(self) -> list[Album]:
        return self.repository.get_all()

    def get_album(self, album_id: int) -> Album:
        return self.repository.get(album_id)

    def add_album(self, album: Album) -> None:
        """Validate the album, then store it."""
        album.validate()
        self.repository.add(album)

    def delete_album(self, album_id: int) -> None:
        self.repository.delete(album_id)