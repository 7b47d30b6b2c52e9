"""Storage interfaces for singers and albums."""

from __future__ import annotations

from abc import ABC, abstractmethod

from songbook.model import Album, Singer


class SingerRepository(ABC):
    """Persistent store of singers."""

    @abstractmethod
    def get_all(self) -> list[Singer]:
        """Return every singer ordered by id."""

    @abstractmethod
    def get(self, singer_id: int) -> Singer:
        """Return one singer, raising NotFoundError if absent."""

    @abstractmethod
    def add(self, singer: Singer) -> None:
        """Store a new singer."""

    @abstractmethod
    def delete(self, singer_id: int) -> None:
        """Remove a singer by id."""


class AlbumRepository(ABC):
    """Persistent store of albums."""

    @abstractmethod
    def get_all(self) -> list[Album]:
        """Return every album ordered by id."""

    @abstractmethod
    def get(self, album_id: int) -> Album:
        """Return one album, raising NotFoundError if absent."""

    @abstractmethod
    def add(self, album: Album) -> None:
        """Store a new album."""

    @abstractmethod
    def delete(self, album_id: int) -> None:
        """Remove an album by id."""