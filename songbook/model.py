"""Domain objects for singers and albums, with their validation rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

MAX_TEXT_BYTES = 255


class ModelError(Exception):
    """Base class for domain errors."""


class NotFoundError(ModelError):
    """The requested record does not exist."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class InvalidParamError(ModelError):
    """A record failed validation."""

    def __init__(self, message: str = "invalid param") -> None:
        super().__init__(message)


def _check_text(value: str) -> None:
    if not value or len(value.encode("utf-8")) > MAX_TEXT_BYTES:
        raise InvalidParamError()


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Singer:
    """A singer known to the catalogue."""

    id: int = 0
    name: str = ""

    def validate(self) -> None:
        """Raise InvalidParamError unless the name is non-empty and at most 255 bytes."""
        _check_text(self.name)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Singer:
        """Build a singer from decoded JSON; missing fields take zero values."""
        mapping = _as_mapping(data)
        return cls(id=_int_field(mapping, "id"), name=_str_field(mapping, "name"))


@dataclass
class Album:
    """An album, linked to a singer by ``singer_id``."""

    id: int = 0
    title: str = ""
    singer_id: int = 0

    def validate(self) -> None:
        """Raise InvalidParamError unless the title is non-empty and at most 255 bytes."""
        _check_text(self.title)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "singer_id": self.singer_id}

    @classmethod
    def from_dict(cls, data: Any) -> Album:
        """Build an album from decoded JSON; missing fields take zero values."""
        mapping = _as_mapping(data)
        return cls(
            id=_int_field(mapping, "id"),
            title=_str_field(mapping, "title"),
            singer_id=_int_field(mapping, "singer_id"),
        )