import pytest

from songbook.model import Album, InvalidParamError, NotFoundError, Singer
from songbook.repository import AlbumRepository, SingerRepository
from songbook.service import AlbumService, SingerService


class RecordingSingers(SingerRepository):
    def __init__(self, items=()):
        self.items = {s.id: s for s in items}
        self.added = []
        self.deleted = []

    def get_all(self):
        return [self.items[k] for k in sorted(self.items)]

    def get(self, singer_id):
        if singer_id not in self.items:
            raise NotFoundError()
        return self.items[singer_id]

    def add(self, singer):
        self.added.append(singer)
        self.items[singer.id] = singer

    def delete(self, singer_id):
        self.deleted.append(singer_id)
        self.items.pop(singer_id, None)


class RecordingAlbums(AlbumRepository):
    def __init__(self, items=()):
        self.items = {a.id: a for a in items}
        self.added = []
        self.deleted = []

    def get_all(self):
        return [self.items[k] for k in sorted(self.items)]

    def get(self, album_id):
        if album_id not in self.items:
            raise NotFoundError()
        return self.items[album_id]

    def add(self, album):
        self.added.append(album)
        self.items[album.id] = album

    def delete(self, album_id):
        self.deleted.append(album_id)
        self.items.pop(album_id, None)


def test_list_singers_returns_repository_contents():
    singers = [Singer(id=1, name="A"), Singer(id=2, name="B")]
    service = SingerService(RecordingSingers(singers))
    assert service.list_singers() == singers


def test_get_singer_and_missing():
    service = SingerService(RecordingSingers([Singer(id=1, name="A")]))
    assert service.get_singer(1) == Singer(id=1, name="A")
    with pytest.raises(NotFoundError):
        service.get_singer(9)


def test_add_singer_stores_valid():
    repo = RecordingSingers()
    SingerService(repo).add_singer(Singer(id=3, name="C"))
    assert repo.added == [Singer(id=3, name="C")]


def test_add_singer_rejects_invalid_without_storing():
    repo = RecordingSingers()
    with pytest.raises(InvalidParamError):
        SingerService(repo).add_singer(Singer(id=3, name=""))
    assert repo.added == []


def test_delete_singer_forwards_id():
    repo = RecordingSingers([Singer(id=1, name="A")])
    SingerService(repo).delete_singer(1)
    assert repo.deleted == [1]
    assert repo.items == {}


def test_album_service_operations():
    repo = RecordingAlbums([Album(id=1, title="T", singer_id=1)])
    service = AlbumService(repo)
    assert service.list_albums() == [Album(id=1, title="T", singer_id=1)]
    assert service.get_album(1).title == "T"
    with pytest.raises(NotFoundError):
        service.get_album(2)
    service.add_album(Album(id=2, title="U", singer_id=1))
    assert [a.id for a in service.list_albums()] == [1, 2]
    service.delete_album(1)
    assert repo.deleted == [1]


def test_add_album_rejects_long_title():
    repo = RecordingAlbums()
    with pytest.raises(InvalidParamError):
        AlbumService(repo).add_album(Album(id=1, title="x" * 256, singer_id=1))
    assert repo.added == []