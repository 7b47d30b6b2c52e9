# songbook

A small JSON HTTP API for keeping track of singers and their albums.
It stores its data in MySQL and runs as a WSGI application built on Werkzeug.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
songbook
```

The command takes no options. It connects to the MySQL database `myapp` on
`localhost:13306` as user `root`, using the connection settings defined as
`DB_USER`, `DB_PASSWORD`, `DB_HOST` and `DB_NAME` in `songbook.main`, checks
the connection, and listens on all interfaces at port 8888. If the database
cannot be reached or the port cannot be bound, it logs the error and exits
with status 1.

Every log record, including one `access` entry per request (with `uri` and
`method`) and one `response` entry (with `code`), is written to standard
output as a JSON line with `time`, `level` and `msg` fields. Stop the server
with Ctrl-C; it then closes the listening socket, logs `server closed` and
exits with status 1.

The database needs two tables:

```sql
CREATE TABLE singers (
    id   INT PRIMARY KEY,
    name VARCHAR(255) NOT NULL
);

CREATE TABLE albums (
    id        INT PRIMARY KEY,
    title     VARCHAR(255) NOT NULL,
    singer_id INT NOT NULL
);
```

## Endpoints

| Method | Path             | What it does                                    |
|--------|------------------|-------------------------------------------------|
| GET    | `/singers`       | List all singers, ordered by id                 |
| GET    | `/singers/{id}`  | Fetch one singer                                |
| POST   | `/singers`       | Add a singer: `{"id": 1, "name": "Alice"}`      |
| DELETE | `/singers/{id}`  | Remove a singer (204 No Content)                |
| GET    | `/albums`        | List all albums, each with its singer           |
| GET    | `/albums/{id}`   | Fetch one album with its singer                 |
| POST   | `/albums`        | Add an album: `{"id": 1, "title": "First", "singer_id": 1}` |
| DELETE | `/albums/{id}`   | Remove an album (204 No Content)                |

A successful POST answers with the stored record. Album responses embed the
singer:

```json
{"id": 1, "title": "First", "singer": {"id": 1, "name": "Alice"}}
```

Fields missing from a POST body take zero values (`0` or `""`). Names and
titles must be non-empty and at most 255 bytes long in UTF-8.

Errors come back as `{"message": "..."}`:

- 400 for an id in the path that is not a whole number, a body that is not
  valid JSON, or a body whose fields have the wrong types;
- 500 for any other failure, including a missing record (`"not found"`), a
  failed validation (`"invalid param"`) or a database error.

Unknown paths give a plain-text 404 and unsupported methods a plain-text 405
with an `Allow` header.

## Using it from Python

- `songbook.model` holds the `Singer` and `Album` dataclasses (with
  `validate()`, `to_dict()` and `from_dict()`) and the errors `ModelError`,
  `NotFoundError` and `InvalidParamError`.
- `songbook.repository` defines the abstract `SingerRepository` and
  `AlbumRepository` (`get_all`, `get`, `add`, `delete`).
- `songbook.mysqldb` provides `connect(user, password, host, name)` and the
  MySQL implementations `MySQLSingerRepository` and `MySQLAlbumRepository`.
- `songbook.service` provides `SingerService` and `AlbumService`, which
  validate records before storing them.
- `songbook.router.build_app(singer_service, album_service)` returns the WSGI
  application for any pair of services, so the API can run on top of your own
  repository implementations, for instance in-memory ones for testing.
  `songbook.router.new_router(db_user, db_pass, db_host, db_name)` builds the
  same application wired to MySQL.
- `songbook.middleware.LoggingMiddleware` wraps any WSGI application with the
  access and response logging described above, and
  `songbook.main.configure_logging(stream)` installs the JSON log format.

## What it does not do

There is no schema management: the tables above must be created beforehand.
The connection settings and the listening port are fixed in `songbook.main`
and cannot be changed from the command line.