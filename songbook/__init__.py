"""JSON HTTP API for singers and their albums, served over WSGI and stored in MySQL."""

__version__ = "0.1.0"