[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "songbook"
version = "0.1.0"
description = "A small JSON HTTP API for singers and their albums, backed by MySQL"
requires-python = ">=3.10"
keywords = ["wsgi", "rest", "api", "mysql", "music"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "pymysql",
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
songbook = "songbook.main:main"

[tool.hatch.build.targets.wheel]
packages = ["songbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
