import os
import sys

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
import sqlite3
import tempfile
from fastapi.testclient import TestClient

from core.db_connector import Database, create_engine_from_url
from main import create_app

SCHEMA = [
    """
    CREATE TABLE items (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        title       VARCHAR(255) NOT NULL,
        description TEXT NOT NULL,
        updated     TEXT NULL,
        rating      REAL NULL
    )""",
    """
    CREATE TABLE users (
        user_id     INTEGER PRIMARY KEY AUTOINCREMENT,
        login       VARCHAR(255) NOT NULL UNIQUE,
        password    VARCHAR(255) NOT NULL,
        email       VARCHAR(255) NOT NULL,
        info        TEXT NOT NULL,
        updated     VARCHAR(255) NULL,
        created_at  TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )""",
]

ITEMS = [
    ("database/sql", "Рассказать про базы данных", "rvasily"),
    ("memcache", "Рассказать про мемкеш с примером использования", None),
    ("redis", "Key-value store", None),
    ("postgres", "Relational database", "admin"),
    ("sqlite", "Embedded database", None),
    ("mysql", "Another relational database", None),
]


@pytest.fixture
def temp_sqlite_db():
    fd, path = tempfile.mkstemp(suffix=".db")
    try:
        conn = sqlite3.connect(path)
        cur = conn.cursor()
        for ddl in SCHEMA:
            cur.execute(ddl)
        cur.executemany("INSERT INTO items (title, description, updated) VALUES (?, ?, ?);", ITEMS)
        cur.execute(
            "INSERT INTO users (login, password, email, info) "
            "VALUES ('rvasily', 'love', 'rvasily@example.com', 'none');"
        )
        conn.commit()
        conn.close()
        yield path
    finally:
        os.close(fd)
        os.remove(path)


@pytest.fixture
def database(temp_sqlite_db):
    engine = create_engine_from_url(f"sqlite:///{temp_sqlite_db}")
    yield Database(engine)
    engine.dispose()


@pytest.fixture
def client(temp_sqlite_db):
    app = create_app(f"sqlite:///{temp_sqlite_db}")
    with TestClient(app) as test_client:
        yield test_client
