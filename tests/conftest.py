"""Shared fixtures for sqlitemaster tests."""

import sqlite3

import pytest

SCHEMA = """
    CREATE TABLE users (id INTEGER PRIMARY KEY, email TEXT UNIQUE, name TEXT);
    CREATE TABLE audit (msg TEXT);
    CREATE INDEX idx_users_name ON users (name);
    CREATE TRIGGER t1 AFTER INSERT ON users BEGIN INSERT INTO audit VALUES ('insert'); END;
    CREATE TRIGGER t2 AFTER DELETE ON users BEGIN INSERT INTO audit VALUES ('delete'); END;
    CREATE VIEW v_a AS SELECT id, email FROM users;
    CREATE VIEW v_b AS SELECT msg FROM audit;
"""


@pytest.fixture
def connection():
    """An empty in-memory database."""
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def populated(connection):
    """An in-memory database with tables, indexes, triggers and views."""
    connection.executescript(SCHEMA)
    return connection


@pytest.fixture
def db_file(tmp_path):
    """A database file on disk holding the shared schema."""
    path = tmp_path / "app.db"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA)
    conn.close()
    return path
