from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import main
from core import db
from submissions import repository


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<h1>map</h1>", encoding="utf-8")
    (root / "hello.txt").write_text("hello world", encoding="utf-8")
    return root


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.sqlite"


@pytest.fixture
def database(db_path: Path):
    database = db.open_database(str(db_path))
    repository.init_schema(database)
    yield database
    database.close()


@pytest.fixture
def app(static_dir: Path, database: db.Database):
    return main.create_app(static_dir=str(static_dir), database=database)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def answers(db_path: Path):
    """
    Read back stored rows through a separate connection, in insertion order.
    """

    def _read() -> list[tuple[str, str]]:
        with sqlite3.connect(db_path) as conn:
            return conn.execute("SELECT encrypted, captcha FROM answers ORDER BY rowid").fetchall()

    return _read
