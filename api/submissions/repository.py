"""
Answer persistence (raw SQL).

Table `answers` is append-only: rows are never read, updated or deleted
by this service.
"""

from __future__ import annotations

from core import db

CREATE_ANSWERS_TABLE = """
    CREATE TABLE IF NOT EXISTS answers (
        encrypted TEXT,
        captcha TEXT
    )
"""

INSERT_ANSWER = """
    INSERT INTO answers(encrypted, captcha)
    VALUES (:encrypted, :captcha)
"""


def init_schema(database: db.Database) -> None:
    """
    Create the `answers` table if missing. Safe to call on every startup.
    """
    try:
        database.run(CREATE_ANSWERS_TABLE)
    except db.StorageError as exc:
        raise db.StorageError(f"Failed to create the `answers` table: {exc}") from exc


async def store_answer(database: db.Database, *, encrypted: str, captcha: str) -> None:
    await database.execute(
        INSERT_ANSWER,
        {"encrypted": encrypted, "captcha": captcha},
    )
