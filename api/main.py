"""
Backend entrypoint.

Usage: sdc-map-backend <static-dir> [port] [db-path]

`POST /submit` stores an answer; every other request is served from
<static-dir>.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core import db, settings
from submissions import repository as submission_repository
from submissions import router as submissions_router

logger = logging.getLogger(__name__)


def create_app(*, static_dir: str, database: db.Database) -> FastAPI:
    app = FastAPI()
    app.state.database = database

    app.include_router(submissions_router.router, tags=["submissions"])

    # Mounted last: explicit routes are matched before the catch-all.
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


def main(argv: list[str] | None = None) -> int:
    config = settings.parse_settings(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        database = db.open_database(config.db_path)
    except db.StorageError as exc:
        logger.error("startup_failed error=%s", exc)
        return 1

    try:
        submission_repository.init_schema(database)
        logger.info("database_ready path=%s", database.path)

        app = create_app(static_dir=config.static_dir, database=database)
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    except db.StorageError as exc:
        logger.error("startup_failed error=%s", exc)
        return 1
    finally:
        database.close()

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
