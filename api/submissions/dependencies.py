"""
Dependencies for the submission routes.
"""

from __future__ import annotations

from fastapi import Request

from core import db


def get_database(request: Request) -> db.Database:
    return request.app.state.database
