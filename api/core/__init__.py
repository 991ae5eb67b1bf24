"""
Shared, cross-cutting code for the backend.

`core/` holds small building blocks (DB wiring, settings). Keep
submission-specific SQL in `submissions/`.
"""
