"""
Pydantic schemas for the submission endpoint.
"""

from __future__ import annotations

from pydantic import BaseModel


class SubmitRequest(BaseModel):
    # Ciphertext is opaque here; neither field is length-checked.
    encrypted: str
    captcha: str
