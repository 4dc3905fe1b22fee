"""
Pydantic schemas for album endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Album(BaseModel):
    # JSON types must match exactly: no "9.99" or true for a price. Ints are fine.
    model_config = ConfigDict(strict=True)

    id: str
    title: str
    artist: str
    price: float = Field(allow_inf_nan=False)


class MessageResponse(BaseModel):
    message: str
