"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    username: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
