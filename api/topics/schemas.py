"""
Pydantic schemas for topic endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TopicCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
