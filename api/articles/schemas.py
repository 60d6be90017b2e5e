"""
Pydantic schemas for article endpoints.

Unknown body fields are ignored (pydantic's default), so only the declared
fields ever reach the repository.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.db import INT4_MAX, INT4_MIN


class ArticleCreate(BaseModel):
    author: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    article_img_url: str | None = None


class VoteUpdate(BaseModel):
    # strict: rejects "1", 1.0 and true
    inc_votes: int = Field(..., strict=True, ge=INT4_MIN, le=INT4_MAX)
