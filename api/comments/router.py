"""
Comment API endpoints (nested under articles, plus direct comment access).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from articles.schemas import VoteUpdate
from core.db import INT4_MAX, INT4_MIN

from . import schemas, service

router = APIRouter()

RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


@router.get("/api/articles/{article_id}/comments")
async def list_article_comments(
    article_id: RowId,
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
) -> dict:
    """
    List an article's comments, newest first, paginated.
    """
    comments = await service.list_comments_for_article(article_id, limit=limit, page=page)
    return {"comments": comments}


@router.post("/api/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_article_comment(request: schemas.CommentCreate, article_id: RowId) -> dict:
    """
    Post a comment on an article as an existing user.
    """
    comment = await service.create_comment(article_id, request)
    return {"comment": comment}


@router.patch("/api/comments/{comment_id}")
async def update_comment_votes(request: VoteUpdate, comment_id: RowId) -> dict:
    """
    Add inc_votes (may be negative) to a comment's votes.
    """
    comment = await service.update_comment_votes(comment_id, request.inc_votes)
    return {"comment": comment}


@router.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_comment(comment_id: RowId) -> Response:
    """
    Delete a comment.
    """
    await service.delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
