"""
Comment business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from articles import service as articles_service
from core.errors import NotFoundError
from core.listing import parse_page

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_comments_for_article(
    article_id: int,
    *,
    limit: str | None = None,
    page: str | None = None,
) -> list[dict[str, Any]]:
    parsed = parse_page(limit, page)
    # Checked separately: an empty list must still 404 for a missing article.
    await articles_service.ensure_article_exists(article_id)
    return await repository.list_comments(article_id, page=parsed)


async def create_comment(article_id: int, request: schemas.CommentCreate) -> dict[str, Any]:
    await articles_service.ensure_article_exists(article_id)
    comment = await repository.insert_comment(
        article_id,
        author=request.username,
        body=request.body,
    )
    logger.info("comment_created comment_id=%s article_id=%s author=%s", comment["comment_id"], article_id, request.username)
    return comment


async def update_comment_votes(comment_id: int, inc_votes: int) -> dict[str, Any]:
    comment = await repository.increment_comment_votes(comment_id, inc_votes)
    if comment is None:
        raise NotFoundError("Comment not found")
    logger.info("comment_voted comment_id=%s inc_votes=%s votes=%s", comment_id, inc_votes, comment["votes"])
    return comment


async def delete_comment(comment_id: int) -> None:
    if not await repository.delete_comment(comment_id):
        raise NotFoundError("Comment not found")
    logger.info("comment_deleted comment_id=%s", comment_id)
