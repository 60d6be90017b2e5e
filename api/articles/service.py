"""
Article business logic.

Scope:
- list options validation and the topic existence check
- default image URL on create
- not-found handling for single-article operations
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import NotFoundError
from topics import service as topics_service

from . import repository, schemas
from .queries import parse_list_options

DEFAULT_ARTICLE_IMG_URL = "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"

logger = logging.getLogger(__name__)


def _strip_total(row: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in row.items() if k != "total_count"}


async def list_articles(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = None,
    total_count: bool = False,
) -> dict[str, Any]:
    options = parse_list_options(
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
        total_count=total_count,
    )
    if options.topic is not None:
        # A real topic with no articles is an empty list, not a 404.
        await topics_service.ensure_topic_exists(options.topic)

    rows = await repository.list_articles(options)
    result: dict[str, Any] = {"articles": [_strip_total(row) for row in rows]}
    if options.total_count:
        if rows:
            result["total_count"] = int(rows[0]["total_count"])
        elif options.page.offset or options.page.limit == 0:
            # Past the last page, or with limit=0, no row carries the window count.
            result["total_count"] = await repository.count_articles(topic=options.topic)
        else:
            result["total_count"] = 0
    return result


async def get_article(article_id: int) -> dict[str, Any]:
    article = await repository.get_article(article_id)
    if article is None:
        raise NotFoundError("Article not found")
    return article


async def ensure_article_exists(article_id: int) -> None:
    if not await repository.article_exists(article_id):
        raise NotFoundError("Article not found")


async def create_article(request: schemas.ArticleCreate) -> dict[str, Any]:
    article = await repository.insert_article(
        author=request.author,
        title=request.title,
        body=request.body,
        topic=request.topic,
        article_img_url=request.article_img_url or DEFAULT_ARTICLE_IMG_URL,
    )
    logger.info("article_created article_id=%s topic=%s author=%s", article["article_id"], request.topic, request.author)
    return article


async def update_article_votes(article_id: int, inc_votes: int) -> dict[str, Any]:
    article = await repository.increment_article_votes(article_id, inc_votes)
    if article is None:
        raise NotFoundError("Article not found")
    logger.info("article_voted article_id=%s inc_votes=%s votes=%s", article_id, inc_votes, article["votes"])
    return article


async def delete_article(article_id: int) -> None:
    deleted = await repository.delete_article(article_id)
    if not deleted:
        raise NotFoundError("Article not found")
    logger.info("article_deleted article_id=%s", article_id)
