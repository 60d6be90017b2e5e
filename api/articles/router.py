"""
Article API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from core.db import INT4_MAX, INT4_MIN

from . import schemas, service

router = APIRouter(prefix="/api/articles")

ArticleId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


@router.get("")
async def list_articles(
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
    total_count: str | None = None,
) -> dict:
    """
    List articles, optionally filtered by topic, sorted and paginated.
    """
    return await service.list_articles(
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
        total_count=total_count is not None,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_article(request: schemas.ArticleCreate) -> dict:
    """
    Create an article; article_img_url falls back to a placeholder image.
    """
    article = await service.create_article(request)
    return {"article": article}


@router.get("/{article_id}")
async def get_article(article_id: ArticleId) -> dict:
    """
    Fetch one article with its comment count.
    """
    article = await service.get_article(article_id)
    return {"article": article}


@router.patch("/{article_id}")
async def update_article_votes(request: schemas.VoteUpdate, article_id: ArticleId) -> dict:
    """
    Add inc_votes (may be negative) to an article's votes.
    """
    article = await service.update_article_votes(article_id, request.inc_votes)
    return {"article": article}


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_article(article_id: ArticleId) -> Response:
    """
    Delete an article together with its comments.
    """
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
