"""
Topic business logic.
"""

from __future__ import annotations

import logging

from core.errors import NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_topics() -> list[dict]:
    return await repository.list_topics()


async def ensure_topic_exists(slug: str) -> None:
    if await repository.get_topic(slug) is None:
        raise NotFoundError("Topic not found")


async def create_topic(request: schemas.TopicCreate) -> dict:
    # Duplicate slugs fail on the primary key and surface as 400.
    topic = await repository.insert_topic(slug=request.slug, description=request.description)
    logger.info("topic_created slug=%s", topic["slug"])
    return topic
