"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter(prefix="/api/topics")


@router.get("")
async def list_topics() -> dict:
    """
    List all topics.
    """
    topics = await service.list_topics()
    return {"topics": topics}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_topic(request: schemas.TopicCreate) -> dict:
    """
    Create a topic from a slug and an optional description.
    """
    topic = await service.create_topic(request)
    return {"topic": topic}
