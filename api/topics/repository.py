"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_topics() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug
        """
    )


async def get_topic(slug: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT slug, description
        FROM topics
        WHERE slug = $1
        """,
        slug,
    )


async def insert_topic(*, slug: str, description: str | None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO topics (slug, description)
        VALUES ($1, $2)
        RETURNING slug, description
        """,
        slug,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to insert topic.")
    return row
