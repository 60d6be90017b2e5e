"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.listing import Page

COMMENT_COLUMNS = "comment_id, article_id, author, body, votes, created_at"


async def list_comments(article_id: int, *, page: Page) -> list[dict[str, Any]]:
    """
    Newest first; an article without comments yields [].
    """
    return await db.fetch_all(
        f"""
        SELECT {COMMENT_COLUMNS}
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        LIMIT $2
        OFFSET $3
        """,
        article_id,
        page.limit,
        page.offset or 0,
    )


async def insert_comment(article_id: int, *, author: str, body: str) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING {COMMENT_COLUMNS}
        """,
        article_id,
        author,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def increment_comment_votes(comment_id: int, inc_votes: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE comments
        SET votes = votes + $2
        WHERE comment_id = $1
        RETURNING {COMMENT_COLUMNS}
        """,
        comment_id,
        inc_votes,
    )


async def delete_comment(comment_id: int) -> bool:
    status = await db.execute("DELETE FROM comments WHERE comment_id = $1", comment_id)
    return db.affected_rows(status) > 0
