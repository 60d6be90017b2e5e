"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .queries import ArticleListOptions, build_count_articles_query, build_list_articles_query

ARTICLE_COLUMNS = """
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.body,
          a.created_at,
          a.votes,
          a.article_img_url
"""


async def list_articles(options: ArticleListOptions) -> list[dict[str, Any]]:
    sql, args = build_list_articles_query(options)
    return await db.fetch_all(sql, *args)


async def count_articles(*, topic: str | None = None) -> int:
    sql, args = build_count_articles_query(topic)
    row = await db.fetch_one(sql, *args)
    return int((row or {}).get("n", 0))


async def get_article(article_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT
          {ARTICLE_COLUMNS},
          (
            SELECT count(*)::int
            FROM comments c
            WHERE c.article_id = a.article_id
          ) AS comment_count
        FROM articles a
        WHERE a.article_id = $1
        """,
        article_id,
    )


async def article_exists(article_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM articles
        WHERE article_id = $1
        LIMIT 1
        """,
        article_id,
    )
    return row is not None


async def insert_article(
    *,
    author: str,
    title: str,
    body: str,
    topic: str,
    article_img_url: str,
) -> dict[str, Any]:
    """
    Insert an article. Unknown author/topic fail on the foreign keys.
    """
    row = await db.fetch_one(
        """
        INSERT INTO articles AS a (author, title, body, topic, article_img_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING
          a.article_id, a.title, a.topic, a.author, a.body,
          a.created_at, a.votes, a.article_img_url,
          0 AS comment_count
        """,
        author,
        title,
        body,
        topic,
        article_img_url,
    )
    if row is None:
        raise RuntimeError("Failed to insert article.")
    return row


async def increment_article_votes(article_id: int, inc_votes: int) -> dict[str, Any] | None:
    """
    Apply a vote delta in a single statement. Returns None when the id is unknown.
    """
    return await db.fetch_one(
        f"""
        UPDATE articles AS a
        SET votes = a.votes + $2
        WHERE a.article_id = $1
        RETURNING
          {ARTICLE_COLUMNS},
          (
            SELECT count(*)::int
            FROM comments c
            WHERE c.article_id = a.article_id
          ) AS comment_count
        """,
        article_id,
        inc_votes,
    )


async def delete_article(article_id: int) -> bool:
    """
    Delete an article and its comments in one transaction.
    Returns False (and deletes nothing) when the article does not exist.
    """
    async with db.transaction() as conn:
        await conn.execute("DELETE FROM comments WHERE article_id = $1", article_id)
        row = await conn.fetchrow(
            """
            DELETE FROM articles
            WHERE article_id = $1
            RETURNING article_id
            """,
            article_id,
        )
    return row is not None
