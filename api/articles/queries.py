"""
Article list query construction.

Input values only ever reach the SQL as positional parameters. The sort column
and direction are looked up in fixed mappings, never copied from the request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.errors import InvalidQueryError
from core.listing import Page, parse_order, parse_page

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

SORT_COLUMNS = {
    "article_id": "a.article_id",
    "title": "a.title",
    "topic": "a.topic",
    "author": "a.author",
    "created_at": "a.created_at",
    "votes": "a.votes",
    "article_img_url": "a.article_img_url",
    "comment_count": "comment_count",
}

SQL_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}


@dataclass(frozen=True)
class ArticleListOptions:
    topic: str | None = None
    sort_by: str = DEFAULT_SORT_BY
    order: str = DEFAULT_ORDER
    page: Page = field(default_factory=Page)
    total_count: bool = False


def parse_sort_by(raw: str | None) -> str:
    if raw is None:
        return DEFAULT_SORT_BY
    sort_by = raw.strip()
    if sort_by not in SORT_COLUMNS:
        raise InvalidQueryError("Invalid sort_by query")
    return sort_by


def parse_list_options(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = None,
    total_count: bool = False,
) -> ArticleListOptions:
    return ArticleListOptions(
        topic=topic,
        sort_by=parse_sort_by(sort_by),
        order=parse_order(order, default=DEFAULT_ORDER),
        page=parse_page(limit, page),
        total_count=total_count,
    )


def _order_by(options: ArticleListOptions) -> str:
    direction = SQL_DIRECTIONS[options.order]
    clause = f"{SORT_COLUMNS[options.sort_by]} {direction}"
    if options.sort_by != "article_id":
        # stable order among equal sort keys
        clause += f", a.article_id {direction}"
    return clause


def build_list_articles_query(options: ArticleListOptions) -> tuple[str, list[Any]]:
    """
    Build the article listing query and its positional arguments.

    With `total_count` the filtered row count is attached to every row by a
    window function, so the page and the total come back in one round trip.
    """
    args: list[Any] = []
    where = ""
    if options.topic is not None:
        args.append(options.topic)
        where = f"WHERE a.topic = ${len(args)}"

    total_column = ",\n          COUNT(*) OVER ()::int AS total_count" if options.total_count else ""

    args.append(options.page.limit)
    limit_placeholder = f"${len(args)}"
    args.append(options.page.offset or 0)
    offset_placeholder = f"${len(args)}"

    sql = f"""
        SELECT
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.created_at,
          a.votes,
          a.article_img_url,
          COUNT(c.comment_id)::int AS comment_count{total_column}
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        {where}
        GROUP BY a.article_id
        ORDER BY {_order_by(options)}
        LIMIT {limit_placeholder}
        OFFSET {offset_placeholder}
        """
    return sql, args


def build_count_articles_query(topic: str | None = None) -> tuple[str, list[Any]]:
    if topic is None:
        return "SELECT count(*)::int AS n FROM articles", []
    return "SELECT count(*)::int AS n FROM articles WHERE topic = $1", [topic]
