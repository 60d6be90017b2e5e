"""
User lookups.
"""

from __future__ import annotations

from core.errors import NotFoundError

from . import repository


async def list_users() -> list[dict]:
    return await repository.list_users()


async def get_user(username: str) -> dict:
    user = await repository.get_user_by_username(username)
    if user is None:
        raise NotFoundError("User not found")
    return user
