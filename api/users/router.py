"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter(prefix="/api/users")


@router.get("")
async def list_users() -> dict:
    """
    List all users.
    """
    users = await service.list_users()
    return {"users": users}


@router.get("/{username}")
async def get_user(username: str) -> dict:
    """
    Fetch one user by username.
    """
    user = await service.get_user(username)
    return {"user": user}
