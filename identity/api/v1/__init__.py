"""API v1 router aggregation."""

from fastapi import APIRouter

from identity.api.v1 import groups, users

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
