"""API v1 router registration."""

from fastapi import APIRouter

from brazilian_cardinality.api.routes import cardinals

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(cardinals.router)
