from fastapi import APIRouter

from cashcard.interfaces.http.routers import cash_cards


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(cash_cards.router, prefix="/cashcards", tags=["cash cards"])
    return router


__all__ = [
    "create_api_router",
]
