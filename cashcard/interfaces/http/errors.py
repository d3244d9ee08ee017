"""Translate domain failures into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cashcard.domain.cash_cards import CashCardStoreError
from cashcard.domain.common.paging import InvalidPageRequestError

logger = logging.getLogger(__name__)

# Rejected input may hold values JSON cannot carry, such as inf.
_UNSAFE_ERROR_KEYS = ("input", "ctx")


async def _invalid_page_request(request: Request, exc: InvalidPageRequestError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    errors = [
        {key: value for key, value in error.items() if key not in _UNSAFE_ERROR_KEYS}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


async def _store_unavailable(request: Request, exc: CashCardStoreError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Cash card store unavailable"},
    )


async def _commit_failed(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return await _store_unavailable(request, CashCardStoreError(str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidPageRequestError, _invalid_page_request)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(CashCardStoreError, _store_unavailable)
    app.add_exception_handler(SQLAlchemyError, _commit_failed)


__all__ = ["register_exception_handlers"]
