# app/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("inspection.errors")
logger.setLevel(logging.INFO)


def store_error_message(exc: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement/params suffix."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    message = store_error_message(exc)
    logger.warning(f"{request.method} {request.url.path} conflict: {message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": message})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = store_error_message(exc)
    logger.error(f"{request.method} {request.url.path} failed: {message}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
