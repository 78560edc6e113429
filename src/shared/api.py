"""HTTP plumbing shared by every router: per-request sessions and error mapping."""

from collections.abc import Iterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ObjectNotFoundError,
    StorageError,
    ValidationError,
)
from shared.logging import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong while processing the request"


class MessageResponse(BaseModel):
    message: str


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session bound to the application's ``Database``.

    Anything not committed by the service layer is rolled back on close.
    """
    session = request.app.state.database.session()
    try:
        yield session
    finally:
        session.close()


def register_exception_handlers(app: FastAPI) -> None:
    """Map the store's exception taxonomy onto HTTP responses."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": "Invalid data", "errors": exc.messages})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return JSONResponse(status_code=401, content={"message": exc.message or "Unauthorized"})

    @app.exception_handler(ObjectNotFoundError)
    async def handle_not_found(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message or "Not found"})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return JSONResponse(status_code=409, content={"message": exc.message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        return JSONResponse(status_code=500, content={"message": exc.message or GENERIC_FAILURE_MESSAGE})

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.error("database_error", method=request.method, path=request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": GENERIC_FAILURE_MESSAGE})
