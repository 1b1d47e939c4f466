"""Module: main."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vaxtrack.api.v1.api import api_router
from vaxtrack.api.v1.responses import error_body
from vaxtrack.core.config import settings
from vaxtrack.core.errors import (
    DuplicateRecordError,
    NotFoundError,
    SafetyViolationError,
    StorageError,
    ValidationError,
)
from vaxtrack.core.logging_config import setup_logging
from vaxtrack.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    yield


app = FastAPI(title="VaxTrack API", version="0.1.0", lifespan=lifespan)

app.include_router(api_router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [_describe(e) for e in exc.errors()]
    return JSONResponse(status_code=400, content=error_body("Validation failed", "Invalid input data", details))


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content=error_body("Validation failed", exc.message, exc.details))


@app.exception_handler(SafetyViolationError)
async def safety_handler(request: Request, exc: SafetyViolationError):
    return JSONResponse(
        status_code=400,
        content=error_body("Safety check failed", exc.message, exc.errors, warnings=exc.warnings),
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content=error_body(f"{exc.entity} not found", exc.message))


@app.exception_handler(DuplicateRecordError)
async def duplicate_handler(request: Request, exc: DuplicateRecordError):
    return JSONResponse(status_code=409, content=error_body("Duplicate vaccination", exc.message))


@app.exception_handler(StorageError)
async def storage_handler(request: Request, exc: StorageError):
    # Already logged with its cause where it was raised.
    return JSONResponse(
        status_code=503,
        content=error_body(
            "Service unavailable",
            "Please try again later",
            correlation_id=exc.correlation_id,
        ),
    )
