"""Module: deps."""

from typing import Generator

from fastapi import Query
from sqlalchemy.orm import Session

from vaxtrack.core.vocab import Language
from vaxtrack.db.session import SessionLocal


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Optional ?language= filter shared by the read endpoints; None means "use the patient's language".
def get_language(language: Language | None = Query(default=None)) -> str | None:
    return language.value if language else None
