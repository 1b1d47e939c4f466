"""Module: vaccines."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vaxtrack.api.v1.responses import envelope
from vaxtrack.api.v1.routes.deps import get_db, get_language
from vaxtrack.services.catalog import list_vaccines

router = APIRouter()


# Endpoint: vaccine catalog, localized.
@router.get("/vaccines", summary="List available vaccines")
def vaccines(
    type: str | None = Query(default=None, max_length=64),
    language: str | None = Depends(get_language),
    active: bool = True,
    db: Session = Depends(get_db),
):
    vaccine_type = None if type in (None, "all") else type
    return envelope(list_vaccines(db, vaccine_type, language, active))
