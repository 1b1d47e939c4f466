"""Module: init_db."""

import logging

from vaxtrack.db.base import Base
from vaxtrack.db.session import SessionLocal, engine
from vaxtrack.services.catalog import seed_catalog

# Registers every model on Base.metadata.
import vaxtrack.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(seed_reference_data: bool = True) -> None:
    """Create missing tables and make sure the immunization catalog is present."""
    Base.metadata.create_all(bind=engine)
    if not seed_reference_data:
        return

    session = SessionLocal()
    try:
        seed_catalog(session)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Catalog seeding failed at startup")
        raise
    finally:
        session.close()
