"""Module: transaction."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vaxtrack.core.errors import StorageError, VaccinationError

logger = logging.getLogger(__name__)


@contextmanager
def unit_of_work(db: Session, operation: str, commit: bool = True) -> Iterator[Session]:
    """
    Run one service operation as a single transaction.

    Everything flushed inside the block is committed together or rolled back
    together. Database failures are logged with a correlation id and re-raised
    as StorageError; domain errors pass through after the rollback.
    """
    try:
        yield db
        if commit:
            db.commit()
    except VaccinationError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        error = StorageError(operation)
        logger.exception("Storage failure during %s (correlation_id=%s)", operation, error.correlation_id)
        raise error from exc
