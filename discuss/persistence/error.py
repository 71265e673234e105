"""Translation of SQLAlchemy failures into domain store errors."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from discuss.domain.error import StoreError, UniqueViolationError

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    """Extract the SQLSTATE of the driver error, if the driver exposes one."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


@asynccontextmanager
async def translate_store_errors(operation: str) -> AsyncIterator[None]:
    """Re-raise SQLAlchemy errors raised inside the block as StoreError.

    Unique violations become ``UniqueViolationError`` so callers can tell
    a lost race from a broken store.

    Args:
        operation: Name of the repository operation, used in the message
    """
    try:
        yield
    except IntegrityError as e:
        if _sqlstate(e) == UNIQUE_VIOLATION:
            raise UniqueViolationError(f"{operation}: duplicate row") from e
        raise StoreError(f"{operation}: integrity error") from e
    except SQLAlchemyError as e:
        raise StoreError(f"{operation} failed") from e
