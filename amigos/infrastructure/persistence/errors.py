"""
Classification of store errors.

Only uniqueness failures are mapped to domain errors. Any other
IntegrityError is left for the caller to propagate unchanged.
"""

from sqlalchemy.exc import IntegrityError

PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_MARKER = "UNIQUE constraint failed"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the IntegrityError was raised by a unique constraint.

    Args:
        exc: The SQLAlchemy wrapper around the DBAPI error.
    """
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "sqlstate", None) == PG_UNIQUE_VIOLATION:
        return True
    return SQLITE_UNIQUE_MARKER in str(orig)
