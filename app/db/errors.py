"""
Classification of database errors raised through SQLAlchemy.
"""
from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Check whether an IntegrityError was caused by a unique or primary key conflict.

    Args:
        exc: The IntegrityError raised on flush/commit

    Returns:
        True for Postgres SQLSTATE 23505 or SQLite UNIQUE failures
    """
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    message = str(orig if orig is not None else exc)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message
