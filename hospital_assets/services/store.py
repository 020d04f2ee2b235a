from typing import Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from hospital_assets.errors import NotFound, ReferenceNotFound, UniquenessViolation

M = TypeVar("M", bound=SQLModel)


def require_reference(session: Session, model: type[M], ref_id: Optional[int], entity: str) -> M:
    """Existence check for a foreign key carried by a create input."""
    row = session.get(model, ref_id) if ref_id is not None else None
    if row is None:
        raise ReferenceNotFound(entity, ref_id)
    return row


def get_or_404(session: Session, model: type[M], row_id: int, entity: str) -> M:
    row = session.get(model, row_id)
    if row is None:
        raise NotFound(entity, row_id)
    return row


def apply_changes(row: SQLModel, changes: dict) -> None:
    for field, value in changes.items():
        setattr(row, field, value)


def _is_unique_violation(exc: IntegrityError) -> bool:
    # postgres reports SQLSTATE 23505, sqlite only says so in the message
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate is not None:
        return sqlstate == "23505"
    return "unique" in str(orig).lower()


def commit_unique(session: Session, row: M, entity: str, unique_fields: str) -> M:
    """
    Commit and refresh ``row``. A unique constraint hit becomes
    UniquenessViolation; the store is the only place uniqueness is checked.
    Other integrity errors (foreign keys on engines that enforce them) are
    re-raised as they are.
    """
    session.add(row)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if _is_unique_violation(exc):
            raise UniquenessViolation(entity, unique_fields)
        raise
    session.refresh(row)
    return row
