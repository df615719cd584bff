"""Ownership Enforcement — conditional update/delete of owned records.

Invariants:
    - Mutations are issued as ONE statement filtered by (id AND user_id = subject)
    - Zero affected rows never passes silently: absent record → RecordNotFoundError,
      record owned by someone else → ForbiddenError
    - Existence is decided before ownership (a missing record is never reported as 403)
    - Nothing here commits — the caller owns the transaction

Design Decisions:
    - Conditional statement over fetch-compare-write: no window between the ownership
      check and the write in which another request can change the owner or delete the row
    - The existence probe only runs after a refused write, so it cannot authorize anything
"""

import logging
from typing import TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject
from app.core.errors import ForbiddenError, RecordNotFoundError

logger = logging.getLogger(__name__)

OwnedModel = TypeVar("OwnedModel")


async def _raise_missing_or_forbidden(
    db: AsyncSession, model: type, kind: ResourceKind,
    record_id: int, subject: Subject,
) -> None:
    result = await db.execute(
        select(model.user_id).where(model.id == record_id),
    )
    if result.scalar_one_or_none() is None:
        raise RecordNotFoundError(kind.value, record_id)
    logger.warning(
        f"Ownership check refused {kind.value} {record_id}",
        extra={"subject": subject, "resource": kind.value, "record_id": record_id},
    )
    raise ForbiddenError(kind.value, record_id)


async def update_owned(
    db: AsyncSession,
    model: type[OwnedModel],
    kind: ResourceKind,
    record_id: int,
    subject: Subject,
    values: dict,
) -> OwnedModel:
    """Apply values to the record only if subject owns it; return the fresh row."""
    result = await db.execute(
        update(model)
        .where(model.id == record_id, model.user_id == subject)
        .values(**values)
        .execution_options(synchronize_session=False),
    )
    if result.rowcount == 0:
        await _raise_missing_or_forbidden(db, model, kind, record_id, subject)
    return await db.get(model, record_id, populate_existing=True)


async def delete_owned(
    db: AsyncSession,
    model: type,
    kind: ResourceKind,
    record_id: int,
    subject: Subject,
) -> None:
    """Delete the record only if subject owns it."""
    result = await db.execute(
        delete(model)
        .where(model.id == record_id, model.user_id == subject)
        .execution_options(synchronize_session=False),
    )
    if result.rowcount == 0:
        await _raise_missing_or_forbidden(db, model, kind, record_id, subject)
