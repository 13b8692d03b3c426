"""Affected-row checks shared by the write operations of every service."""

from carrental.domain.exceptions import EntityNotFoundError, InternalError


def ensure_single_row(count: int, entity_type: str, entity_id: int, operation: str) -> None:
    """Fail unless a write keyed by ``entity_id`` touched exactly one row.

    Zero rows means the entity is gone; more than one means the id is not
    unique in storage, which is corruption.
    """
    if count == 0:
        raise EntityNotFoundError(entity_type, entity_id)
    if count != 1:
        raise InternalError(
            f"Invalid {operation} row count for {entity_type} {entity_id}: "
            f"expected 1, got {count}"
        )
