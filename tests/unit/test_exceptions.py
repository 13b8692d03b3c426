"""Unit tests for the error taxonomy."""

from carrental.domain.exceptions import (
    CarRentalError,
    ConfigurationError,
    EntityNotFoundError,
    ErrorKind,
    InternalError,
    InvalidArgumentError,
    InvalidEntityError,
    ServiceFailureError,
)


def _describe(error: CarRentalError) -> str:
    match error.kind:
        case ErrorKind.NOT_FOUND:
            return "stale"
        case ErrorKind.INVALID_ENTITY | ErrorKind.INVALID_ARGUMENT:
            return "fix input"
        case ErrorKind.SERVICE_FAILURE:
            return "retry later"
        case _:
            return "abort"


def test_every_error_carries_its_kind():
    assert InvalidArgumentError("x").kind is ErrorKind.INVALID_ARGUMENT
    assert InvalidEntityError("x").kind is ErrorKind.INVALID_ENTITY
    assert EntityNotFoundError("Rent", 1).kind is ErrorKind.NOT_FOUND
    assert ServiceFailureError("x").kind is ErrorKind.SERVICE_FAILURE
    assert InternalError("x").kind is ErrorKind.INTERNAL
    assert ConfigurationError("x").kind is ErrorKind.CONFIGURATION


def test_callers_can_match_on_kind():
    assert _describe(EntityNotFoundError("Car", 3)) == "stale"
    assert _describe(InvalidEntityError("car already rented")) == "fix input"
    assert _describe(ServiceFailureError("db down")) == "retry later"
    assert _describe(InternalError("duplicate id")) == "abort"


def test_not_found_message_names_entity():
    error = EntityNotFoundError("Rent", 42)
    assert error.entity_type == "Rent"
    assert error.entity_id == 42
    assert str(error) == "Rent with id '42' not found"


def test_service_failure_keeps_cause():
    cause = ConnectionError("refused")
    error = ServiceFailureError("Error when inserting rent", cause)
    assert error.cause is cause
    assert error.message == "Error when inserting rent"
