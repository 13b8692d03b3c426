"""Domain-specific exceptions — framework-independent.

Every error carries an ``ErrorKind`` so callers can branch on
``error.kind`` instead of walking the class hierarchy.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure surfaced by the rental services."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_ENTITY = "invalid_entity"
    NOT_FOUND = "not_found"
    SERVICE_FAILURE = "service_failure"
    INTERNAL = "internal"
    CONFIGURATION = "configuration"


class CarRentalError(Exception):
    """Base class for all errors raised by the rental services."""

    kind: ErrorKind = ErrorKind.INTERNAL


class InvalidArgumentError(CarRentalError):
    """Raised when the caller breaks an operation's contract.

    Examples: passing ``None``, creating an entity whose id is already set,
    updating one without an id. Detected before any I/O.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidEntityError(CarRentalError):
    """Raised when an entity violates a domain rule.

    Covers bad field values, broken references and rental interval
    conflicts. Never leaves partial writes behind.
    """

    kind = ErrorKind.INVALID_ENTITY

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class EntityNotFoundError(CarRentalError):
    """Raised when a requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ServiceFailureError(CarRentalError):
    """Raised when the underlying store fails.

    The original low-level error is kept on ``cause`` (and chained).
    """

    kind = ErrorKind.SERVICE_FAILURE

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class InternalError(CarRentalError):
    """Raised on an invariant breach that indicates corrupted data."""

    kind = ErrorKind.INTERNAL


class ConfigurationError(CarRentalError):
    """Raised when a service is built without a required collaborator."""

    kind = ErrorKind.CONFIGURATION
