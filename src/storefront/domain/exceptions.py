"""Domain-level exceptions.

Every failure the storefront reports is a subclass of DomainException.
Each carries a stable ``kind`` so the CLI and HTTP layers can map it to
an exit message or status code without inspecting the text.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "Internal"


class ValidationError(DomainException):
    """Malformed or missing input. Raised before anything is written."""

    kind = "InvalidArgument"


class EntityNotFoundError(DomainException):
    """A referenced user, cart line, product or order does not exist."""

    kind = "NotFound"


class ConflictError(DomainException):
    """Reserved: no current rule raises it."""

    kind = "Conflict"


class StorageUnavailableError(DomainException):
    """A storage operation could not complete; retry the whole operation."""

    kind = "Unavailable"
