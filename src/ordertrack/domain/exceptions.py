"""Domain-level exceptions.

All business rule violations and collaborator failures are expressed as
subclasses of DomainException so the CLI layer can catch them uniformly and
display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or input shape was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist for the current shop."""


class AuthenticationError(DomainException):
    """No signed-in user is available for a privileged operation."""


class BackendError(DomainException):
    """The hosted backend rejected a request or could not be reached."""


class PartialWriteError(BackendError):
    """An order was stored but its items were not, and rollback failed.

    The orphaned order keeps its id so it can be located and removed by hand.
    """

    def __init__(self, message: str, order_id: str | None) -> None:
        super().__init__(message)
        self.order_id = order_id
