class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation targets an unknown id."""


class ConsistencyError(DomainError):
    """Raised when stored data breaks an invariant (e.g. duplicate marks)."""


class RemoteError(DomainError):
    """Raised when the remote data source fails or returns garbage.

    Always retryable by re-invoking the operation.
    """

    retryable = True
