"""Domain layer errors.

None of these are retried internally; they surface to the calling layer,
which translates them into a user-visible response.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A required field is missing or malformed."""

    pass


class ConflictError(DomainError):
    """The write would duplicate an active record."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransientStoreError(DomainError):
    """The record store is unreachable or timed out."""

    pass
