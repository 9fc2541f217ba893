"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError, ValueError):
    """Domain validation error.

    Also a ValueError, so pydantic validators can raise it and report it
    as a field error.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule.

    Covers duplicate user emails and a second vote by the same user
    on the same product.
    """

    def __init__(self, message: str):
        super().__init__(message)
