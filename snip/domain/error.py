"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a resource is missing or the caller may not know it exists.

    Missing, private, deleted, hidden and not-owned all collapse into this
    one error so callers cannot tell them apart. The message only names the
    resource kind, never the identifier or the real cause.
    """

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"{resource} not found")


class InvalidInputError(DomainError):
    """Raised when request data is malformed.

    Safe to show to callers; it carries no information about stored data.
    """

    def __init__(self, message: str):
        super().__init__(message)


class AuthenticationRequiredError(DomainError):
    """Raised when an operation needs a caller identity and none was given."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")
