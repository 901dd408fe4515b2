"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing or malformed input)."""

    pass


class AuthenticationError(DomainError):
    """Raised when a caller cannot be identified (missing or bad credentials)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts outside their rights."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    pass
