"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries the offending field when the failure belongs to a single input,
    so callers can render it next to that field.
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write loses against a storage-level uniqueness rule."""

    pass


class ForbiddenError(DomainError):
    """Raised when an authenticated caller lacks the required privilege."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class InvitationError(DomainError):
    """Base class for invitation token failures.

    Public callers only ever see INVITATION_GENERIC_MESSAGE; the specific
    subclass is kept for logs and admin tooling.
    """

    pass


class InvalidInvitationError(InvitationError):
    """Invitation was revoked or already marked expired."""

    pass


class ExpiredError(InvitationError):
    """Invitation is still pending but its window has passed."""

    pass


class AlreadyUsedError(InvitationError):
    """Invitation has already been consumed."""

    pass


class InvitationNotFoundError(InvitationError, NotFoundError):
    """No invitation exists for the token."""

    def __init__(self, identifier: str):
        NotFoundError.__init__(self, "Invitation", identifier)


INVITATION_GENERIC_MESSAGE = "Invitation is invalid or has expired"
