"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """The request carries no usable session."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
