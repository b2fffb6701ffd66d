"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class AccountExistsError(ProviderError):
    """The identity provider already has an account for the email."""

    pass
