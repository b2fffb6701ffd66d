"""Errors raised while wiring the application together."""


class ConfigurationError(Exception):
    """A setting is missing or unusable in the current environment.

    Attributes:
        env_vars: Environment variables that would fix the problem
    """

    def __init__(self, message: str, env_vars: tuple[str, ...] = ()):
        self.env_vars = env_vars
        super().__init__(message)


class ProviderResolutionError(ConfigurationError):
    """No provider implementation matches the requested wiring."""

    pass
