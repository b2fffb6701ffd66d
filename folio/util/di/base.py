"""Provider metadata used to choose between production and mock wiring."""

from typing import ClassVar, Literal

from dishka import Provider

from folio.util.error import ProviderResolutionError

# Components with an in-memory stand-in for tests
Component = Literal["supabase", "persistence"]


class ProviderBase(Provider):
    """Base of every Folio provider.

    A provider class that has subclasses is a mockable component; each
    subclass is one wiring of it, and ``__is_mock__`` tells the production
    wiring from the mock. A provider without subclasses is wired as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the wiring to instantiate for this provider.

        Mock wirings are only visible once their module is imported, which
        the test package does.

        Raises:
            ProviderResolutionError: If a mockable component lacks the
                requested wiring
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ProviderResolutionError(
            f"No {kind} wiring for {cls.__mock_component__ or cls.__name__}"
        )
