"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes that must succeed or fail together.

    Exceptions raised inside ``transaction()`` undo every write made in the
    block and propagate unchanged. This holds even when the exception is
    later turned into an HTTP response, which would otherwise let the
    request transaction commit the partial writes.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Usage:
            async with unit_of_work.transaction():
                await user_repository.save(user)
                await invitation_repository.mark_accepted(...)
        """
        pass
