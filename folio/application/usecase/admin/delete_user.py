"""Delete user use case."""

import logfire

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.repository import UnitOfWork
from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.value import UserStatus

from .update_user import parse_user_id


class DeleteUserUseCase:
    """Use case for deleting a user account.

    The local row is soft-deleted (status DELETED, email cleared) and the
    remote account removed in one unit of work. If the provider refuses,
    the local row keeps its previous state.
    """

    def __init__(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.identity_provider = identity_provider
        self.identity_service = identity_service
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: str, actor_id: str) -> None:
        """Delete a user.

        Args:
            user_id: Target user
            actor_id: Superadmin performing the deletion

        Raises:
            ValidationError: If the actor targets themselves
            NotFoundError: If the account does not exist
            ProviderError: If the identity provider refuses the deletion
        """
        if user_id == actor_id:
            raise ValidationError("You cannot delete your own account")

        target_id = parse_user_id(user_id)

        with logfire.span("delete_user.execute", user_id=user_id, actor_id=actor_id):
            remote = await self.identity_provider.get_user(target_id)
            if not remote:
                raise NotFoundError("User", user_id)

            async with self.unit_of_work.transaction():
                await self.identity_service.ensure_local_user(remote)
                await self.identity_service.set_status(target_id, UserStatus.DELETED)
                await self.identity_provider.delete_user(target_id)

            logfire.info("User deleted", user_id=user_id, actor_id=actor_id)
