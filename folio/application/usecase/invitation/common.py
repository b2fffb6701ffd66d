"""Helpers shared by invitation use cases."""

from folio.config import Settings
from folio.domain.value import InvitationToken


def build_invite_link(settings: Settings, token: InvitationToken) -> str:
    """Build the signup link carrying an invitation token.

    Raises:
        ConfigurationError: If no base URL can be resolved
    """
    return f"{settings.resolve_base_url()}/signup?token={token.root}"
