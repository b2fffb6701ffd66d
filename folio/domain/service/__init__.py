"""Domain services."""

from .commission_price_service import CommissionPriceService
from .identity_service import IdentityProviderClient, IdentityService
from .invitation_service import InvitationService, PendingInvitation
from .link_service import LinkService
from .portfolio_service import PortfolioService, SlugAvailability
from .session_service import SessionService
from .slug_service import SlugService

__all__ = [
    "CommissionPriceService",
    "IdentityProviderClient",
    "IdentityService",
    "InvitationService",
    "LinkService",
    "PendingInvitation",
    "PortfolioService",
    "SessionService",
    "SlugAvailability",
    "SlugService",
]
