"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.service import PortfolioService
from folio.domain.value import UserRole, UserStatus

from .authenticate import AuthenticatedSession


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str | None
    name: str
    role: UserRole
    status: UserStatus
    is_admin: bool
    is_superadmin: bool
    portfolio_slug: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for describing the authenticated user."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        """Initialize get current user use case.

        Args:
            portfolio_service: Portfolio domain service
        """
        self.portfolio_service = portfolio_service

    async def execute(self, session: AuthenticatedSession) -> GetCurrentUserResponse:
        """Describe the caller.

        Args:
            session: Authenticated session

        Returns:
            User profile with role flags
        """
        user = session.user
        portfolio = await self.portfolio_service.get_by_user(user.id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            email=user.email,
            name=user.name,
            role=user.role,
            status=user.status,
            is_admin=session.is_admin,
            is_superadmin=session.is_superadmin,
            portfolio_slug=portfolio.slug.root if portfolio else None,
            created_at=user.created_at,
        )
