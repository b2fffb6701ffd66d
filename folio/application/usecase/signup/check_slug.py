"""Check slug availability use case."""

from pydantic import BaseModel

from folio.domain.service import PortfolioService
from folio.domain.value import UserId


class CheckSlugRequest(BaseModel):
    """Check slug request."""

    slug: str


class CheckSlugResponse(BaseModel):
    """Check slug response."""

    slug: str
    available: bool
    is_current: bool = False


class CheckSlugUseCase:
    """Use case for checking whether a portfolio slug can be claimed.

    Used both during signup (anonymous) and from the studio, where the
    caller's own slug is reported as available and current.
    """

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(
        self, request: CheckSlugRequest, user_id: UserId | None = None
    ) -> CheckSlugResponse:
        """Check a slug.

        Raises:
            ValidationError: If the slug is malformed or reserved
        """
        slug = request.slug.strip().lower()
        result = await self.portfolio_service.check_slug(slug, current_user_id=user_id)
        return CheckSlugResponse(
            slug=result.slug, available=result.available, is_current=result.is_current
        )
