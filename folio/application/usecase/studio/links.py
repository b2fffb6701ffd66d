"""Studio link use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.error import NotFoundError
from folio.domain.service import LinkService, PortfolioService
from folio.domain.value import LinkId

from ..auth.authenticate import AuthenticatedSession
from .common import LinkView, load_own_portfolio


def _parse_link_id(link_id: str) -> LinkId:
    try:
        return LinkId(UUID(link_id))
    except ValueError:
        raise NotFoundError("Link", link_id)


class CreateLinkRequest(BaseModel):
    """Create link request."""

    title: str | None = None
    url: str | None = None
    image_url: str | None = None
    position: int | None = None
    is_public: bool = True


class UpdateLinkRequest(BaseModel):
    """Update link request. Only fields that are sent are changed."""

    title: str | None = None
    url: str | None = None
    image_url: str | None = None
    position: int | None = None
    is_public: bool | None = None


class LinkListResponse(BaseModel):
    """Link list response."""

    links: list[LinkView]


class LinkUseCase:
    """Base for link use cases operating on the caller's portfolio."""

    def __init__(
        self, portfolio_service: PortfolioService, link_service: LinkService
    ) -> None:
        self.portfolio_service = portfolio_service
        self.link_service = link_service


class ListLinksUseCase(LinkUseCase):
    """List every link of the caller's portfolio, hidden ones included."""

    async def execute(self, session: AuthenticatedSession) -> LinkListResponse:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        links = await self.link_service.list_for(portfolio)
        return LinkListResponse(links=[LinkView.from_model(link) for link in links])


class CreateLinkUseCase(LinkUseCase):
    """Add a link to the caller's portfolio."""

    async def execute(
        self, session: AuthenticatedSession, request: CreateLinkRequest
    ) -> LinkView:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        link = await self.link_service.create(
            portfolio,
            title=request.title,
            url=request.url,
            image_url=request.image_url,
            position=request.position,
            is_public=request.is_public,
        )
        return LinkView.from_model(link)


class UpdateLinkUseCase(LinkUseCase):
    """Edit one of the caller's links."""

    async def execute(
        self, session: AuthenticatedSession, link_id: str, request: UpdateLinkRequest
    ) -> LinkView:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        link = await self.link_service.update(
            portfolio, _parse_link_id(link_id), request.model_dump(exclude_unset=True)
        )
        return LinkView.from_model(link)


class DeleteLinkUseCase(LinkUseCase):
    """Remove one of the caller's links."""

    async def execute(self, session: AuthenticatedSession, link_id: str) -> None:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        await self.link_service.delete(portfolio, _parse_link_id(link_id))
