"""Link domain service."""

import uuid
from typing import Any

import logfire

from folio.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from folio.domain.model import Link, Portfolio
from folio.domain.repository import LinkRepository
from folio.domain.value import LinkId


class LinkService:
    """Domain service for an artist's outbound links."""

    def __init__(self, link_repository: LinkRepository) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
        """
        self.link_repository = link_repository

    async def list_for(self, portfolio: Portfolio, public_only: bool = False) -> list[Link]:
        """List a portfolio's links ordered by position."""
        return await self.link_repository.find_by_portfolio(
            portfolio.id, public_only=public_only
        )

    async def get_owned(self, portfolio: Portfolio, link_id: LinkId) -> Link:
        """Get a link, checking it belongs to the portfolio.

        Raises:
            NotFoundError: If the link does not exist
            NotAuthorizedError: If the link belongs to another portfolio
        """
        link = await self.link_repository.find_by_id(link_id)
        if not link:
            raise NotFoundError("Link", str(link_id))
        if link.portfolio_id != portfolio.id:
            raise NotAuthorizedError("link", str(link_id), str(portfolio.user_id))
        return link

    async def create(
        self,
        portfolio: Portfolio,
        title: str | None,
        url: str | None,
        image_url: str | None = None,
        position: int | None = None,
        is_public: bool = True,
    ) -> Link:
        """Create a link.

        Raises:
            ValidationError: If title or URL is missing
        """
        with logfire.span("link_service.create", portfolio_id=str(portfolio.id)):
            if not (title or "").strip() or not (url or "").strip():
                raise ValidationError("Title and URL are required")

            if position is None:
                existing = await self.link_repository.find_by_portfolio(portfolio.id)
                position = len(existing)

            link = Link(
                id=LinkId(uuid.uuid4()),
                portfolio_id=portfolio.id,
                title=title.strip(),
                url=url.strip(),
                image_url=image_url,
                position=position,
                is_public=is_public,
            )
            saved = await self.link_repository.save(link)
            logfire.info("Link created", link_id=str(saved.id))
            return saved

    async def update(
        self, portfolio: Portfolio, link_id: LinkId, changes: dict[str, Any]
    ) -> Link:
        """Update a link owned by the portfolio."""
        with logfire.span("link_service.update", link_id=str(link_id)):
            link = await self.get_owned(portfolio, link_id)

            update: dict[str, Any] = {}
            for key in ("title", "url"):
                if key in changes:
                    value = (changes[key] or "").strip()
                    if not value:
                        raise ValidationError("Title and URL are required", field=key)
                    update[key] = value
            for key in ("image_url", "position", "is_public"):
                if key in changes:
                    update[key] = changes[key]

            return await self.link_repository.save(link.model_copy(update=update))

    async def delete(self, portfolio: Portfolio, link_id: LinkId) -> None:
        """Delete a link owned by the portfolio."""
        with logfire.span("link_service.delete", link_id=str(link_id)):
            await self.get_owned(portfolio, link_id)
            await self.link_repository.delete(link_id)
            logfire.info("Link deleted", link_id=str(link_id))
