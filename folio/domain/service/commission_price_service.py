"""Commission price domain service."""

import uuid
from decimal import Decimal, InvalidOperation
from typing import Any

import logfire

from folio.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from folio.domain.model import CommissionPrice, Portfolio
from folio.domain.repository import CommissionPriceRepository
from folio.domain.value import CommissionPriceId


def parse_price(value: Any) -> Decimal:
    """Parse a price given as number or string.

    Raises:
        ValidationError: If the value is not a non-negative number
    """
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be a valid number", field="price")
    if not price.is_finite() or price < 0:
        raise ValidationError("Price must be a non-negative number", field="price")
    return price


class CommissionPriceService:
    """Domain service for an artist's commission price tiers."""

    def __init__(self, price_repository: CommissionPriceRepository) -> None:
        """Initialize commission price service.

        Args:
            price_repository: Commission price repository
        """
        self.price_repository = price_repository

    async def list_for(
        self, portfolio: Portfolio, active_only: bool = False
    ) -> list[CommissionPrice]:
        """List a portfolio's tiers ordered by position."""
        return await self.price_repository.find_by_portfolio(
            portfolio.id, active_only=active_only
        )

    async def get_owned(
        self, portfolio: Portfolio, price_id: CommissionPriceId
    ) -> CommissionPrice:
        """Get a tier, checking it belongs to the portfolio.

        Raises:
            NotFoundError: If the tier does not exist
            NotAuthorizedError: If the tier belongs to another portfolio
        """
        price = await self.price_repository.find_by_id(price_id)
        if not price:
            raise NotFoundError("Price", str(price_id))
        if price.portfolio_id != portfolio.id:
            logfire.warn(
                "Price ownership mismatch",
                price_id=str(price_id),
                portfolio_id=str(portfolio.id),
            )
            raise NotAuthorizedError("price", str(price_id), str(portfolio.user_id))
        return price

    async def create(
        self,
        portfolio: Portfolio,
        title: str | None,
        price: Any,
        description: str | None = None,
        image_url: str | None = None,
        position: int | None = None,
        active: bool = True,
    ) -> CommissionPrice:
        """Create a price tier.

        Args:
            portfolio: Owning portfolio
            title: Tier title
            price: Amount, number or numeric string
            description: Optional description
            image_url: Optional example image
            position: Sort position, appended at the end by default
            active: Whether the tier is shown publicly

        Returns:
            The created tier

        Raises:
            ValidationError: If title or price is missing or invalid
        """
        with logfire.span(
            "commission_price_service.create", portfolio_id=str(portfolio.id)
        ):
            if not (title or "").strip() or price is None or price == "":
                raise ValidationError("Missing title or price")

            if position is None:
                existing = await self.price_repository.find_by_portfolio(portfolio.id)
                position = len(existing)

            tier = CommissionPrice(
                id=CommissionPriceId(uuid.uuid4()),
                portfolio_id=portfolio.id,
                title=title.strip(),
                description=description,
                price=parse_price(price),
                image_url=image_url,
                position=position,
                active=active,
            )
            saved = await self.price_repository.save(tier)
            logfire.info(
                "Price created", price_id=str(saved.id), portfolio_id=str(portfolio.id)
            )
            return saved

    async def update(
        self,
        portfolio: Portfolio,
        price_id: CommissionPriceId,
        changes: dict[str, Any],
    ) -> CommissionPrice:
        """Update a price tier owned by the portfolio.

        Raises:
            NotFoundError: If the tier does not exist
            NotAuthorizedError: If the tier belongs to another portfolio
            ValidationError: If an updated value is invalid
        """
        with logfire.span("commission_price_service.update", price_id=str(price_id)):
            tier = await self.get_owned(portfolio, price_id)

            update: dict[str, Any] = {}
            if "title" in changes:
                title = (changes["title"] or "").strip()
                if not title:
                    raise ValidationError("Title is required", field="title")
                update["title"] = title
            if "price" in changes:
                update["price"] = parse_price(changes["price"])
            for key in ("description", "image_url", "position", "active"):
                if key in changes:
                    update[key] = changes[key]

            return await self.price_repository.save(tier.model_copy(update=update))

    async def delete(self, portfolio: Portfolio, price_id: CommissionPriceId) -> None:
        """Delete a price tier owned by the portfolio."""
        with logfire.span("commission_price_service.delete", price_id=str(price_id)):
            await self.get_owned(portfolio, price_id)
            await self.price_repository.delete(price_id)
            logfire.info("Price deleted", price_id=str(price_id))
