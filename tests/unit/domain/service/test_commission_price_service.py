"""Unit tests for CommissionPriceService."""

from decimal import Decimal
from uuid import uuid4

import pytest

from folio.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from folio.domain.model import Portfolio
from folio.domain.repository import PortfolioRepository
from folio.domain.service import CommissionPriceService
from folio.domain.value import CommissionPriceId, PortfolioId, PortfolioSlug, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def portfolio_in(unit_env, slug: str = "jane") -> Portfolio:
    repo = await unit_env.get(PortfolioRepository)
    return await repo.create(
        Portfolio(
            id=PortfolioId(uuid4()),
            slug=PortfolioSlug(slug),
            display_name="Jane",
            user_id=UserId(uuid4()),
        )
    )


class TestCommissionPrices:
    """Tests for CommissionPriceService."""

    @pytest.mark.asyncio
    async def test_create_parses_string_price_and_appends(self, unit_env):
        # Arrange
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)

        # Act
        first = await service.create(portfolio, "Sketch", "25.50")
        second = await service.create(portfolio, "Full colour", 120)

        # Assert
        assert first.price == Decimal("25.50")
        assert first.position == 0
        assert second.position == 1
        assert [p.title for p in await service.list_for(portfolio)] == [
            "Sketch",
            "Full colour",
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,price", [(None, 10), ("", 10), ("Sketch", None)])
    async def test_create_requires_title_and_price(self, unit_env, title, price):
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)

        with pytest.raises(ValidationError, match="Missing title or price"):
            await service.create(portfolio, title, price)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["-1", "abc", "NaN"])
    async def test_create_rejects_invalid_price(self, unit_env, price):
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(portfolio, "Sketch", price)
        assert exc_info.value.field == "price"

    @pytest.mark.asyncio
    async def test_public_listing_hides_inactive(self, unit_env):
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)
        await service.create(portfolio, "Sketch", 10)
        await service.create(portfolio, "Retired", 99, active=False)

        public = await service.list_for(portfolio, active_only=True)

        assert [p.title for p in public] == ["Sketch"]

    @pytest.mark.asyncio
    async def test_update_and_delete_own_tier(self, unit_env):
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)
        tier = await service.create(portfolio, "Sketch", 10)

        updated = await service.update(portfolio, tier.id, {"price": "15", "active": False})
        assert updated.price == Decimal("15")
        assert updated.active is False

        await service.delete(portfolio, tier.id)
        assert await service.list_for(portfolio) == []

    @pytest.mark.asyncio
    async def test_other_portfolio_cannot_touch_tier(self, unit_env):
        service = await unit_env.get(CommissionPriceService)
        owner = await portfolio_in(unit_env, "owner")
        intruder = await portfolio_in(unit_env, "intruder")
        tier = await service.create(owner, "Sketch", 10)

        with pytest.raises(NotAuthorizedError):
            await service.update(intruder, tier.id, {"price": 0})
        with pytest.raises(NotAuthorizedError):
            await service.delete(intruder, tier.id)

    @pytest.mark.asyncio
    async def test_unknown_tier_is_not_found(self, unit_env):
        service = await unit_env.get(CommissionPriceService)
        portfolio = await portfolio_in(unit_env)

        with pytest.raises(NotFoundError):
            await service.delete(portfolio, CommissionPriceId(uuid4()))
