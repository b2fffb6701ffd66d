"""Unit tests for studio and public portfolio use cases."""

from decimal import Decimal

import pytest

from folio.application.usecase.artist import GetArtistUseCase
from folio.application.usecase.auth import AuthenticateRequest, AuthenticateUseCase
from folio.application.usecase.studio import (
    CreateLinkRequest,
    CreateLinkUseCase,
    CreatePriceRequest,
    CreatePriceUseCase,
    DeletePriceUseCase,
    GetStudioPortfolioUseCase,
    ListPricesUseCase,
    UpdatePortfolioRequest,
    UpdatePortfolioUseCase,
    UpdatePriceRequest,
    UpdatePriceUseCase,
)
from folio.domain.error import (
    ForbiddenError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from tests.conftest import access_token_for, make_remote_user, superadmin_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def session_for(unit_env, remote):
    authenticate = await unit_env.get(AuthenticateUseCase)
    return await authenticate.execute(AuthenticateRequest(token=access_token_for(remote)))


class TestStudioPortfolio:
    """Tests for reading and editing one's own portfolio."""

    @pytest.mark.asyncio
    async def test_first_access_creates_portfolio(self, unit_env):
        # Arrange
        session = await session_for(
            unit_env,
            make_remote_user("Jane.Doe@example.com", user_metadata={"name": "Jane"}),
        )
        use_case = await unit_env.get(GetStudioPortfolioUseCase)

        # Act
        first = await use_case.execute(session)
        second = await use_case.execute(session)

        # Assert
        assert first.portfolio.slug == "jane-doe"
        assert first.portfolio.display_name == "Jane"
        assert first.portfolio.accent_color == "green"
        assert second.portfolio.id == first.portfolio.id

    @pytest.mark.asyncio
    async def test_superadmin_has_no_portfolio(self, unit_env):
        session = await session_for(
            unit_env,
            make_remote_user(superadmin_email(), app_metadata={"roles": ["admin"]}),
        )
        use_case = await unit_env.get(GetStudioPortfolioUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(session)

    @pytest.mark.asyncio
    async def test_change_slug(self, unit_env):
        session = await session_for(unit_env, make_remote_user("jane@example.com"))
        use_case = await unit_env.get(UpdatePortfolioUseCase)

        response = await use_case.execute(
            session, UpdatePortfolioRequest(slug=" Jane-Art ", about="Painter")
        )

        assert response.portfolio.slug == "jane-art"
        assert response.portfolio.about == "Painter"

    @pytest.mark.asyncio
    async def test_slug_taken_by_someone_else(self, unit_env):
        other = await session_for(unit_env, make_remote_user("taken@example.com"))
        await (await unit_env.get(GetStudioPortfolioUseCase)).execute(other)
        session = await session_for(unit_env, make_remote_user("jane@example.com"))
        use_case = await unit_env.get(UpdatePortfolioUseCase)

        with pytest.raises(ValidationError, match="already taken"):
            await use_case.execute(session, UpdatePortfolioRequest(slug="taken"))

    @pytest.mark.asyncio
    async def test_blank_display_name(self, unit_env):
        session = await session_for(unit_env, make_remote_user("jane@example.com"))
        use_case = await unit_env.get(UpdatePortfolioUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(session, UpdatePortfolioRequest(display_name=" "))
        assert exc_info.value.field == "display_name"


class TestStudioPrices:
    """Tests for the studio price use cases."""

    @pytest.mark.asyncio
    async def test_create_update_list_delete(self, unit_env):
        # Arrange
        session = await session_for(unit_env, make_remote_user("jane@example.com"))

        # Act
        created = await (await unit_env.get(CreatePriceUseCase)).execute(
            session, CreatePriceRequest(title="Sketch", price="30")
        )
        updated = await (await unit_env.get(UpdatePriceUseCase)).execute(
            session, created.id, UpdatePriceRequest(price="45.5")
        )
        listed = await (await unit_env.get(ListPricesUseCase)).execute(session)
        await (await unit_env.get(DeletePriceUseCase)).execute(session, created.id)
        after = await (await unit_env.get(ListPricesUseCase)).execute(session)

        # Assert
        assert updated.price == Decimal("45.5")
        assert updated.title == "Sketch"
        assert [p.id for p in listed.prices] == [created.id]
        assert after.prices == []

    @pytest.mark.asyncio
    async def test_cannot_edit_another_artists_price(self, unit_env):
        owner = await session_for(unit_env, make_remote_user("owner@example.com"))
        intruder = await session_for(unit_env, make_remote_user("intruder@example.com"))
        price = await (await unit_env.get(CreatePriceUseCase)).execute(
            owner, CreatePriceRequest(title="Sketch", price=30)
        )

        with pytest.raises(NotAuthorizedError):
            await (await unit_env.get(UpdatePriceUseCase)).execute(
                intruder, price.id, UpdatePriceRequest(price=1)
            )

    @pytest.mark.asyncio
    async def test_malformed_price_id(self, unit_env):
        session = await session_for(unit_env, make_remote_user("jane@example.com"))

        with pytest.raises(NotFoundError):
            await (await unit_env.get(DeletePriceUseCase)).execute(session, "nope")


class TestPublicArtist:
    """Tests for GetArtistUseCase."""

    @pytest.mark.asyncio
    async def test_shows_only_public_links_and_active_prices(self, unit_env):
        # Arrange
        session = await session_for(unit_env, make_remote_user("jane@example.com"))
        create_price = await unit_env.get(CreatePriceUseCase)
        create_link = await unit_env.get(CreateLinkUseCase)
        await create_price.execute(session, CreatePriceRequest(title="Sketch", price=30))
        await create_price.execute(
            session, CreatePriceRequest(title="Hidden", price=99, active=False)
        )
        await create_link.execute(
            session, CreateLinkRequest(title="Shop", url="https://shop.example.com")
        )
        await create_link.execute(
            session,
            CreateLinkRequest(title="Draft", url="https://x.example.com", is_public=False),
        )

        # Act
        response = await (await unit_env.get(GetArtistUseCase)).execute("Jane")

        # Assert
        assert response.portfolio.slug == "jane"
        assert [p.title for p in response.prices] == ["Sketch"]
        assert [link.title for link in response.links] == ["Shop"]

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        with pytest.raises(NotFoundError):
            await (await unit_env.get(GetArtistUseCase)).execute("nobody-here")
