"""Portfolio domain service."""

import uuid
from dataclasses import dataclass
from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import ConflictError, NotFoundError, ValidationError
from folio.domain.model import Gallery, Portfolio, User
from folio.domain.model.common import utc_now
from folio.domain.model.gallery import COMMISSIONS_GALLERY_SLUG
from folio.domain.repository import GalleryRepository, PortfolioRepository
from folio.domain.value import GalleryId, PortfolioId, PortfolioSlug, UserId

from .slug_service import SlugService

MAX_ALLOCATION_ATTEMPTS = 5

SLUG_TAKEN_MESSAGE = "This slug is already taken"

EDITABLE_FIELDS = frozenset(
    {
        "display_name",
        "description",
        "accent_color",
        "color_mode",
        "logo_url",
        "hero_image_url",
        "hero_image_light",
        "hero_image_dark",
        "about",
        "primary_color",
        "secondary_color",
        "footer_text",
    }
)


@dataclass
class SlugAvailability:
    """Result of a slug availability check."""

    slug: str
    available: bool
    is_current: bool = False


def welcome_description(display_name: str) -> str:
    """Default description of a freshly created portfolio."""
    return f"Welcome to {display_name}'s art gallery!"


class PortfolioService:
    """Domain service for portfolios and their hidden commissions gallery."""

    def __init__(
        self,
        portfolio_repository: PortfolioRepository,
        gallery_repository: GalleryRepository,
        slug_service: SlugService,
    ) -> None:
        """Initialize portfolio service.

        Args:
            portfolio_repository: Portfolio repository
            gallery_repository: Gallery repository
            slug_service: Slug allocation service
        """
        self.portfolio_repository = portfolio_repository
        self.gallery_repository = gallery_repository
        self.slug_service = slug_service

    async def get_by_user(self, user_id: UserId) -> Portfolio | None:
        """Get the portfolio owned by a user, if any."""
        return await self.portfolio_repository.find_by_user_id(user_id)

    async def get_by_slug(self, slug: str) -> Portfolio:
        """Get a portfolio by its public slug.

        Raises:
            NotFoundError: If no portfolio uses the slug
        """
        with logfire.span("portfolio_service.get_by_slug", slug=slug):
            try:
                parsed = PortfolioSlug(slug)
            except ValueError:
                raise NotFoundError("Portfolio", slug)

            portfolio = await self.portfolio_repository.find_by_slug(parsed)
            if not portfolio:
                logfire.warn("Portfolio not found", slug=slug)
                raise NotFoundError("Portfolio", slug)
            return portfolio

    async def create_for_user(
        self,
        user_id: UserId,
        display_name: str,
        seed: str,
        requested_slug: str | None = None,
        description: str | None = None,
    ) -> Portfolio:
        """Create a portfolio for a user.

        With a requested slug the slug is validated and must be free. Without
        one a slug is allocated from the seed; if the insert loses a race on
        the unique index a new slug is allocated, up to a bounded number of
        attempts.

        Args:
            user_id: Owner
            display_name: Public name of the artist
            seed: Email or name used to derive a slug
            requested_slug: Slug chosen by the artist
            description: Portfolio description, a welcome text by default

        Returns:
            The created portfolio, or the owner's existing one

        Raises:
            ValidationError: If the requested slug is invalid or taken
            ConflictError: If no slug could be allocated
        """
        with logfire.span(
            "portfolio_service.create_for_user",
            user_id=str(user_id),
            requested_slug=requested_slug,
        ):
            if requested_slug is not None:
                slug = self.slug_service.validate_slug(requested_slug)
                if await self.portfolio_repository.slug_exists(slug.root):
                    raise ValidationError(SLUG_TAKEN_MESSAGE, field="slug")
                try:
                    return await self._insert(user_id, slug, display_name, description)
                except ConflictError:
                    existing = await self.get_by_user(user_id)
                    if existing:
                        return existing
                    raise ValidationError(SLUG_TAKEN_MESSAGE, field="slug")

            base = self.slug_service.derive_base(seed)
            for attempt in range(1, MAX_ALLOCATION_ATTEMPTS + 1):
                slug = await self.slug_service.allocate(
                    base, self.portfolio_repository.slug_exists
                )
                try:
                    return await self._insert(user_id, slug, display_name, description)
                except ConflictError:
                    existing = await self.get_by_user(user_id)
                    if existing:
                        logfire.info(
                            "Portfolio created concurrently", user_id=str(user_id)
                        )
                        return existing
                    logfire.warn(
                        "Slug allocation lost a race, retrying",
                        slug=slug.root,
                        attempt=attempt,
                    )

            logfire.error("Slug allocation exhausted", base=base, user_id=str(user_id))
            raise ConflictError(f"Could not allocate a slug for {base}")

    async def _insert(
        self,
        user_id: UserId,
        slug: PortfolioSlug,
        display_name: str,
        description: str | None,
    ) -> Portfolio:
        portfolio = Portfolio(
            id=PortfolioId(uuid.uuid4()),
            slug=slug,
            display_name=display_name,
            description=description or welcome_description(display_name),
            user_id=user_id,
        )
        created = await self.portfolio_repository.create(portfolio)
        logfire.info(
            "Portfolio created",
            portfolio_id=str(created.id),
            user_id=str(user_id),
            slug=slug.root,
        )
        return created

    async def ensure_for_user(self, user: User) -> Portfolio:
        """Return the user's portfolio, creating one on first access.

        Args:
            user: Local user

        Returns:
            The user's portfolio
        """
        existing = await self.get_by_user(user.id)
        if existing:
            return existing

        return await self.create_for_user(
            user_id=user.id,
            display_name=user.name,
            seed=user.email or user.name,
        )

    async def ensure_commissions_gallery(self, user_id: UserId) -> Gallery:
        """Return the user's hidden commissions gallery, creating it if missing."""
        with logfire.span(
            "portfolio_service.ensure_commissions_gallery", user_id=str(user_id)
        ):
            existing = await self.gallery_repository.find_by_user_and_slug(
                user_id, COMMISSIONS_GALLERY_SLUG
            )
            if existing:
                return existing

            gallery = Gallery(
                id=GalleryId(uuid.uuid4()),
                user_id=user_id,
                slug=COMMISSIONS_GALLERY_SLUG,
                name="Commissions",
                description="Commission examples and price points",
                is_public=False,
            )
            try:
                return await self.gallery_repository.create(gallery)
            except ConflictError:
                existing = await self.gallery_repository.find_by_user_and_slug(
                    user_id, COMMISSIONS_GALLERY_SLUG
                )
                if not existing:
                    raise
                return existing

    async def check_slug(
        self, slug: str, current_user_id: UserId | None = None
    ) -> SlugAvailability:
        """Check whether a slug can be claimed.

        Args:
            slug: Candidate slug
            current_user_id: Caller, whose own slug counts as available

        Returns:
            Availability result

        Raises:
            ValidationError: If the slug is malformed or reserved
        """
        validated = self.slug_service.validate_slug(slug)

        if current_user_id is not None:
            own = await self.get_by_user(current_user_id)
            if own and own.slug == validated:
                return SlugAvailability(slug=slug, available=True, is_current=True)

        taken = await self.portfolio_repository.slug_exists(validated.root)
        return SlugAvailability(slug=slug, available=not taken)

    async def update(self, portfolio: Portfolio, changes: dict[str, Any]) -> Portfolio:
        """Apply owner edits to a portfolio.

        Args:
            portfolio: Portfolio being edited
            changes: Field values to set; ``slug`` is validated and checked

        Returns:
            The updated portfolio

        Raises:
            ValidationError: If the new slug is invalid or taken
        """
        with logfire.span(
            "portfolio_service.update",
            portfolio_id=str(portfolio.id),
            fields=sorted(changes),
        ):
            update: dict[str, Any] = {
                key: value for key, value in changes.items() if key in EDITABLE_FIELDS
            }

            if "display_name" in update and not (update["display_name"] or "").strip():
                raise ValidationError("Display name is required", field="display_name")

            new_slug = changes.get("slug")
            if new_slug is not None and new_slug != portfolio.slug.root:
                slug = self.slug_service.validate_slug(new_slug)
                if await self.portfolio_repository.slug_exists(slug.root):
                    raise ValidationError(SLUG_TAKEN_MESSAGE, field="slug")
                update["slug"] = slug

            if not update:
                return portfolio

            update["updated_at"] = utc_now()
            try:
                candidate = Portfolio.model_validate(
                    {**portfolio.model_dump(), **update}
                )
            except PydanticValidationError as e:
                first = e.errors()[0]
                field = str(first["loc"][0]) if first["loc"] else None
                raise ValidationError(first["msg"], field=field)

            try:
                saved = await self.portfolio_repository.save(candidate)
            except ConflictError:
                raise ValidationError(SLUG_TAKEN_MESSAGE, field="slug")

            logfire.info("Portfolio updated", portfolio_id=str(portfolio.id))
            return saved
