"""Portfolio slug allocation."""

import re
from collections.abc import Awaitable, Callable

import logfire
from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import ValidationError
from folio.domain.value import PortfolioSlug


RESERVED_SLUGS = frozenset(
    {
        "admin",
        "api",
        "studio",
        "auth",
        "login",
        "logout",
        "signup",
        "register",
        "dashboard",
        "system",
        "uploads",
        "static",
        "public",
        "next",
        "favicon",
        "assets",
        "g",
        "gallery",
        "galleries",
        "pricing",
        "prices",
        "commissions",
    }
)

MIN_SLUG_LENGTH = 3
MAX_SLUG_LENGTH = 100
FALLBACK_SLUG = "artist"

SlugExists = Callable[[str], Awaitable[bool]]


class SlugService:
    """Domain service for deriving, validating and allocating slugs.

    Allocation only pre-checks availability. Callers inserting the slug must
    still handle a unique-constraint conflict and allocate again.
    """

    @staticmethod
    def derive_base(seed: str) -> str:
        """Derive a slug base from an email address or display name.

        Lowercases, keeps the local part of an email, collapses every run of
        characters outside ``[a-z0-9]`` into one hyphen and trims hyphens.

        Args:
            seed: Email or free-form name

        Returns:
            Slug base, ``artist`` if fewer than 3 characters remain
        """
        value = seed.strip().lower()
        if "@" in value:
            value = value.split("@", 1)[0]
        value = re.sub(r"[^a-z0-9]+", "-", value).strip("-")
        value = value[:MAX_SLUG_LENGTH].strip("-")
        if len(value) < MIN_SLUG_LENGTH:
            return FALLBACK_SLUG
        return value

    @staticmethod
    def is_reserved(slug: str) -> bool:
        """Check whether a slug collides with a system route."""
        return slug.lower() in RESERVED_SLUGS

    @staticmethod
    def validate_slug(slug: str) -> PortfolioSlug:
        """Validate a user-chosen slug.

        Args:
            slug: Candidate slug

        Returns:
            The validated slug

        Raises:
            ValidationError: If the format is wrong or the slug is reserved
        """
        if not slug:
            raise ValidationError("Slug is required", field="slug")
        if len(slug) < MIN_SLUG_LENGTH:
            raise ValidationError(
                "Slug must be at least 3 characters long", field="slug"
            )
        if len(slug) > MAX_SLUG_LENGTH:
            raise ValidationError(
                "Slug must be at most 100 characters long", field="slug"
            )
        if SlugService.is_reserved(slug):
            raise ValidationError("This slug is reserved", field="slug")
        try:
            return PortfolioSlug(slug)
        except PydanticValidationError:
            raise ValidationError(
                "Slug can only contain lowercase letters, numbers, and hyphens",
                field="slug",
            )

    async def allocate(self, base: str, exists: SlugExists) -> PortfolioSlug:
        """Allocate the first free slug for a base.

        Tries ``base``, ``base-1``, ``base-2``, ... skipping reserved words and
        slugs for which ``exists`` returns True.

        Args:
            base: Slug base, normalized with derive_base if malformed
            exists: Async predicate telling whether a slug is taken

        Returns:
            An available, non-reserved slug
        """
        with logfire.span("slug_service.allocate", base=base):
            if not re.fullmatch(r"[a-z0-9-]{3,100}", base):
                base = self.derive_base(base)

            slug = base
            counter = 1
            while self.is_reserved(slug) or await exists(slug):
                suffix = f"-{counter}"
                slug = f"{base[: MAX_SLUG_LENGTH - len(suffix)]}{suffix}"
                counter += 1
                logfire.debug("Slug taken, trying next", slug=slug, counter=counter)

            return PortfolioSlug(slug)
