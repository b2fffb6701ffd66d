"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import (
    CommissionPrice,
    Gallery,
    Invitation,
    Link,
    Portfolio,
    User,
)
from folio.domain.value import (
    CommissionPriceId,
    GalleryId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    LinkId,
    PortfolioId,
    PortfolioSlug,
    UserId,
    UserRole,
    UserStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row.get("email"),
        name=row["name"],
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        deactivated_at=row.get("deactivated_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
        "status": user.status.value,
        "deactivated_at": user.deactivated_at,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    accepted_by = row.get("accepted_by_user_id")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        email=row.get("email") or "",
        token=InvitationToken(row["token"]),
        status=InvitationStatus(row["status"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        custom_message=row.get("custom_message"),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=UserId(_uuid(accepted_by)) if accepted_by else None,
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    return {
        "id": invitation.id,
        "email": invitation.email,
        "token": invitation.token.root,
        "status": invitation.status.value,
        "invited_by": invitation.invited_by,
        "custom_message": invitation.custom_message,
        "created_at": invitation.created_at,
        "expires_at": invitation.expires_at,
        "accepted_at": invitation.accepted_at,
        "accepted_by_user_id": invitation.accepted_by_user_id,
    }


def row_to_portfolio(row: Dict[str, Any]) -> Portfolio:
    """Convert database row to Portfolio domain model."""
    return Portfolio(
        id=PortfolioId(_uuid(row["id"])),
        slug=PortfolioSlug(row["slug"]),
        display_name=row["display_name"],
        description=row.get("description"),
        user_id=UserId(_uuid(row["user_id"])),
        accent_color=row["accent_color"],
        color_mode=row["color_mode"],
        logo_url=row.get("logo_url"),
        hero_image_url=row.get("hero_image_url"),
        hero_image_light=row.get("hero_image_light"),
        hero_image_dark=row.get("hero_image_dark"),
        about=row.get("about"),
        primary_color=row.get("primary_color"),
        secondary_color=row.get("secondary_color"),
        footer_text=row.get("footer_text"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def portfolio_to_dict(portfolio: Portfolio) -> Dict[str, Any]:
    """Convert Portfolio domain model to database dict."""
    data = portfolio.model_dump()
    data["slug"] = portfolio.slug.root
    return data


def row_to_gallery(row: Dict[str, Any]) -> Gallery:
    """Convert database row to Gallery domain model."""
    return Gallery(
        id=GalleryId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        slug=row["slug"],
        name=row["name"],
        description=row.get("description"),
        is_public=row["is_public"],
        created_at=row["created_at"],
    )


def gallery_to_dict(gallery: Gallery) -> Dict[str, Any]:
    """Convert Gallery domain model to database dict."""
    return gallery.model_dump()


def row_to_commission_price(row: Dict[str, Any]) -> CommissionPrice:
    """Convert database row to CommissionPrice domain model."""
    return CommissionPrice(
        id=CommissionPriceId(_uuid(row["id"])),
        portfolio_id=PortfolioId(_uuid(row["portfolio_id"])),
        title=row["title"],
        description=row.get("description"),
        price=row["price"],
        image_url=row.get("image_url"),
        position=row["position"],
        active=row["active"],
        created_at=row["created_at"],
    )


def commission_price_to_dict(price: CommissionPrice) -> Dict[str, Any]:
    """Convert CommissionPrice domain model to database dict."""
    return price.model_dump()


def row_to_link(row: Dict[str, Any]) -> Link:
    """Convert database row to Link domain model."""
    return Link(
        id=LinkId(_uuid(row["id"])),
        portfolio_id=PortfolioId(_uuid(row["portfolio_id"])),
        title=row["title"],
        url=row["url"],
        image_url=row.get("image_url"),
        position=row["position"],
        is_public=row["is_public"],
        created_at=row["created_at"],
    )


def link_to_dict(link: Link) -> Dict[str, Any]:
    """Convert Link domain model to database dict."""
    return link.model_dump()
