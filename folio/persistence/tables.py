"""SQLAlchemy table definitions for Folio.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrors identity provider accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity provider id, not generated
    Column("email", String(255), nullable=True),  # Cleared on delete
    Column("name", String(255), nullable=False),
    Column(
        "role",
        Enum("USER", "ADMIN", name="user_role", create_type=False),
        nullable=False,
        server_default="USER",
    ),
    Column(
        "status",
        Enum("ACTIVE", "DEACTIVATED", "DELETED", name="user_status", create_type=False),
        nullable=False,
        server_default="ACTIVE",
    ),
    Column("deactivated_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, server_default=""),  # "" = generic
    Column("token", String(64), nullable=False, unique=True),
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "expired",
            "revoked",
            name="invitation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("custom_message", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

# One pending invitation per addressed email
Index(
    "uq_invitations_pending_email",
    invitations_table.c.email,
    unique=True,
    postgresql_where=text("status = 'pending' AND email <> ''"),
)
Index(
    "idx_invitations_status_created_at",
    invitations_table.c.status,
    invitations_table.c.created_at.desc(),
)

# ============================================================================
# PORTFOLIOS TABLE
# ============================================================================
portfolios_table = Table(
    "portfolios",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False, unique=True),
    Column("display_name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("accent_color", String(50), nullable=False, server_default="green"),
    Column("color_mode", String(20), nullable=False, server_default="dark"),
    Column("logo_url", Text, nullable=True),
    Column("hero_image_url", Text, nullable=True),
    Column("hero_image_light", Text, nullable=True),
    Column("hero_image_dark", Text, nullable=True),
    Column("about", Text, nullable=True),
    Column("primary_color", String(50), nullable=True),
    Column("secondary_color", String(50), nullable=True),
    Column("footer_text", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(slug) >= 3", name="check_portfolio_slug_length"),
)

# ============================================================================
# GALLERIES TABLE
# ============================================================================
galleries_table = Table(
    "galleries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "slug", name="uq_galleries_user_slug"),
)

# ============================================================================
# COMMISSION PRICES TABLE
# ============================================================================
commission_prices_table = Table(
    "commission_prices",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "portfolio_id",
        UUID,
        ForeignKey("portfolios.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("price", Numeric(10, 2), nullable=False),
    Column("image_url", Text, nullable=True),
    Column("position", Integer, nullable=False, server_default="0"),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("price >= 0", name="check_price_non_negative"),
)

Index(
    "idx_commission_prices_portfolio_position",
    commission_prices_table.c.portfolio_id,
    commission_prices_table.c.position,
)

# ============================================================================
# LINKS TABLE
# ============================================================================
links_table = Table(
    "links",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "portfolio_id",
        UUID,
        ForeignKey("portfolios.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("url", Text, nullable=False),
    Column("image_url", Text, nullable=True),
    Column("position", Integer, nullable=False, server_default="0"),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_links_portfolio_position", links_table.c.portfolio_id, links_table.c.position)
