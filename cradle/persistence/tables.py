"""SQLAlchemy table definitions for Cradle.

These table definitions match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity directory read model)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(320), nullable=False, unique=True),  # Lowercased
    Column("full_name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_owner_id", profiles_table.c.owner_id)

# ============================================================================
# ACCESS GRANTS TABLE
# ============================================================================
access_grants_table = Table(
    "access_grants",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "role",
        Enum("owner", "caregiver", name="grant_role", create_type=False),
        nullable=False,
    ),
    Column(
        "granted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "granted_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    UniqueConstraint("profile_id", "user_id", name="uq_access_grants_profile_user"),
)

Index("idx_access_grants_user_id", access_grants_table.c.user_id)

# One owner per profile
Index(
    "idx_access_grants_unique_owner",
    access_grants_table.c.profile_id,
    unique=True,
    postgresql_where=access_grants_table.c.role == "owner",
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("invited_email", String(320), nullable=False),  # Lowercased
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "expired",
            "cancelled",
            name="invitation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invitations_profile_id", invitations_table.c.profile_id)

# Sweep lookup: stale pending rows
Index(
    "idx_invitations_status_expires_at",
    invitations_table.c.status,
    invitations_table.c.expires_at,
)

# Partial unique constraint: only one pending invitation per (profile, email)
Index(
    "idx_invitations_unique_pending_email",
    invitations_table.c.profile_id,
    invitations_table.c.invited_email,
    unique=True,
    postgresql_where=invitations_table.c.status == "pending",
)
