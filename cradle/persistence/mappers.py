"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from cradle.domain.model import AccessGrant, Invitation, Profile, User
from cradle.domain.value import (
    AccessGrantId,
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
    Role,
    UserId,
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
        email=Email(row["email"]),
        full_name=row.get("full_name"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        name=row["name"],
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_access_grant(row: Dict[str, Any]) -> AccessGrant:
    """Convert database row to AccessGrant domain model.

    Args:
        row: Database row as dict

    Returns:
        AccessGrant domain model
    """
    return AccessGrant(
        id=AccessGrantId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=Role(row["role"]),
        granted_at=row["granted_at"],
        granted_by=UserId(_uuid(row["granted_by"])) if row.get("granted_by") else None,
    )


def access_grant_to_dict(grant: AccessGrant) -> Dict[str, Any]:
    """Convert AccessGrant domain model to database dict."""
    data = grant.model_dump()
    data["role"] = grant.role.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        invited_email=Email(row["invited_email"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        token=InvitationToken(root=row["token"]),
        status=InvitationStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Email and InvitationToken are RootValueObjects, so model_dump() already
    yields their primitive values.
    """
    data = invitation.model_dump()
    data["status"] = invitation.status.value
    return data
