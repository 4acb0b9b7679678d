"""Shared backing store for the in-memory repositories.

Repositories built on the same store see each other's writes, the way
repositories sharing one database would.
"""

from dataclasses import dataclass, field

from cradle.domain.model import AccessGrant, Invitation, Profile, User


@dataclass
class InMemoryStore:
    """Tables as plain lists."""

    users: list[User] = field(default_factory=list)
    profiles: list[Profile] = field(default_factory=list)
    access_grants: list[AccessGrant] = field(default_factory=list)
    invitations: list[Invitation] = field(default_factory=list)
