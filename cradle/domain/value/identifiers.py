"""Strongly typed identifiers for Cradle domain entities.

Using NewType keeps profile, user, grant and invitation IDs from being
mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProfileId = NewType("ProfileId", UUID)
AccessGrantId = NewType("AccessGrantId", UUID)
InvitationId = NewType("InvitationId", UUID)
