"""Profile use cases."""

from cradle.application.usecase.profile.create_profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
)
from cradle.application.usecase.profile.list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    ProfileItem,
)

__all__ = [
    "CreateProfileRequest",
    "CreateProfileResponse",
    "CreateProfileUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileItem",
]
