"""Profile service."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_engine.domain.profile import CalorieGoals, Profile
from nutrition_engine.services.energy import compute_user_goals


class ProfileRepository(Protocol):
    """Persistence interface for the user's profile."""

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: Profile) -> None:
        """Replace the stored profile."""


@dataclass
class ProfileService:
    """Service for reading and replacing the profile."""

    repository: ProfileRepository

    def get_profile(self) -> Profile | None:
        """Return the current profile or None when absent."""
        return self.repository.get_profile()

    def save_profile(self, profile: Profile) -> CalorieGoals | None:
        """Persist a profile and return the goals derived from it."""
        self.repository.save_profile(profile)
        return compute_user_goals(profile)

    def get_goals(self) -> CalorieGoals | None:
        """Return goals for the stored profile, or None if absent/incomplete."""
        profile = self.repository.get_profile()
        if profile is None:
            return None
        return compute_user_goals(profile)
