"""
Profile Service

Owns the user profile stored under the ``user`` key. The profile is
written as a single JSON blob; the last writer wins.
"""

import logging
from typing import Optional

from jobboard.common.error_handling import StoreError, ValidationError
from jobboard.common.repositories.kv_store import USER_KEY, KeyValueStoreInterface
from jobboard.common.types import UserProfile

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "Please enter email and password"
NOTHING_TO_SAVE = "Nothing to save"


class ProfileService:
    """Load, create and update the stored user profile."""

    EDITABLE_FIELDS = (
        "name", "bio", "profile_photo", "cover_photo", "skills", "experience", "portfolio",
    )

    def __init__(self, store: KeyValueStoreInterface):
        self.store = store

    async def load(self) -> Optional[UserProfile]:
        """Return the stored profile, or None when absent or unreadable."""
        try:
            raw = await self.store.get_item(USER_KEY)
        except StoreError as e:
            logger.error(f"Error loading profile: {e}")
            return None
        if raw is None:
            return None
        try:
            return UserProfile.from_dict(raw)
        except (TypeError, ValueError) as e:
            logger.error(f"Error loading profile: {e}")
            return None

    async def save(self, profile: UserProfile) -> bool:
        try:
            ok = await self.store.set_item(USER_KEY, profile.to_dict())
        except StoreError as e:
            logger.error(f"Error saving profile: {e}")
            return False
        if not ok:
            logger.error("Error saving profile: store rejected the write")
        return ok

    async def create_from_credentials(self, email: str, password: str) -> UserProfile:
        """
        Create and persist a fresh profile for a login.

        The display name defaults to the local part of the email.

        Raises:
            ValidationError: If email or password is blank
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError(CREDENTIALS_REQUIRED)

        profile = UserProfile(email=email, name=email.split("@")[0])
        if not await self.save(profile):
            raise StoreError(USER_KEY, "could not persist new profile")
        logger.info(f"Created profile for {profile.name}")
        return profile

    async def update(self, profile: UserProfile, **changes) -> UserProfile:
        """
        Apply edits and persist the result.

        Args:
            profile: Current profile
            **changes: Editable fields (name, bio, skills, ...)

        Returns:
            The updated profile

        Raises:
            ValidationError: If no field actually changes
            StoreError: If the write fails (the caller keeps ``profile``)
        """
        unknown = set(changes) - set(self.EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        current = profile.to_dict()
        updated = UserProfile.from_dict(current)
        for name, value in changes.items():
            setattr(updated, name, value)

        if updated.to_dict() == current:
            raise ValidationError(NOTHING_TO_SAVE)

        if not await self.save(updated):
            raise StoreError(USER_KEY, "could not persist profile")
        return updated

    @staticmethod
    def add_skill(profile: UserProfile, skill: str) -> UserProfile:
        """Return a copy with the skill appended; blanks and duplicates are ignored."""
        updated = UserProfile.from_dict(profile.to_dict())
        skill = (skill or "").strip()
        if skill and skill not in updated.skills:
            updated.skills.append(skill)
        return updated

    @staticmethod
    def remove_skill(profile: UserProfile, skill: str) -> UserProfile:
        updated = UserProfile.from_dict(profile.to_dict())
        updated.skills = [s for s in updated.skills if s != skill]
        return updated

    @staticmethod
    def add_portfolio_item(profile: UserProfile, uri: str) -> UserProfile:
        updated = UserProfile.from_dict(profile.to_dict())
        if uri:
            updated.portfolio.append(uri)
        return updated

    @staticmethod
    def remove_portfolio_item(profile: UserProfile, index: int) -> UserProfile:
        updated = UserProfile.from_dict(profile.to_dict())
        if 0 <= index < len(updated.portfolio):
            del updated.portfolio[index]
        return updated
