"""
Profile screen.

Edits happen on a draft copy; ``save`` persists the draft and only then
replaces the displayed profile.
"""

from typing import Optional

from jobboard.common.error_handling import StoreError, ValidationError
from jobboard.common.types import UserProfile
from jobboard.services.preferences_service import PreferencesService
from jobboard.services.profile_service import ProfileService

from .base import ScreenController
from .screen_config import ScreenConfig

NOTICE_PROFILE_SAVED = "Profile Saved"
NOTICE_IMAGE_UPLOADED = "Image Uploaded"
SAVE_FAILED = "Could not save profile"
PROFILE_NOT_LOADED = "Profile is still loading"


class ProfileController(ScreenController):

    screen_name = "profile"

    def __init__(
        self,
        profiles: ProfileService,
        preferences: PreferencesService,
        config: Optional[ScreenConfig] = None,
    ):
        super().__init__(config)
        self.profiles = profiles
        self.preferences = preferences
        self.profile: Optional[UserProfile] = None
        self.draft: Optional[UserProfile] = None

    async def on_mount(self) -> None:
        self.loading = True
        profile = await self.profiles.load()
        cover = await self.preferences.get_cover_photo()
        photo = await self.preferences.get_profile_photo()
        self.loading = False

        def apply():
            self.profile = profile or UserProfile()
            if cover and not self.profile.cover_photo:
                self.profile.cover_photo = cover
            if photo and not self.profile.profile_photo:
                self.profile.profile_photo = photo
            self.draft = UserProfile.from_dict(self.profile.to_dict())

        self._apply_if_mounted(apply)

    def _has_draft(self) -> bool:
        if self.draft is None or self.profile is None:
            self.show_alert(PROFILE_NOT_LOADED)
            return False
        return True

    @property
    def is_editing(self) -> bool:
        return self.draft is not None and self.profile is not None and (
            self.draft.to_dict() != self.profile.to_dict()
        )

    def edit(self, **changes) -> None:
        """Stage changes on the draft."""
        if not self._has_draft():
            return
        for name, value in changes.items():
            if name not in ProfileService.EDITABLE_FIELDS:
                self.show_alert(f"Unknown profile field: {name}")
                return
            setattr(self.draft, name, value)

    def add_skill(self, skill: str) -> None:
        if not self._has_draft():
            return
        self.draft = ProfileService.add_skill(self.draft, skill)

    def remove_skill(self, skill: str) -> None:
        if not self._has_draft():
            return
        self.draft = ProfileService.remove_skill(self.draft, skill)

    def add_portfolio_item(self, uri: str) -> None:
        if not self._has_draft():
            return
        self.draft = ProfileService.add_portfolio_item(self.draft, uri)

    def remove_portfolio_item(self, index: int) -> None:
        if not self._has_draft():
            return
        self.draft = ProfileService.remove_portfolio_item(self.draft, index)

    async def set_cover_photo(self, uri: str) -> None:
        if await self.preferences.set_cover_photo(uri):
            self.edit(cover_photo=uri)
            self._apply_if_mounted(lambda: self.show_notice(NOTICE_IMAGE_UPLOADED))

    async def set_profile_photo(self, uri: str) -> None:
        if await self.preferences.set_profile_photo(uri):
            self.edit(profile_photo=uri)
            self._apply_if_mounted(lambda: self.show_notice(NOTICE_IMAGE_UPLOADED))

    async def save(self) -> None:
        if not self._has_draft():
            return
        changes = {
            name: getattr(self.draft, name)
            for name in ProfileService.EDITABLE_FIELDS
            if getattr(self.draft, name) != getattr(self.profile, name)
        }
        try:
            updated = await self.profiles.update(self.profile, **changes)
        except ValidationError as e:
            self.show_alert(str(e))
            return
        except StoreError as e:
            self.log.error(f"Error saving profile: {e}")
            self._apply_if_mounted(lambda: self.show_notice(SAVE_FAILED))
            return

        def apply():
            self.profile = updated
            self.draft = UserProfile.from_dict(updated.to_dict())
            self.show_notice(NOTICE_PROFILE_SAVED)

        self._apply_if_mounted(apply)

    def discard(self) -> None:
        if not self._has_draft():
            return
        self.draft = UserProfile.from_dict(self.profile.to_dict())
