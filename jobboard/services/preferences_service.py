"""
Preferences Service

Small client flags kept in the key-value store: onboarding completion,
dark mode and the cover/profile photo URIs. Unreadable values fall back
to defaults.
"""

import logging
from typing import Any, Optional

from jobboard.common.error_handling import StoreError
from jobboard.common.repositories.kv_store import (
    COVER_PHOTO_KEY,
    DARK_MODE_KEY,
    ONBOARDING_KEY,
    PROFILE_PHOTO_KEY,
    KeyValueStoreInterface,
)

logger = logging.getLogger(__name__)


def _as_bool(value: Any) -> bool:
    # Older clients stored flags as the strings "true"/"false"
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


class PreferencesService:

    def __init__(self, store: KeyValueStoreInterface):
        self.store = store

    async def _read(self, key: str, default: Any = None) -> Any:
        try:
            value = await self.store.get_item(key)
        except StoreError as e:
            logger.warning(f"Error reading {key}: {e}")
            return default
        return default if value is None else value

    async def _write(self, key: str, value: Any) -> bool:
        try:
            return await self.store.set_item(key, value)
        except StoreError as e:
            logger.error(f"Error writing {key}: {e}")
            return False

    async def is_onboarding_completed(self) -> bool:
        return _as_bool(await self._read(ONBOARDING_KEY, False))

    async def complete_onboarding(self) -> bool:
        return await self._write(ONBOARDING_KEY, True)

    async def is_dark_mode(self) -> bool:
        return _as_bool(await self._read(DARK_MODE_KEY, False))

    async def set_dark_mode(self, enabled: bool) -> bool:
        return await self._write(DARK_MODE_KEY, bool(enabled))

    async def get_cover_photo(self) -> Optional[str]:
        return await self._read(COVER_PHOTO_KEY)

    async def set_cover_photo(self, uri: str) -> bool:
        return await self._write(COVER_PHOTO_KEY, uri)

    async def get_profile_photo(self) -> Optional[str]:
        return await self._read(PROFILE_PHOTO_KEY)

    async def set_profile_photo(self, uri: str) -> bool:
        return await self._write(PROFILE_PHOTO_KEY, uri)

    async def clear(self) -> bool:
        """Forget everything stored for this client (logout)."""
        try:
            return await self.store.clear()
        except StoreError as e:
            logger.error(f"Error clearing store: {e}")
            return False
