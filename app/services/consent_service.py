"""
Consent Service

Tri-state cookie-consent flag gating the privacy banner.

The decision is stored under a versioned key
(``testprep_ai_cookie_consent_v1``). Once a client has accepted or
declined, the banner stays hidden until the store is cleared or the key's
version suffix is bumped, which resets every client.
"""

import logging
from typing import Optional

from app.core.config import settings
from app.schemas.consent import ConsentState
from app.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class ConsentManager:

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: Optional[str] = None,
    ):
        self.store = store
        self.storage_key = storage_key or settings.CONSENT_STORAGE_KEY

    async def read(self) -> ConsentState:
        value = await self.store.get(self.storage_key)
        if value is None:
            return ConsentState.UNSET
        if value == ConsentState.ACCEPTED.value:
            return ConsentState.ACCEPTED
        if value == ConsentState.DECLINED.value:
            return ConsentState.DECLINED

        logger.warning(f"Unrecognized consent value {value!r} under {self.storage_key}")
        return ConsentState.UNSET

    async def accept(self) -> ConsentState:
        await self.store.set(self.storage_key, ConsentState.ACCEPTED.value)
        return ConsentState.ACCEPTED

    async def decline(self) -> ConsentState:
        await self.store.set(self.storage_key, ConsentState.DECLINED.value)
        return ConsentState.DECLINED

    async def banner_visible(self) -> bool:
        return await self.read() == ConsentState.UNSET
