"""
Service layer for the terminology dictionary
"""

import logging
from typing import List, Optional

from menu_translation.config import settings
from menu_translation.dictionary.cache import TTLValueCache
from menu_translation.dictionary.repository import DictionaryRepository
from menu_translation.dictionary.schemas import DictionaryEntry

logger = logging.getLogger(__name__)


class DictionaryService:
    """Priority-ordered dictionary entries behind a read-through TTL cache"""

    def __init__(
        self,
        repository: DictionaryRepository,
        cache: Optional[TTLValueCache[List[DictionaryEntry]]] = None,
    ):
        self.repository = repository
        self.cache = cache or TTLValueCache(settings.DICTIONARY_CACHE_TTL_SECONDS)

    async def entries(self) -> List[DictionaryEntry]:
        """
        All entries sorted by priority ascending.

        Concurrent refreshes after expiry may both hit the repository; the
        data is read-only so the last write wins harmlessly.
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        try:
            entries = await self.repository.list_entries()
        except Exception as e:
            stale = self.cache.peek()
            logger.error(f"Dictionary load error: {e}", exc_info=True)
            return stale if stale is not None else []

        entries = sorted(entries, key=lambda e: e.priority)
        self.cache.set(entries)
        logger.debug(f"Dictionary cache refreshed with {len(entries)} entries")
        return entries

    def invalidate(self) -> None:
        self.cache.invalidate()
