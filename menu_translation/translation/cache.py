"""
Content-addressed translation cache.

Entries are keyed by sha256(source_text + "_" + target_lang) and expire a
fixed number of days after they are written. Cache failures are logged and
behave like a miss: they never fail a translation.
"""

import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Protocol

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from menu_translation.config import settings
from menu_translation.exceptions import StorageError
from menu_translation.translation.constants import SOURCE_LANGUAGE
from menu_translation.translation.models import TranslationCache
from menu_translation.translation.schemas import CacheEntry

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_cache_key(source_text: str, target_lang: str) -> str:
    return hashlib.sha256(f"{source_text}_{target_lang}".encode("utf-8")).hexdigest()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CacheBackend(Protocol):
    async def get(self, key: str) -> Optional[CacheEntry]:
        ...

    async def put(self, key: str, entry: CacheEntry) -> None:
        ...

    async def touch(self, key: str) -> None:
        """Increment hit_count and refresh last_accessed_at."""
        ...


class InMemoryCacheBackend:
    """Process-local backend for tests and database-less deployments"""

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self.entries: Dict[str, CacheEntry] = {}
        self._clock = clock

    async def get(self, key: str) -> Optional[CacheEntry]:
        return self.entries.get(key)

    async def put(self, key: str, entry: CacheEntry) -> None:
        self.entries[key] = entry

    async def touch(self, key: str) -> None:
        entry = self.entries.get(key)
        if entry is not None:
            self.entries[key] = entry.model_copy(update={
                "hit_count": entry.hit_count + 1,
                "last_accessed_at": self._clock(),
            })


class SQLAlchemyCacheBackend:
    """Backend on the `translation_cache` table"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], clock: Callable[[], datetime] = utcnow):
        self.session_factory = session_factory
        self._clock = clock

    async def get(self, key: str) -> Optional[CacheEntry]:
        try:
            async with self.session_factory() as db:
                row = await db.get(TranslationCache, key)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Cache read failed: {e}") from e
        if row is None:
            return None
        return CacheEntry.model_validate(row)

    async def put(self, key: str, entry: CacheEntry) -> None:
        try:
            async with self.session_factory() as db:
                await db.merge(TranslationCache(**entry.model_dump()))
                await db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Cache write failed: {e}") from e

    async def touch(self, key: str) -> None:
        try:
            async with self.session_factory() as db:
                await db.execute(
                    update(TranslationCache)
                    .where(TranslationCache.key == key)
                    .values(
                        hit_count=TranslationCache.hit_count + 1,
                        last_accessed_at=self._clock(),
                    )
                )
                await db.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Cache touch failed: {e}") from e


class TranslationCacheService:
    def __init__(
        self,
        backend: CacheBackend,
        ttl_days: Optional[int] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.backend = backend
        self.ttl = timedelta(days=settings.TRANSLATION_CACHE_TTL_DAYS if ttl_days is None else ttl_days)
        self._clock = clock

    async def lookup(self, source_text: str, target_lang: str) -> Optional[CacheEntry]:
        """Unexpired entry for (source_text, target_lang), counting the hit; None on miss or error."""
        key = generate_cache_key(source_text, target_lang)
        try:
            entry = await self.backend.get(key)
            if entry is None or _as_utc(entry.expires_at) <= self._clock():
                return None
            await self.backend.touch(key)
            return entry
        except Exception as e:
            logger.error(f"Cache check error: {e}", exc_info=True)
            return None

    async def get(self, source_text: str, target_lang: str) -> Optional[str]:
        entry = await self.lookup(source_text, target_lang)
        return entry.translated_text if entry else None

    async def put(self, source_text: str, target_lang: str, translated_text: str, method: str) -> None:
        key = generate_cache_key(source_text, target_lang)
        now = self._clock()
        entry = CacheEntry(
            key=key,
            source_text=source_text,
            source_lang=SOURCE_LANGUAGE,
            target_lang=target_lang,
            translated_text=translated_text,
            method=method,
            hit_count=0,
            expires_at=now + self.ttl,
            created_at=now,
            last_accessed_at=now,
        )
        try:
            await self.backend.put(key, entry)
        except Exception as e:
            logger.error(f"Cache save error: {e}", exc_info=True)
