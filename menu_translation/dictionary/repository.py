"""
Persistent sources of dictionary entries.
"""

from typing import Iterable, List, Protocol

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from menu_translation.dictionary.models import DictionaryTerm
from menu_translation.dictionary.schemas import DictionaryEntry
from menu_translation.exceptions import StorageError


class DictionaryRepository(Protocol):
    async def list_entries(self) -> List[DictionaryEntry]:
        """All entries ordered by priority ascending."""
        ...


class SQLAlchemyDictionaryRepository:
    """Reads the `dictionary` table"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_entries(self) -> List[DictionaryEntry]:
        try:
            async with self.session_factory() as db:
                result = await db.execute(
                    select(DictionaryTerm).order_by(DictionaryTerm.priority.asc(), DictionaryTerm.id.asc())
                )
                rows = result.scalars().all()
            return [DictionaryEntry.model_validate(row) for row in rows]
        except (SQLAlchemyError, OSError, ValidationError) as e:
            raise StorageError(f"Failed to load dictionary: {e}") from e


class InMemoryDictionaryRepository:
    """Fixed set of entries, for tests and database-less deployments"""

    def __init__(self, entries: Iterable[DictionaryEntry] = ()):
        self._entries = list(entries)
        self.calls = 0

    async def list_entries(self) -> List[DictionaryEntry]:
        self.calls += 1
        return sorted(self._entries, key=lambda e: e.priority)

    def replace(self, entries: Iterable[DictionaryEntry]) -> None:
        self._entries = list(entries)
