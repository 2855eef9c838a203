from functools import lru_cache
from fastapi import Depends
from menu_translation.config import settings
from menu_translation.dictionary.repository import (
    DictionaryRepository,
    InMemoryDictionaryRepository,
    SQLAlchemyDictionaryRepository,
)
from menu_translation.dictionary.seed import load_seed_entries
from menu_translation.dictionary.service import DictionaryService
from menu_translation.dictionary.term_finder import TermFinder
from menu_translation.morphological.dependencies import get_morphological_service
from menu_translation.morphological.service import MorphologicalService


def build_dictionary_repository() -> DictionaryRepository:
    if settings.USE_DATABASE:
        from menu_translation.database import AsyncSessionLocal
        return SQLAlchemyDictionaryRepository(AsyncSessionLocal)
    if settings.DICTIONARY_SEED_FILE:
        return InMemoryDictionaryRepository(load_seed_entries(settings.DICTIONARY_SEED_FILE))
    return InMemoryDictionaryRepository()


@lru_cache()
def get_dictionary_service() -> DictionaryService:
    """
    Process-wide DictionaryService.

    The TTL cache lives on this instance, so all requests share one
    dictionary snapshot for DICTIONARY_CACHE_TTL_SECONDS.
    """
    return DictionaryService(build_dictionary_repository())


def get_term_finder(
    dictionary_service: DictionaryService = Depends(get_dictionary_service),
    morphological_service: MorphologicalService = Depends(get_morphological_service),
) -> TermFinder:
    return TermFinder(dictionary_service, morphological_service)
