from functools import lru_cache
from menu_translation.config import settings
from menu_translation.dictionary.dependencies import get_dictionary_service
from menu_translation.dictionary.term_finder import TermFinder
from menu_translation.morphological.dependencies import get_morphological_service
from menu_translation.translation.cache import (
    CacheBackend,
    InMemoryCacheBackend,
    SQLAlchemyCacheBackend,
    TranslationCacheService,
)
from menu_translation.translation.providers import MTInvoker, build_provider
from menu_translation.translation.service import TranslationService


def build_cache_backend() -> CacheBackend:
    if settings.USE_DATABASE:
        from menu_translation.database import AsyncSessionLocal
        return SQLAlchemyCacheBackend(AsyncSessionLocal)
    return InMemoryCacheBackend()


@lru_cache()
def get_translation_service() -> TranslationService:
    """Process-wide TranslationService sharing the dictionary and tokenizer singletons"""
    return TranslationService(
        term_finder=TermFinder(get_dictionary_service(), get_morphological_service()),
        cache=TranslationCacheService(build_cache_backend()),
        invoker=MTInvoker(build_provider()),
    )
