"""
Service layer for hybrid translation.

translate() flow:

    cache hit ------------------------------------------------> return (<method>_cached)
    cache miss -> find terms -> MT
        MT ok     -> post-process -> cache ----------------------> hybrid / deepl_only
        MT failed -> dictionary substitution
            something replaced -> cache -------------------------> dictionary_only
            nothing replaced ------------------------------------> original text + error
"""

import logging
import re
from typing import List, Optional, Sequence

from menu_translation.config import settings
from menu_translation.dictionary.schemas import FoundTerm
from menu_translation.dictionary.term_finder import TermFinder
from menu_translation.translation.cache import TranslationCacheService
from menu_translation.translation.constants import (
    METHOD_PASSTHROUGH, METHOD_HYBRID, METHOD_DEEPL_ONLY,
    METHOD_DICTIONARY_ONLY, METHOD_FALLBACK_ORIGINAL, CACHED_METHOD_SUFFIX,
    MT_ONLY_CACHE_PREFIX, MAX_PASSTHROUGH_LENGTH, TRANSLATION_FAILED,
)
from menu_translation.translation.exceptions import InvalidArgumentException
from menu_translation.translation.postprocess import post_process_translation, apply_dictionary_terms
from menu_translation.translation.providers import MTInvoker
from menu_translation.translation.schemas import (
    TranslationResult, MenuItemInput, BatchTranslateResponse,
)

logger = logging.getLogger(__name__)

DIGITS_AND_SPACES_RE = re.compile(r"[\d\s]+", re.ASCII)


class TranslationService:
    """Hybrid dictionary + MT translation of Japanese menu text"""

    def __init__(
        self,
        term_finder: TermFinder,
        cache: TranslationCacheService,
        invoker: MTInvoker,
        supported_languages: Optional[Sequence[str]] = None,
        max_correction_priority: Optional[int] = None,
    ):
        self.term_finder = term_finder
        self.cache = cache
        self.invoker = invoker
        self.supported_languages = tuple(supported_languages or settings.SUPPORTED_TARGET_LANGUAGES)
        self.max_correction_priority = (
            settings.FORCE_CORRECTION_MAX_PRIORITY if max_correction_priority is None else max_correction_priority
        )

    def _validate(self, text, target_lang) -> None:
        if not text or not isinstance(text, str):
            raise InvalidArgumentException("Text is required")
        self._validate_language(target_lang)

    def _validate_language(self, target_lang) -> None:
        if target_lang not in self.supported_languages:
            raise InvalidArgumentException(f"Unsupported target language: {target_lang}")

    @staticmethod
    def _is_passthrough(text: str) -> bool:
        return len(text) <= MAX_PASSTHROUGH_LENGTH or DIGITS_AND_SPACES_RE.fullmatch(text) is not None

    async def translate(self, text: str, target_lang: str, use_dictionary: bool = True) -> TranslationResult:
        self._validate(text, target_lang)

        if self._is_passthrough(text):
            return TranslationResult(translated_text=text, from_cache=False, method=METHOD_PASSTHROUGH)

        cache_text = text if use_dictionary else f"{MT_ONLY_CACHE_PREFIX}{text}"
        cached = await self.cache.lookup(cache_text, target_lang)
        if cached is not None:
            logger.debug(f"Cache hit for {target_lang} translation ({cached.method})")
            return TranslationResult(
                translated_text=cached.translated_text,
                from_cache=True,
                method=f"{cached.method}{CACHED_METHOD_SUFFIX}",
            )

        found_terms: List[FoundTerm] = await self.term_finder.find_terms(text) if use_dictionary else []

        mt_result = await self.invoker.invoke(text, target_lang)
        if mt_result.ok:
            if use_dictionary:
                translated = post_process_translation(
                    mt_result.text, found_terms, target_lang, self.max_correction_priority
                )
                method = METHOD_HYBRID
            else:
                translated = mt_result.text
                method = METHOD_DEEPL_ONLY
            await self.cache.put(cache_text, target_lang, translated, method)
            return TranslationResult(
                translated_text=translated,
                from_cache=False,
                method=method,
                found_terms_count=len(found_terms),
            )

        logger.warning(f"MT failed ({mt_result.error}); falling back to dictionary substitution")
        substituted = apply_dictionary_terms(text, found_terms, target_lang)
        if substituted is None:
            logger.warning("Dictionary fallback found no applicable terms; returning original text")
            return TranslationResult(
                translated_text=text,
                from_cache=False,
                method=METHOD_FALLBACK_ORIGINAL,
                found_terms_count=len(found_terms),
                error=TRANSLATION_FAILED,
            )

        await self.cache.put(cache_text, target_lang, substituted, METHOD_DICTIONARY_ONLY)
        return TranslationResult(
            translated_text=substituted,
            from_cache=False,
            method=METHOD_DICTIONARY_ONLY,
            found_terms_count=len(found_terms),
        )

    async def translate_menu_items(
        self,
        items: Sequence[MenuItemInput],
        target_lang: str,
    ) -> BatchTranslateResponse:
        """Translate name_ja / description_ja of each menu item; items without either are skipped."""
        self._validate_language(target_lang)

        results = []
        for item in items:
            translated = {}
            for field in ("name", "description"):
                source = getattr(item, f"{field}_ja")
                if source:
                    result = await self.translate(source, target_lang)
                    translated[f"{field}_{target_lang}"] = result.translated_text
            if translated:
                results.append({"id": item.id, **translated})

        logger.info(f"Batch translated {len(results)}/{len(items)} menu items to {target_lang}")
        return BatchTranslateResponse(count=len(results), items=results)
