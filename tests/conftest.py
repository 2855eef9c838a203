import os
from collections import namedtuple
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

# Keep the app away from Postgres and real MT credentials
os.environ.setdefault("USE_DATABASE", "false")
os.environ.setdefault("DEEPL_API_KEY", "")

from menu_translation.dictionary.cache import TTLValueCache
from menu_translation.dictionary.repository import InMemoryDictionaryRepository
from menu_translation.dictionary.schemas import DictionaryEntry
from menu_translation.dictionary.service import DictionaryService
from menu_translation.dictionary.term_finder import TermFinder
from menu_translation.morphological.service import MorphologicalService
from menu_translation.morphological.tokenizer import Tokenizer
from menu_translation.translation.cache import InMemoryCacheBackend, TranslationCacheService
from menu_translation.translation.exceptions import ProviderError
from menu_translation.translation.providers import MTInvoker
from menu_translation.translation.service import TranslationService

# Subset of the UniDic feature fields the tokenizer reads
Feature = namedtuple("Feature", "pos1 pos2 lemma kana pron")

# (surface, pos1, pos2, lemma, kana)
WordSpec = Tuple[str, str, str, Optional[str], Optional[str]]


class FakeWord:
    def __init__(self, surface: str, pos1: str, pos2: str = "*", lemma: Optional[str] = None, kana: Optional[str] = None):
        self.surface = surface
        self.feature = Feature(pos1, pos2, lemma or surface, kana or "*", "*")


class FakeAnalyzer:
    """Stands in for fugashi.Tagger with fixed segmentations; unknown texts yield no words"""

    def __init__(self, segmentations: Optional[Dict[str, Sequence[WordSpec]]] = None):
        self.segmentations = dict(segmentations or {})
        self.calls: List[str] = []

    def __call__(self, text: str) -> List[FakeWord]:
        self.calls.append(text)
        return [FakeWord(*spec) for spec in self.segmentations.get(text, ())]


class StubProvider:
    """Returns canned translations, or raises ProviderError when `error` is set"""

    def __init__(self, translations: Optional[Dict[str, str]] = None, default: Optional[str] = None, error: Optional[str] = None):
        self.translations = dict(translations or {})
        self.default = default
        self.error = error
        self.calls: List[Tuple[str, str, str]] = []

    def translate(self, text: str, source_lang: str = "ja", target_lang: str = "en") -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.error:
            raise ProviderError(self.error)
        if text in self.translations:
            return self.translations[text]
        return self.default if self.default is not None else f"<{target_lang}>{text}"


# Segmentations shared by morphology and pipeline tests
SEGMENTATIONS = {
    "唐揚げ定食をください": [
        ("唐揚げ", "名詞", "普通名詞", "唐揚げ", "カラアゲ"),
        ("定食", "名詞", "普通名詞", "定食", "テイショク"),
        ("を", "助詞", "格助詞", "を", "ヲ"),
        ("ください", "動詞", "非自立可能", "下さる", "クダサイ"),
    ],
    "ラーメンと寿司": [
        ("ラーメン", "名詞", "普通名詞", "ラーメン-ramen", "ラーメン"),
        ("と", "助詞", "格助詞", "と", "ト"),
        ("寿司", "名詞", "普通名詞", "寿司", "スシ"),
    ],
    "らーめんを食べた": [
        ("らーめん", "名詞", "普通名詞", "らーめん", "ラーメン"),
        ("を", "助詞", "格助詞", "を", "ヲ"),
        ("食べ", "動詞", "一般", "食べる", "タベ"),
        ("た", "助動詞", "*", "た", "タ"),
    ],
    "新宿の天ぷらは美味しい": [
        ("新宿", "名詞", "固有名詞", "新宿", "シンジュク"),
        ("の", "助詞", "格助詞", "の", "ノ"),
        ("天ぷら", "名詞", "普通名詞", "天ぷら", "テンプラ"),
        ("は", "助詞", "係助詞", "は", "ハ"),
        ("美味しい", "形容詞", "一般", "美味しい", "オイシイ"),
    ],
}


def make_entry(term_ja: str, term_en: Optional[str] = None, priority: int = 5, **fields) -> DictionaryEntry:
    fields.setdefault("id", f"entry-{term_ja}")
    return DictionaryEntry(term_ja=term_ja, term_en=term_en, priority=priority, **fields)


@pytest.fixture
def analyzer():
    return FakeAnalyzer(SEGMENTATIONS)


@pytest.fixture
def morphological_service(analyzer):
    return MorphologicalService(Tokenizer(analyzer))


@pytest.fixture
def dictionary_entries():
    return [
        make_entry("唐揚げ", "karaage", priority=1, term_zh="日式炸鸡", category="dish"),
        make_entry("ラーメン", "ramen", priority=1, term_zh="拉面", category="dish"),
        make_entry("寿司", "sushi", priority=2, term_zh="寿司", category="dish"),
        make_entry("天ぷら", "tempura", priority=2, category="dish"),
        make_entry("定食", "set meal", priority=3, category="meal_type"),
    ]


@pytest.fixture
def dictionary_repository(dictionary_entries):
    return InMemoryDictionaryRepository(dictionary_entries)


@pytest.fixture
def dictionary_service(dictionary_repository):
    return DictionaryService(dictionary_repository, TTLValueCache(300))


@pytest.fixture
def term_finder(dictionary_service, morphological_service):
    return TermFinder(dictionary_service, morphological_service)


@pytest.fixture
def cache_backend():
    return InMemoryCacheBackend()


@pytest.fixture
def translation_cache(cache_backend):
    return TranslationCacheService(cache_backend, ttl_days=30)


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def make_translation_service(term_finder, translation_cache):
    def factory(provider: StubProvider, **kwargs) -> TranslationService:
        return TranslationService(
            term_finder=term_finder,
            cache=translation_cache,
            invoker=MTInvoker(provider),
            supported_languages=["en", "zh"],
            **kwargs,
        )
    return factory


@pytest.fixture
async def sqlite_session_factory():
    """Async session factory on a private in-memory SQLite database with all tables created"""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from menu_translation.database import Base
    from menu_translation.models import register_orm_models

    register_orm_models()
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def empty_sqlite_session_factory():
    """Session factory on a database with no tables, so every query fails"""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()
