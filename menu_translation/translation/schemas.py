from pydantic import Field
from typing import Optional, List, Dict
from datetime import datetime
from menu_translation.models import CustomModel


class CacheEntry(CustomModel):
    """Stored translation; only hit_count and last_accessed_at change after creation"""
    key: str
    source_text: str
    source_lang: str = "ja"
    target_lang: str
    translated_text: str
    method: str
    hit_count: int = 0
    expires_at: datetime
    created_at: datetime
    last_accessed_at: datetime


class MTResult(CustomModel):
    """Outcome of one machine translation call"""
    ok: bool
    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "MTResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: str) -> "MTResult":
        return cls(ok=False, error=error)


class TranslationRequest(CustomModel):
    """Request schema for translation"""
    text: str = Field(..., max_length=5000, description="Japanese text to translate")
    target_lang: str = Field(..., alias="targetLang", description="Target language code (en, zh)")
    use_dictionary: bool = Field(True, alias="useDictionary", description="Apply dictionary-assisted correction")


class TranslationResult(CustomModel):
    """Response schema for translation"""
    translated_text: str = Field(..., alias="translatedText")
    from_cache: bool = Field(..., alias="fromCache")
    method: str = Field(..., description="passthrough, hybrid, deepl_only, dictionary_only, fallback_original or <method>_cached")
    found_terms_count: Optional[int] = Field(None, alias="foundTermsCount")
    error: Optional[str] = Field(None, description="Set when the original text is returned untranslated")


class MenuItemInput(CustomModel):
    id: str = Field(..., description="Menu item ID")
    name_ja: Optional[str] = None
    description_ja: Optional[str] = None


class BatchTranslateRequest(CustomModel):
    target_lang: str = Field(..., alias="targetLang", description="Target language code (en, zh)")
    items: List[MenuItemInput] = Field(..., max_length=500)


class BatchTranslateResponse(CustomModel):
    count: int = Field(..., description="Number of items with at least one translated field")
    items: List[Dict[str, str]] = Field(..., description="id plus name_<lang> / description_<lang>")
