from pydantic import Field
from typing import Optional, List
from menu_translation.models import CustomModel


class DictionaryEntry(CustomModel):
    """Curated Japanese culinary term with its canonical translations"""
    id: str = Field(..., description="Entry ID")
    term_ja: str = Field(..., description="Japanese term")
    reading: Optional[str] = Field(None, description="Reading in kana")
    term_en: Optional[str] = Field(None, description="Canonical English translation")
    term_zh: Optional[str] = Field(None, description="Canonical Chinese translation")
    category: Optional[str] = Field(None, description="Category, e.g. dish, cooking_method, allergen")
    subcategory: Optional[str] = None
    priority: int = Field(..., description="Lower value means higher correction precedence")
    type: Optional[str] = None
    notes: Optional[str] = None

    def translation_for(self, target_lang: str) -> Optional[str]:
        """Canonical translation for "en" or "zh"; None when missing."""
        if target_lang == "en":
            return self.term_en
        if target_lang == "zh":
            return self.term_zh
        return None


class FoundTerm(DictionaryEntry):
    """Dictionary entry detected in a text, with how it was detected"""
    match_type: str = Field(..., description="exact, partial or synonym_<type>")
    confidence: Optional[float] = Field(None, description="Similarity confidence for synonym matches")
    candidate: Optional[str] = Field(None, description="Extracted candidate that led to the match")


class DictionaryEntriesResponse(CustomModel):
    entries: List[DictionaryEntry]
    total: int


class FindTermsRequest(CustomModel):
    text: str = Field(..., min_length=1, max_length=5000, description="Japanese text to scan")


class FindTermsResponse(CustomModel):
    text: str
    terms: List[FoundTerm]
    total: int
