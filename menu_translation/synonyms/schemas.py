from enum import Enum
from pydantic import Field
from typing import List
from menu_translation.models import CustomModel
from menu_translation.dictionary.schemas import DictionaryEntry


class MatchType(str, Enum):
    EXACT = "exact"
    KANA_VARIANT = "kana_variant"
    PARTIAL = "partial"
    SIMILAR = "similar"
    NONE = "none"


class SynonymMatchResult(CustomModel):
    is_synonym: bool
    confidence: float = Field(..., ge=0.0, le=1.0)
    match_type: MatchType


class SynonymMatch(DictionaryEntry):
    """Dictionary entry matched as a synonym of a search term"""
    match_type: MatchType
    confidence: float
    original_term: str
    matched_term: str


class CandidateInfo(CustomModel):
    term: str
    type: str
    priority: int


class TextSynonymMatch(SynonymMatch):
    candidate_info: CandidateInfo


class SynonymGroup(CustomModel):
    canonical: str = Field(..., description="First term of the group")
    variants: List[str]
    count: int


class CompareRequest(CustomModel):
    term1: str = Field(..., max_length=200)
    term2: str = Field(..., max_length=200)
    strict_mode: bool = False
    allow_partial_match: bool = True
    min_similarity: float = Field(0.7, ge=0.0, le=1.0)


class GroupsRequest(CustomModel):
    terms: List[str] = Field(..., max_length=500)
    min_confidence: float = Field(0.8, ge=0.0, le=1.0)


class GroupsResponse(CustomModel):
    groups: List[SynonymGroup]
    total: int


class SearchRequest(CustomModel):
    term: str = Field(..., min_length=1, max_length=200)
    max_results: int = Field(10, ge=1, le=50)
    min_confidence: float = Field(0.7, ge=0.0, le=1.0)


class SearchResponse(CustomModel):
    term: str
    matches: List[SynonymMatch]
    total: int


class DetectRequest(CustomModel):
    text: str = Field(..., min_length=1, max_length=5000, description="Japanese text to scan")
    max_results: int = Field(10, ge=1, le=50, description="Maximum matches per candidate term")
    min_confidence: float = Field(0.7, ge=0.0, le=1.0)


class DetectResponse(CustomModel):
    text: str
    matches: List[TextSynonymMatch]
    total: int
