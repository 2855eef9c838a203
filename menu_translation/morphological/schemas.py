from pydantic import Field
from typing import Optional, List
from menu_translation.models import CustomModel
from menu_translation.morphological.constants import PartOfSpeech, CandidateType


class Token(CustomModel):
    """One morpheme produced by the tokenizer"""
    surface_form: str = Field(..., description="Surface form as written in the text")
    base_form: Optional[str] = Field(None, description="Dictionary (uninflected) form")
    part_of_speech: PartOfSpeech = Field(PartOfSpeech.OTHER, description="Coarse part of speech")
    pos_detail: Optional[str] = Field(None, description="Detailed part-of-speech tag, e.g. 固有名詞")
    reading: Optional[str] = Field(None, description="Katakana reading")


class CompoundNoun(CustomModel):
    """A maximal run of two or more consecutive noun tokens"""
    surface: str
    tokens: List[str] = Field(..., description="Surface forms of the run")
    start: int = Field(..., description="Index of the first token")
    end: int = Field(..., description="Index of the last token (inclusive)")


class TermCandidate(CustomModel):
    """Candidate specialized term extracted from a text"""
    term: str
    type: CandidateType
    priority: int = Field(..., description="Lower value means higher priority")
    tokens: List[str] = Field(default_factory=list, description="Source token surfaces")
    detail: Optional[str] = Field(None, description="Detailed part-of-speech tag of a single noun")


class TextStats(CustomModel):
    total_tokens: int = 0
    nouns: int = 0
    verbs: int = 0
    adjectives: int = 0
    particles: int = 0
    unique_word_count: int = 0


class AnalyzeRequest(CustomModel):
    text: str = Field(..., min_length=1, max_length=5000, description="Japanese text to analyze")


class CandidatesResponse(CustomModel):
    text: str
    candidates: List[TermCandidate]


class TextStatsResponse(CustomModel):
    text: str
    stats: TextStats
    lemmatized: str = Field(..., description="Text rebuilt from base forms")
