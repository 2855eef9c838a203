"""
Part-of-speech and candidate-type constants for Japanese morphological analysis.
"""

from enum import Enum


class PartOfSpeech(str, Enum):
    """Coarse part of speech used by the term extractor"""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    PARTICLE = "particle"
    OTHER = "other"


class CandidateType(str, Enum):
    """Kind of specialized-term candidate, in priority order"""
    COMPOUND_NOUN = "compound_noun"
    KATAKANA_NOUN = "katakana_noun"
    PROPER_NOUN = "proper_noun"
    GENERAL_NOUN = "general_noun"


# UniDic pos1 -> coarse part of speech
UNIDIC_POS_MAP = {
    "名詞": PartOfSpeech.NOUN,
    "動詞": PartOfSpeech.VERB,
    "形容詞": PartOfSpeech.ADJECTIVE,
    "助詞": PartOfSpeech.PARTICLE,
}

PROPER_NOUN_DETAIL = "固有名詞"

CANDIDATE_PRIORITY = {
    CandidateType.COMPOUND_NOUN: 1,
    CandidateType.KATAKANA_NOUN: 2,
    CandidateType.PROPER_NOUN: 3,
    CandidateType.GENERAL_NOUN: 4,
}

# General nouns shorter than this are too ambiguous to be candidates
MIN_GENERAL_NOUN_LENGTH = 3
