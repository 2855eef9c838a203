"""
Japanese tokenizer backed by MeCab (via fugashi) and the UniDic dictionary.

Tokenization never raises: analyzer failures are logged and produce an empty
token list, so downstream term extraction simply finds no candidates.
"""

import logging
import re
from typing import Any, Callable, Iterable, List, Optional

import fugashi

from menu_translation.morphological.constants import PartOfSpeech, UNIDIC_POS_MAP
from menu_translation.morphological.schemas import Token

logger = logging.getLogger(__name__)

# UniDic lemmas of loanwords carry a romanised gloss: "ラーメン-ramen"
_LEMMA_GLOSS_RE = re.compile(r"-[\x00-\x7f]+$")

Analyzer = Callable[[str], Iterable[Any]]


def _feature_value(feature: Any, name: str) -> Optional[str]:
    value = getattr(feature, name, None)
    if not value or value == "*":
        return None
    return value


class Tokenizer:
    """Turn Japanese text into part-of-speech tagged tokens."""

    def __init__(self, analyzer: Optional[Analyzer] = None):
        # The MeCab tagger is expensive to build; create it on first use
        self._analyzer = analyzer

    def _get_analyzer(self) -> Analyzer:
        if self._analyzer is None:
            self._analyzer = fugashi.Tagger()
            logger.debug("MeCab tagger initialized")
        return self._analyzer

    def tokenize(self, text: Optional[str]) -> List[Token]:
        if not text or not isinstance(text, str):
            return []

        try:
            words = self._get_analyzer()(text)
            return [self._to_token(word) for word in words]
        except Exception as e:
            logger.error(f"Tokenization error: {e}", exc_info=True)
            return []

    @staticmethod
    def _to_token(word: Any) -> Token:
        feature = word.feature
        pos1 = _feature_value(feature, "pos1")
        lemma = _feature_value(feature, "lemma")
        if lemma:
            lemma = _LEMMA_GLOSS_RE.sub("", lemma) or None
        reading = _feature_value(feature, "kana") or _feature_value(feature, "pron")

        return Token(
            surface_form=word.surface,
            base_form=lemma,
            part_of_speech=UNIDIC_POS_MAP.get(pos1, PartOfSpeech.OTHER),
            pos_detail=_feature_value(feature, "pos2"),
            reading=reading,
        )
