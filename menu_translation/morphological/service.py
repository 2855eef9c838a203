"""
Service layer for morphological analysis: candidate term extraction,
text statistics and lemmatization
"""

import logging
import re
from typing import List, Optional, Sequence

from menu_translation.morphological.constants import (
    CandidateType, PartOfSpeech, CANDIDATE_PRIORITY,
    PROPER_NOUN_DETAIL, MIN_GENERAL_NOUN_LENGTH,
)
from menu_translation.morphological.schemas import Token, CompoundNoun, TermCandidate, TextStats
from menu_translation.morphological.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

KATAKANA_RE = re.compile(r"^[ァ-ヶー]+$")

_KEYWORD_POS = {PartOfSpeech.NOUN, PartOfSpeech.VERB, PartOfSpeech.ADJECTIVE}


def nouns(tokens: Sequence[Token]) -> List[Token]:
    return [t for t in tokens if t.part_of_speech == PartOfSpeech.NOUN]


def keywords(tokens: Sequence[Token]) -> List[Token]:
    """Nouns, verbs and adjectives"""
    return [t for t in tokens if t.part_of_speech in _KEYWORD_POS]


def compound_nouns(tokens: Sequence[Token]) -> List[CompoundNoun]:
    """
    Collect maximal runs of two or more consecutive noun tokens.

    Single nouns are not compounds. A run that reaches the last token is
    still emitted.
    """
    compounds: List[CompoundNoun] = []
    run_start: Optional[int] = None

    def close_run(end: int) -> None:
        if run_start is not None and end - run_start >= 1:
            run = tokens[run_start:end + 1]
            compounds.append(CompoundNoun(
                surface="".join(t.surface_form for t in run),
                tokens=[t.surface_form for t in run],
                start=run_start,
                end=end,
            ))

    for index, token in enumerate(tokens):
        if token.part_of_speech == PartOfSpeech.NOUN:
            if run_start is None:
                run_start = index
        else:
            close_run(index - 1)
            run_start = None

    close_run(len(tokens) - 1)
    return compounds


def candidates_from_tokens(tokens: Sequence[Token]) -> List[TermCandidate]:
    """
    Rank specialized-term candidates:
    compound nouns (1) > katakana nouns (2) > proper nouns (3) > general nouns of 3+ chars (4).
    """
    candidates: List[TermCandidate] = []
    in_compound = set()

    for compound in compound_nouns(tokens):
        candidates.append(TermCandidate(
            term=compound.surface,
            type=CandidateType.COMPOUND_NOUN,
            priority=CANDIDATE_PRIORITY[CandidateType.COMPOUND_NOUN],
            tokens=compound.tokens,
        ))
        in_compound.update(range(compound.start, compound.end + 1))

    for index, token in enumerate(tokens):
        if token.part_of_speech != PartOfSpeech.NOUN or index in in_compound:
            continue

        surface = token.surface_form
        if KATAKANA_RE.match(surface):
            candidate_type = CandidateType.KATAKANA_NOUN
        elif token.pos_detail == PROPER_NOUN_DETAIL:
            candidate_type = CandidateType.PROPER_NOUN
        elif len(surface) >= MIN_GENERAL_NOUN_LENGTH:
            candidate_type = CandidateType.GENERAL_NOUN
        else:
            continue

        candidates.append(TermCandidate(
            term=surface,
            type=candidate_type,
            priority=CANDIDATE_PRIORITY[candidate_type],
            tokens=[surface],
            detail=token.pos_detail,
        ))

    # sorted() is stable, so equal priorities keep text order
    return sorted(candidates, key=lambda c: c.priority)


class MorphologicalService:
    """Text-level operations built on the tokenizer"""

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()

    def tokenize(self, text: Optional[str]) -> List[Token]:
        return self.tokenizer.tokenize(text)

    def specialized_term_candidates(self, text: Optional[str]) -> List[TermCandidate]:
        tokens = self.tokenize(text)
        candidates = candidates_from_tokens(tokens)
        logger.debug(f"Extracted {len(candidates)} term candidates from {len(tokens)} tokens")
        return candidates

    def text_stats(self, text: Optional[str]) -> TextStats:
        tokens = self.tokenize(text)
        stats = TextStats(total_tokens=len(tokens))
        unique_words = set()

        for token in tokens:
            pos = token.part_of_speech
            if pos == PartOfSpeech.NOUN:
                stats.nouns += 1
            elif pos == PartOfSpeech.VERB:
                stats.verbs += 1
            elif pos == PartOfSpeech.ADJECTIVE:
                stats.adjectives += 1
            elif pos == PartOfSpeech.PARTICLE:
                stats.particles += 1
            unique_words.add(token.base_form or token.surface_form)

        stats.unique_word_count = len(unique_words)
        return stats

    def lemmatize(self, text: Optional[str]) -> str:
        """Rebuild the text from each token's base form (lossy)."""
        return "".join(t.base_form or t.surface_form for t in self.tokenize(text))
