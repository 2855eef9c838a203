"""
Detect dictionary terms in Japanese text.

Three phases run in order, each a pure function from the terms found so far
to an extended tuple; a term_ja already found by an earlier phase is never
added again:

1. exact:   term_ja is a literal substring of the text
2. partial: an extracted candidate and term_ja contain one another
3. synonym: an extracted candidate is a notation variant of term_ja
"""

import logging
from typing import List, Optional, Sequence, Tuple

from menu_translation.dictionary.schemas import DictionaryEntry, FoundTerm
from menu_translation.dictionary.service import DictionaryService
from menu_translation.morphological.schemas import TermCandidate
from menu_translation.morphological.service import MorphologicalService
from menu_translation.synonyms.service import find_synonyms

logger = logging.getLogger(__name__)

SYNONYM_MAX_RESULTS = 5
SYNONYM_MIN_CONFIDENCE = 0.75

_ENTRY_FIELDS = set(DictionaryEntry.model_fields)

Found = Tuple[FoundTerm, ...]


def _seen(found: Found) -> set:
    return {term.term_ja for term in found}


def _found_term(entry: DictionaryEntry, match_type: str, **extra) -> FoundTerm:
    return FoundTerm(**entry.model_dump(include=_ENTRY_FIELDS), match_type=match_type, **extra)


def exact_phase(found: Found, text: str, dictionary: Sequence[DictionaryEntry]) -> Found:
    seen = _seen(found)
    additions = []
    for entry in dictionary:
        if entry.term_ja and entry.term_ja not in seen and entry.term_ja in text:
            additions.append(_found_term(entry, "exact"))
            seen.add(entry.term_ja)
    return found + tuple(additions)


def partial_phase(
    found: Found,
    candidates: Sequence[TermCandidate],
    dictionary: Sequence[DictionaryEntry],
) -> Found:
    seen = _seen(found)
    additions = []
    for candidate in candidates:
        for entry in dictionary:
            if not entry.term_ja or entry.term_ja in seen:
                continue
            if entry.term_ja in candidate.term or candidate.term in entry.term_ja:
                additions.append(_found_term(entry, "partial", candidate=candidate.term))
                seen.add(entry.term_ja)
    return found + tuple(additions)


def synonym_phase(
    found: Found,
    candidates: Sequence[TermCandidate],
    dictionary: Sequence[DictionaryEntry],
) -> Found:
    seen = _seen(found)
    additions = []
    for candidate in candidates:
        matches = find_synonyms(
            candidate.term,
            dictionary,
            max_results=SYNONYM_MAX_RESULTS,
            min_confidence=SYNONYM_MIN_CONFIDENCE,
        )
        for match in matches:
            if match.matched_term in seen:
                continue
            additions.append(_found_term(
                match,
                f"synonym_{match.match_type.value}",
                confidence=match.confidence,
                candidate=candidate.term,
            ))
            seen.add(match.matched_term)
    return found + tuple(additions)


def find_terms_in(
    text: str,
    dictionary: Sequence[DictionaryEntry],
    candidates: Sequence[TermCandidate],
) -> List[FoundTerm]:
    """Run all phases and order by dictionary priority (stable on phase order)."""
    found: Found = ()
    found = exact_phase(found, text, dictionary)
    found = partial_phase(found, candidates, dictionary)
    found = synonym_phase(found, candidates, dictionary)
    return sorted(found, key=lambda term: term.priority)


class TermFinder:
    """Find dictionary terms in a text using the current dictionary"""

    def __init__(
        self,
        dictionary_service: DictionaryService,
        morphological_service: Optional[MorphologicalService] = None,
    ):
        self.dictionary_service = dictionary_service
        self.morphological_service = morphological_service or MorphologicalService()

    async def find_terms(self, text: str) -> List[FoundTerm]:
        dictionary = await self.dictionary_service.entries()
        if not text or not dictionary:
            return []

        candidates = self.morphological_service.specialized_term_candidates(text)
        terms = find_terms_in(text, dictionary, candidates)
        logger.debug(
            f"Found {len(terms)} dictionary terms ({len(candidates)} candidates) in text of length {len(text)}"
        )
        return terms
