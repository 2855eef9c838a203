"""
Synonym detection for Japanese menu terms.

Matching is layered from cheapest and most certain to fuzziest:
canonical equality, kana-script equality, containment, then Levenshtein
similarity.
"""

import logging
from typing import List, Optional, Sequence

from menu_translation.dictionary.schemas import DictionaryEntry
from menu_translation.morphological.service import MorphologicalService
from menu_translation.synonyms.normalizer import canonicalize_script, katakana_to_hiragana
from menu_translation.synonyms.schemas import (
    MatchType, SynonymMatchResult, SynonymMatch,
    TextSynonymMatch, CandidateInfo, SynonymGroup,
)

logger = logging.getLogger(__name__)

KANA_VARIANT_CONFIDENCE = 0.95
DEFAULT_MIN_SIMILARITY = 0.7
# Containment floor used only while min_similarity is left at its default
DEFAULT_MIN_PARTIAL_SIMILARITY = 0.35

_ENTRY_FIELDS = set(DictionaryEntry.model_fields)


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance (insert, delete and substitute all cost 1)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(
                    previous[j - 1] + 1,  # substitute
                    current[j - 1] + 1,   # insert
                    previous[j] + 1,      # delete
                ))
        previous = current
    return previous[len(b)]


def similarity(a: str, b: str) -> float:
    """1 - distance / longer length; 1.0 for two empty strings."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(a, b)) / longest


def are_synonyms(
    term1: Optional[str],
    term2: Optional[str],
    strict_mode: bool = False,
    allow_partial_match: bool = True,
    min_similarity: float = DEFAULT_MIN_SIMILARITY,
    min_partial_similarity: Optional[float] = None,
) -> SynonymMatchResult:
    """
    Decide whether two terms are notation variants of each other.

    strict_mode only accepts equality after canonicalization. Containment
    ("唐揚げ定食" / "唐揚げ") is accepted as a partial match down to
    min_partial_similarity. When that is None the floor is
    DEFAULT_MIN_PARTIAL_SIMILARITY for the default min_similarity, and
    min_similarity itself once a caller raises or lowers it.
    """
    if not term1 or not term2:
        return SynonymMatchResult(is_synonym=False, confidence=0.0, match_type=MatchType.NONE)

    norm1 = canonicalize_script(term1)
    norm2 = canonicalize_script(term2)

    if norm1 == norm2:
        return SynonymMatchResult(is_synonym=True, confidence=1.0, match_type=MatchType.EXACT)

    if strict_mode:
        return SynonymMatchResult(is_synonym=False, confidence=0.0, match_type=MatchType.NONE)

    if katakana_to_hiragana(norm1) == katakana_to_hiragana(norm2):
        return SynonymMatchResult(
            is_synonym=True,
            confidence=KANA_VARIANT_CONFIDENCE,
            match_type=MatchType.KANA_VARIANT,
        )

    score = similarity(norm1, norm2)

    if allow_partial_match and (norm2 in norm1 or norm1 in norm2):
        if min_partial_similarity is None:
            min_partial_similarity = (
                DEFAULT_MIN_PARTIAL_SIMILARITY if min_similarity == DEFAULT_MIN_SIMILARITY else min_similarity
            )
        if score >= min_partial_similarity:
            return SynonymMatchResult(is_synonym=True, confidence=score, match_type=MatchType.PARTIAL)

    if score >= min_similarity:
        return SynonymMatchResult(is_synonym=True, confidence=score, match_type=MatchType.SIMILAR)

    return SynonymMatchResult(is_synonym=False, confidence=score, match_type=MatchType.NONE)


def find_synonyms(
    term: str,
    dictionary: Sequence[DictionaryEntry],
    max_results: int = 10,
    min_confidence: float = 0.7,
    **match_options,
) -> List[SynonymMatch]:
    """Dictionary entries whose term_ja is a synonym of term, best first."""
    results: List[SynonymMatch] = []

    for entry in dictionary:
        if not entry.term_ja:
            continue

        result = are_synonyms(term, entry.term_ja, **match_options)
        if result.is_synonym and result.confidence >= min_confidence:
            results.append(SynonymMatch(
                **entry.model_dump(include=_ENTRY_FIELDS),
                match_type=result.match_type,
                confidence=result.confidence,
                original_term=term,
                matched_term=entry.term_ja,
            ))

    results.sort(key=lambda m: m.confidence, reverse=True)
    return results[:max_results]


def synonym_groups(
    terms: Sequence[str],
    min_confidence: float = 0.8,
    **match_options,
) -> List[SynonymGroup]:
    """
    Greedy single-pass clustering in input order.

    Each unprocessed term opens a group and absorbs every later unprocessed
    term it is a synonym of. Terms are tracked by value, so a repeated term
    appears once. The result depends on input order and is not a transitive
    closure.
    """
    match_options["min_similarity"] = min_confidence
    groups: List[SynonymGroup] = []
    processed = set()

    for term in terms:
        if term in processed:
            continue
        processed.add(term)
        variants = [term]

        for other in terms:
            if other in processed:
                continue
            if are_synonyms(term, other, **match_options).is_synonym:
                variants.append(other)
                processed.add(other)

        groups.append(SynonymGroup(canonical=variants[0], variants=variants, count=len(variants)))

    groups.sort(key=lambda g: g.count, reverse=True)
    return groups


class SynonymService:
    """Synonym detection over whole texts (needs morphological analysis)"""

    def __init__(self, morphological_service: Optional[MorphologicalService] = None):
        self.morphological_service = morphological_service or MorphologicalService()

    def detect_synonyms_in_text(
        self,
        text: str,
        dictionary: Sequence[DictionaryEntry],
        **options,
    ) -> List[TextSynonymMatch]:
        """Synonym matches for every candidate term of text, deduplicated, best first."""
        candidates = self.morphological_service.specialized_term_candidates(text)
        matches: List[TextSynonymMatch] = []
        seen = set()

        for candidate in candidates:
            for match in find_synonyms(candidate.term, dictionary, **options):
                key = (match.matched_term, match.confidence)
                if key in seen:
                    continue
                seen.add(key)
                matches.append(TextSynonymMatch(
                    **match.model_dump(),
                    candidate_info=CandidateInfo(
                        term=candidate.term,
                        type=candidate.type.value,
                        priority=candidate.priority,
                    ),
                ))

        logger.debug(f"Detected {len(matches)} synonym matches in text")
        matches.sort(key=lambda m: m.confidence, reverse=True)
        return matches
