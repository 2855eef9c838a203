"""
Dictionary-based corrections applied around the MT call.
"""

import re
from typing import Optional, Sequence

from menu_translation.config import settings
from menu_translation.dictionary.schemas import FoundTerm


def post_process_translation(
    translated_text: str,
    found_terms: Sequence[FoundTerm],
    target_lang: str,
    max_priority: Optional[int] = None,
) -> str:
    """
    Force the canonical spelling of high-priority terms in MT output.

    Only entries with priority <= max_priority are corrected, and only where
    the expected translation already appears (ignoring case). Paraphrased
    renderings are left alone.
    """
    if max_priority is None:
        max_priority = settings.FORCE_CORRECTION_MAX_PRIORITY

    corrected = translated_text
    for term in found_terms:
        if term.priority > max_priority:
            continue
        expected = term.translation_for(target_lang)
        if not expected:
            continue
        pattern = re.compile(re.escape(expected), re.IGNORECASE)
        corrected = pattern.sub(lambda _: expected, corrected)
    return corrected


def apply_dictionary_terms(
    text: str,
    found_terms: Sequence[FoundTerm],
    target_lang: str,
) -> Optional[str]:
    """
    Replace every literal term_ja with its translation.

    Returns None when nothing was replaced.
    """
    result = text
    for term in found_terms:
        translation = term.translation_for(target_lang)
        if translation and term.term_ja:
            result = result.replace(term.term_ja, translation)
    return result if result != text else None
