from fastapi import APIRouter, Depends, Query
from typing import Optional
from menu_translation.dictionary.service import DictionaryService
from menu_translation.dictionary.term_finder import TermFinder
from menu_translation.dictionary.schemas import (
    DictionaryEntriesResponse,
    FindTermsRequest,
    FindTermsResponse,
)
from menu_translation.dictionary.dependencies import get_dictionary_service, get_term_finder

router = APIRouter(prefix="/dictionary", tags=["Dictionary"])


@router.get("/entries", response_model=DictionaryEntriesResponse)
async def list_entries(
    category: Optional[str] = Query(None, description="Only entries of this category"),
    service: DictionaryService = Depends(get_dictionary_service)
):
    """
    Dictionary entries in priority order (lower value first)

    - **category**: optional category filter (dish, cooking_method, allergen, ...)
    """
    entries = await service.entries()
    if category:
        entries = [e for e in entries if e.category == category]
    return DictionaryEntriesResponse(entries=entries, total=len(entries))


@router.post("/terms", response_model=FindTermsResponse)
async def find_terms(
    request: FindTermsRequest,
    finder: TermFinder = Depends(get_term_finder)
):
    """
    Detect dictionary terms in a Japanese text (exact, partial and synonym matches)
    """
    terms = await finder.find_terms(request.text)
    return FindTermsResponse(text=request.text, terms=terms, total=len(terms))
