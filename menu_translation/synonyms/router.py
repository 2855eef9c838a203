from fastapi import APIRouter, Depends
from menu_translation.dictionary.dependencies import get_dictionary_service
from menu_translation.dictionary.service import DictionaryService
from menu_translation.synonyms.service import SynonymService, are_synonyms, find_synonyms, synonym_groups
from menu_translation.synonyms.schemas import (
    CompareRequest,
    SynonymMatchResult,
    GroupsRequest,
    GroupsResponse,
    SearchRequest,
    SearchResponse,
    DetectRequest,
    DetectResponse,
)
from menu_translation.synonyms.dependencies import get_synonym_service

router = APIRouter(prefix="/synonyms", tags=["Synonyms"])


@router.post("/compare", response_model=SynonymMatchResult)
async def compare_terms(request: CompareRequest):
    """
    Check whether two terms are notation variants (e.g. ラーメン / らーめん)
    """
    return are_synonyms(
        request.term1,
        request.term2,
        strict_mode=request.strict_mode,
        allow_partial_match=request.allow_partial_match,
        min_similarity=request.min_similarity,
    )


@router.post("/groups", response_model=GroupsResponse)
async def group_terms(request: GroupsRequest):
    """
    Cluster terms into synonym groups (greedy, in input order)
    """
    groups = synonym_groups(request.terms, min_confidence=request.min_confidence)
    return GroupsResponse(groups=groups, total=len(groups))


@router.post("/search", response_model=SearchResponse)
async def search_synonyms(
    request: SearchRequest,
    dictionary_service: DictionaryService = Depends(get_dictionary_service)
):
    """
    Dictionary entries that are synonyms of a term, best match first
    """
    matches = find_synonyms(
        request.term,
        await dictionary_service.entries(),
        max_results=request.max_results,
        min_confidence=request.min_confidence,
    )
    return SearchResponse(term=request.term, matches=matches, total=len(matches))


@router.post("/detect", response_model=DetectResponse)
async def detect_synonyms(
    request: DetectRequest,
    service: SynonymService = Depends(get_synonym_service),
    dictionary_service: DictionaryService = Depends(get_dictionary_service)
):
    """
    Find dictionary synonyms for every candidate term extracted from a text
    """
    matches = service.detect_synonyms_in_text(
        request.text,
        await dictionary_service.entries(),
        max_results=request.max_results,
        min_confidence=request.min_confidence,
    )
    return DetectResponse(text=request.text, matches=matches, total=len(matches))
