from fastapi import APIRouter, Depends
from menu_translation.morphological.service import MorphologicalService
from menu_translation.morphological.schemas import (
    AnalyzeRequest,
    CandidatesResponse,
    TextStatsResponse,
)
from menu_translation.morphological.dependencies import get_morphological_service

router = APIRouter(prefix="/morphological", tags=["Morphological"])


@router.post("/candidates", response_model=CandidatesResponse)
async def extract_candidates(
    request: AnalyzeRequest,
    service: MorphologicalService = Depends(get_morphological_service)
):
    """
    Extract specialized-term candidates (dish names, ingredients, ...) from Japanese text

    - **text**: Japanese text (1-5000 characters)
    """
    return CandidatesResponse(
        text=request.text,
        candidates=service.specialized_term_candidates(request.text)
    )


@router.post("/stats", response_model=TextStatsResponse)
async def text_stats(
    request: AnalyzeRequest,
    service: MorphologicalService = Depends(get_morphological_service)
):
    """
    Token statistics and the lemmatized (dictionary-form) text
    """
    return TextStatsResponse(
        text=request.text,
        stats=service.text_stats(request.text),
        lemmatized=service.lemmatize(request.text)
    )
