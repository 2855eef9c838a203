import logging
from fastapi import APIRouter, Depends
from menu_translation.translation.service import TranslationService
from menu_translation.translation.schemas import (
    TranslationRequest,
    TranslationResult,
    BatchTranslateRequest,
    BatchTranslateResponse,
)
from menu_translation.translation.exceptions import (
    TranslationException,
    TranslationFailedException,
    BatchTranslationFailedException,
)
from menu_translation.translation.dependencies import get_translation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translation", tags=["Translation"])


@router.post("/translate", response_model=TranslationResult, response_model_exclude_none=True)
async def translate_text(
    request: TranslationRequest,
    service: TranslationService = Depends(get_translation_service)
):
    """
    Translate Japanese menu/order text to English or Chinese

    - **text**: Japanese text (up to 5000 characters)
    - **targetLang**: `en` or `zh`
    - **useDictionary**: apply dictionary-assisted correction (default true)

    When machine translation fails, dictionary terms are substituted into the
    original text; if none apply, the original text is returned with `error` set.
    """
    try:
        return await service.translate(request.text, request.target_lang, request.use_dictionary)
    except TranslationException:
        raise
    except Exception as e:
        logger.error(f"Translation error: {e}", exc_info=True)
        raise TranslationFailedException()


@router.post("/batch", response_model=BatchTranslateResponse)
async def batch_translate_menu(
    request: BatchTranslateRequest,
    service: TranslationService = Depends(get_translation_service)
):
    """
    Translate the name and description of many menu items at once (admin use)
    """
    try:
        return await service.translate_menu_items(request.items, request.target_lang)
    except TranslationException:
        raise
    except Exception as e:
        logger.error(f"Batch translation error: {e}", exc_info=True)
        raise BatchTranslationFailedException()
