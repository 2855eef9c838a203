from fastapi import Depends
from menu_translation.morphological.dependencies import get_morphological_service
from menu_translation.morphological.service import MorphologicalService
from menu_translation.synonyms.service import SynonymService


def get_synonym_service(
    morphological_service: MorphologicalService = Depends(get_morphological_service),
) -> SynonymService:
    return SynonymService(morphological_service)
