from functools import lru_cache
from menu_translation.morphological.service import MorphologicalService


@lru_cache()
def get_morphological_service() -> MorphologicalService:
    """Shared MorphologicalService so the MeCab tagger is built once per process"""
    return MorphologicalService()
