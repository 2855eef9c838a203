from fastapi import status
from menu_translation.exceptions import AppException


class TranslationException(AppException):
    """Base exception for translation module errors"""
    pass


class InvalidArgumentException(TranslationException):
    """Missing text or unsupported target language"""
    def __init__(self, detail: str = "Invalid translation request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class TranslationFailedException(TranslationException):
    def __init__(self, detail: str = "Translation failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class BatchTranslationFailedException(TranslationException):
    def __init__(self, detail: str = "Batch translation failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ProviderError(Exception):
    """The machine translation provider could not translate (network, auth, quota, config)"""
    pass
