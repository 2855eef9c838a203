"""
Machine translation providers.

Providers are synchronous SDK wrappers that raise ProviderError on any
failure. MTInvoker runs them off the event loop and turns the outcome into
an MTResult so callers branch on a value instead of catching exceptions.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

import deepl
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from google.cloud import translate_v2 as translate

from menu_translation.config import settings
from menu_translation.translation.constants import SOURCE_LANGUAGE
from menu_translation.translation.exceptions import ProviderError
from menu_translation.translation.schemas import MTResult

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    def translate(self, text: str, source_lang: str = SOURCE_LANGUAGE, target_lang: str = "en") -> str:
        ...


class DeepLProvider:
    """DeepL API through the official `deepl` client"""

    # DeepL rejects the bare "EN" target
    TARGET_LANG_CODES = {"en": "EN-US", "zh": "ZH"}

    def __init__(self, auth_key: Optional[str] = None, server_url: Optional[str] = None):
        self.auth_key = auth_key if auth_key is not None else settings.DEEPL_API_KEY
        self.server_url = server_url if server_url is not None else (settings.DEEPL_SERVER_URL or None)
        self._translator: Optional[deepl.Translator] = None

    def _get_translator(self) -> deepl.Translator:
        if not self.auth_key:
            raise ProviderError("DeepL API key not configured")
        if self._translator is None:
            kwargs = {"auth_key": self.auth_key}
            if self.server_url:
                kwargs["server_url"] = self.server_url
            self._translator = deepl.Translator(**kwargs)
            logger.debug("DeepL translator initialized")
        return self._translator

    def translate(self, text: str, source_lang: str = SOURCE_LANGUAGE, target_lang: str = "en") -> str:
        translator = self._get_translator()
        try:
            result = translator.translate_text(
                text,
                source_lang=source_lang.upper(),
                target_lang=self.TARGET_LANG_CODES.get(target_lang, target_lang.upper()),
            )
        except deepl.DeepLException as e:
            raise ProviderError(f"DeepL translation failed: {e}") from e
        return result.text


class GoogleTranslateProvider:
    """Google Cloud Translation v2"""

    TARGET_LANG_CODES = {"en": "en", "zh": "zh-CN"}

    def __init__(self, credentials_path: Optional[str] = None):
        cred_path = credentials_path if credentials_path is not None else settings.GOOGLE_APPLICATION_CREDENTIALS
        if cred_path:
            if not os.path.isabs(cred_path):
                # Relative paths are resolved from the project root
                project_root = Path(__file__).resolve().parent.parent.parent
                cred_path = str(project_root / cred_path)
            os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = cred_path
        self._client: Optional[translate.Client] = None

    def _get_client(self) -> translate.Client:
        if self._client is None:
            try:
                self._client = translate.Client()
            except google_auth_exceptions.GoogleAuthError as e:
                raise ProviderError(f"Google Cloud Translation client unavailable: {e}") from e
        return self._client

    def translate(self, text: str, source_lang: str = SOURCE_LANGUAGE, target_lang: str = "en") -> str:
        client = self._get_client()
        try:
            result = client.translate(
                text,
                target_language=self.TARGET_LANG_CODES.get(target_lang, target_lang),
                source_language=source_lang,
                format_="text",
            )
        except (google_exceptions.GoogleAPIError, google_auth_exceptions.GoogleAuthError) as e:
            raise ProviderError(f"Google translation failed: {e}") from e
        return result["translatedText"]


def build_provider(name: Optional[str] = None) -> TranslationProvider:
    name = (name or settings.MT_PROVIDER).lower()
    if name == "deepl":
        return DeepLProvider()
    if name == "google":
        return GoogleTranslateProvider()
    raise ValueError(f"Unknown MT provider: {name}")


class MTInvoker:
    """Call the provider and report success or failure as an MTResult"""

    def __init__(self, provider: TranslationProvider):
        self.provider = provider

    async def invoke(self, text: str, target_lang: str) -> MTResult:
        try:
            translated = await asyncio.to_thread(
                self.provider.translate, text, SOURCE_LANGUAGE, target_lang
            )
        except ProviderError as e:
            logger.warning(f"MT provider error: {e}")
            return MTResult.failure(str(e))
        except Exception as e:
            # Unexpected SDK/network errors are treated like provider errors
            logger.error(f"MT call failed unexpectedly: {e}", exc_info=True)
            return MTResult.failure(str(e) or e.__class__.__name__)

        if not translated:
            return MTResult.failure("Empty translation returned")
        return MTResult.success(translated)
