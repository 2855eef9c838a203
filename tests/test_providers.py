import os

import deepl
import pytest

from menu_translation.translation.exceptions import ProviderError
from menu_translation.translation.providers import DeepLProvider, GoogleTranslateProvider, build_provider


class FakeTextResult:
    def __init__(self, text):
        self.text = text


class FakeTranslator:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def translate_text(self, text, source_lang=None, target_lang=None):
        self.calls.append((text, source_lang, target_lang))
        if self.error:
            raise self.error
        return FakeTextResult(f"[{target_lang}] {text}")


class FakeGoogleClient:
    def __init__(self):
        self.calls = []

    def translate(self, text, target_language=None, source_language=None, format_=None):
        self.calls.append((text, target_language, source_language, format_))
        return {"translatedText": f"[{target_language}] {text}"}


def test_deepl_requires_api_key():
    with pytest.raises(ProviderError):
        DeepLProvider(auth_key="").translate("ラーメン", "ja", "en")


@pytest.mark.parametrize("target_lang,expected", [("en", "EN-US"), ("zh", "ZH")])
def test_deepl_language_codes(target_lang, expected):
    provider = DeepLProvider(auth_key="test-key")
    provider._translator = FakeTranslator()

    assert provider.translate("ラーメン", "ja", target_lang) == f"[{expected}] ラーメン"
    assert provider._translator.calls == [("ラーメン", "JA", expected)]


def test_deepl_errors_become_provider_errors():
    provider = DeepLProvider(auth_key="test-key")
    provider._translator = FakeTranslator(error=deepl.QuotaExceededException("quota exceeded"))

    with pytest.raises(ProviderError, match="quota exceeded"):
        provider.translate("ラーメン", "ja", "en")


def test_google_language_codes():
    provider = GoogleTranslateProvider(credentials_path="")
    provider._client = FakeGoogleClient()

    assert provider.translate("ラーメン", "ja", "zh") == "[zh-CN] ラーメン"
    assert provider._client.calls == [("ラーメン", "zh-CN", "ja", "text")]


def test_google_relative_credentials_resolved_from_project_root(monkeypatch):
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "")
    GoogleTranslateProvider(credentials_path="keys/service-account.json")

    resolved = os.environ["GOOGLE_APPLICATION_CREDENTIALS"]
    assert os.path.isabs(resolved)
    assert resolved.endswith(os.path.join("keys", "service-account.json"))


def test_build_provider():
    assert isinstance(build_provider("deepl"), DeepLProvider)
    assert isinstance(build_provider("Google"), GoogleTranslateProvider)
    with pytest.raises(ValueError):
        build_provider("babelfish")
