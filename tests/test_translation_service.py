import pytest

from menu_translation.dictionary.schemas import FoundTerm
from menu_translation.translation.exceptions import InvalidArgumentException
from menu_translation.translation.postprocess import apply_dictionary_terms, post_process_translation
from menu_translation.translation.providers import MTInvoker
from menu_translation.translation.schemas import MenuItemInput
from tests.conftest import StubProvider, make_entry


def found(term_ja, term_en, priority, term_zh=None):
    return FoundTerm(**make_entry(term_ja, term_en, priority, term_zh=term_zh).model_dump(), match_type="exact")


class TestPostProcess:
    def test_restores_canonical_casing(self):
        terms = [found("唐揚げ", "karaage", 1)]
        assert post_process_translation("Fried Karaage is great", terms, "en", 2) == "Fried karaage is great"
        assert post_process_translation("FRIED KARAAGE", terms, "en", 2) == "FRIED karaage"

    def test_already_correct_text_is_unchanged(self):
        terms = [found("唐揚げ", "karaage", 1)]
        assert post_process_translation("Fried karaage is great", terms, "en", 2) == "Fried karaage is great"

    def test_low_priority_terms_are_not_forced(self):
        terms = [found("定食", "set meal", 3)]
        assert post_process_translation("Karaage Set Meal", terms, "en", 2) == "Karaage Set Meal"

    def test_paraphrases_are_left_alone(self):
        terms = [found("唐揚げ", "karaage", 1)]
        assert post_process_translation("Japanese fried chicken", terms, "en", 2) == "Japanese fried chicken"

    def test_regex_characters_are_literal(self):
        terms = [found("焼き鳥", "yakitori (skewers)", 1)]
        assert post_process_translation("Yakitori (Skewers)", terms, "en", 2) == "yakitori (skewers)"

    def test_dictionary_substitution(self):
        terms = [found("唐揚げ", "karaage", 1, term_zh="日式炸鸡")]
        assert apply_dictionary_terms("唐揚げください", terms, "en") == "karaageください"
        assert apply_dictionary_terms("唐揚げください", terms, "zh") == "日式炸鸡ください"
        assert apply_dictionary_terms("お水ください", terms, "en") is None
        assert apply_dictionary_terms("唐揚げください", [], "en") is None


class TestMTInvoker:
    async def test_success(self):
        result = await MTInvoker(StubProvider(default="Ramen")).invoke("ラーメン", "en")
        assert result.ok
        assert result.text == "Ramen"

    async def test_provider_error(self):
        result = await MTInvoker(StubProvider(error="quota exceeded")).invoke("ラーメン", "en")
        assert not result.ok
        assert result.error == "quota exceeded"

    async def test_unexpected_exception(self):
        class Exploding:
            def translate(self, text, source_lang="ja", target_lang="en"):
                raise ConnectionError("network down")

        result = await MTInvoker(Exploding()).invoke("ラーメン", "en")
        assert not result.ok
        assert "network down" in result.error

    async def test_empty_translation_is_failure(self):
        result = await MTInvoker(StubProvider(default="")).invoke("ラーメン", "en")
        assert not result.ok


class TestTranslate:
    @pytest.mark.parametrize("text", ["  42  ", "12 34", "寿司", "a"])
    async def test_passthrough_skips_mt(self, make_translation_service, provider, text):
        result = await make_translation_service(provider).translate(text, "en")

        assert result.translated_text == text
        assert result.from_cache is False
        assert result.method == "passthrough"
        assert provider.calls == []

    @pytest.mark.parametrize("text", ["１２３", "１２　３４"])
    async def test_full_width_digits_are_translated(self, make_translation_service, provider, text):
        result = await make_translation_service(provider).translate(text, "en")

        assert result.method == "hybrid"
        assert provider.calls == [(text, "ja", "en")]

    async def test_hybrid_translation(self, make_translation_service):
        provider = StubProvider({"唐揚げは最高": "Fried Karaage is great"})
        service = make_translation_service(provider)

        result = await service.translate("唐揚げは最高", "en")

        assert result.translated_text == "Fried karaage is great"
        assert result.translated_text.lower().count("karaage") == 1
        assert result.method == "hybrid"
        assert result.from_cache is False
        assert result.found_terms_count == 1
        assert provider.calls == [("唐揚げは最高", "ja", "en")]

    async def test_hybrid_corrects_near_miss_casing(self, make_translation_service):
        provider = StubProvider({"唐揚げは最高": "KARAAGE is the best"})
        result = await make_translation_service(provider).translate("唐揚げは最高", "en")
        assert result.translated_text == "karaage is the best"

    async def test_hybrid_without_terms(self, make_translation_service):
        provider = StubProvider({"お水をください": "Water, please"})
        result = await make_translation_service(provider).translate("お水をください", "en")
        assert result.method == "hybrid"
        assert result.found_terms_count == 0

    async def test_cache_hit(self, make_translation_service):
        provider = StubProvider({"唐揚げは最高": "Fried karaage is great"})
        service = make_translation_service(provider)

        await service.translate("唐揚げは最高", "en")
        result = await service.translate("唐揚げは最高", "en")

        assert result.from_cache is True
        assert result.method == "hybrid_cached"
        assert result.translated_text == "Fried karaage is great"
        assert result.found_terms_count is None
        assert len(provider.calls) == 1

    async def test_mt_only_mode_has_its_own_cache_entry(self, make_translation_service):
        provider = StubProvider({"唐揚げは最高": "Fried Karaage is great"})
        service = make_translation_service(provider)

        raw = await service.translate("唐揚げは最高", "en", use_dictionary=False)
        assert raw.method == "deepl_only"
        assert raw.translated_text == "Fried Karaage is great"
        assert raw.found_terms_count == 0

        hybrid = await service.translate("唐揚げは最高", "en")
        assert hybrid.method == "hybrid"
        assert hybrid.translated_text == "Fried karaage is great"

        cached = await service.translate("唐揚げは最高", "en", use_dictionary=False)
        assert cached.method == "deepl_only_cached"
        assert len(provider.calls) == 2

    async def test_dictionary_fallback_when_mt_fails(self, make_translation_service):
        provider = StubProvider(error="DeepL unavailable")
        service = make_translation_service(provider)

        result = await service.translate("唐揚げください", "en")

        assert "karaageください" in result.translated_text
        assert result.method == "dictionary_only"
        assert result.from_cache is False
        assert result.error is None
        assert result.found_terms_count == 1

        again = await service.translate("唐揚げください", "en")
        assert again.method == "dictionary_only_cached"
        assert len(provider.calls) == 1

    async def test_dictionary_fallback_uses_target_language(self, make_translation_service):
        service = make_translation_service(StubProvider(error="DeepL unavailable"))
        result = await service.translate("唐揚げください", "zh")
        assert result.translated_text == "日式炸鸡ください"

    async def test_original_text_when_nothing_can_translate(self, make_translation_service):
        provider = StubProvider(error="DeepL unavailable")
        service = make_translation_service(provider)

        result = await service.translate("お水をください", "en")

        assert result.translated_text == "お水をください"
        assert result.method == "fallback_original"
        assert result.error == "Translation failed"
        assert result.from_cache is False

        await service.translate("お水をください", "en")
        assert len(provider.calls) == 2

    async def test_mt_only_mode_falls_back_to_original(self, make_translation_service):
        service = make_translation_service(StubProvider(error="DeepL unavailable"))
        result = await service.translate("唐揚げください", "en", use_dictionary=False)
        assert result.method == "fallback_original"
        assert result.translated_text == "唐揚げください"

    async def test_correction_priority_is_configurable(self, make_translation_service):
        provider = StubProvider({"唐揚げ定食": "Karaage Set Meal"})
        service = make_translation_service(provider, max_correction_priority=3)
        result = await service.translate("唐揚げ定食", "en")
        assert result.translated_text == "karaage set meal"

    @pytest.mark.parametrize("text,target_lang", [
        ("", "en"),
        (None, "en"),
        ("唐揚げ定食", "fr"),
        ("唐揚げ定食", ""),
    ])
    async def test_invalid_arguments(self, make_translation_service, provider, text, target_lang):
        with pytest.raises(InvalidArgumentException) as exc_info:
            await make_translation_service(provider).translate(text, target_lang)
        assert exc_info.value.status_code == 400
        assert provider.calls == []


class TestBatchTranslate:
    async def test_translates_names_and_descriptions(self, make_translation_service):
        provider = StubProvider({
            "唐揚げ定食": "Karaage set meal",
            "ジューシーな唐揚げ": "Juicy karaage",
            "ラーメン": "Ramen",
        })
        service = make_translation_service(provider)
        items = [
            MenuItemInput(id="m1", name_ja="唐揚げ定食", description_ja="ジューシーな唐揚げ"),
            MenuItemInput(id="m2"),
            MenuItemInput(id="m3", name_ja="ラーメン"),
        ]

        response = await service.translate_menu_items(items, "en")

        assert response.count == 2
        assert response.items == [
            {"id": "m1", "name_en": "karaage set meal", "description_en": "Juicy karaage"},
            {"id": "m3", "name_en": "ramen"},
        ]

    async def test_rejects_unsupported_language(self, make_translation_service, provider):
        with pytest.raises(InvalidArgumentException):
            await make_translation_service(provider).translate_menu_items([MenuItemInput(id="m1", name_ja="寿司")], "ko")
