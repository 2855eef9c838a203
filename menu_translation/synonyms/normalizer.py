"""
Script normalization for fuzzy matching of Japanese menu terms.

Absorbs notation variants that carry no meaning:
- full-width / half-width Latin letters and digits (ＡＢＣ１２３ -> abc123)
- long-vowel look-alikes (ラ━メン, ﾗｰﾒﾝ's ｰ -> ラーメン)
- whitespace and ASCII case
- katakana / hiragana script (ラーメン <-> らーめん)
"""

import re
import string
from typing import Optional

PROLONGED_SOUND_MARK = "ー"
# Box-drawing bars, half-width prolonged mark and the horizontal bar
PROLONGED_SOUND_VARIANTS = "━─ｰ―"

_FULLWIDTH_OFFSET = 0xFEE0
_KANA_OFFSET = 0x60

_FULLWIDTH_ALNUM = {
    code: code - _FULLWIDTH_OFFSET
    for start, end in (("Ａ", "Ｚ"), ("ａ", "ｚ"), ("０", "９"))
    for code in range(ord(start), ord(end) + 1)
}
_PROLONGED = str.maketrans({ch: PROLONGED_SOUND_MARK for ch in PROLONGED_SOUND_VARIANTS})
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# ァ (U+30A1) .. ヶ (U+30F6)  <->  ぁ (U+3041) .. ゖ (U+3096)
_KATA_TO_HIRA = {code: code - _KANA_OFFSET for code in range(0x30A1, 0x30F7)}
_HIRA_TO_KATA = {code: code + _KANA_OFFSET for code in range(0x3041, 0x3097)}

_WHITESPACE_RE = re.compile(r"\s+")


def katakana_to_hiragana(text: str) -> str:
    return text.translate(_KATA_TO_HIRA)


def hiragana_to_katakana(text: str) -> str:
    return text.translate(_HIRA_TO_KATA)


def normalize_prolonged_sound(text: str) -> str:
    return text.translate(_PROLONGED)


def canonicalize_script(text: Optional[str]) -> str:
    """Canonical form used for comparisons. Idempotent."""
    if not text or not isinstance(text, str):
        return ""

    normalized = text.translate(_FULLWIDTH_ALNUM)
    normalized = normalize_prolonged_sound(normalized)
    normalized = _WHITESPACE_RE.sub("", normalized)
    return normalized.translate(_ASCII_LOWER)
