"""
IPA symbol inventory, grouped the way a virtual IPA keyboard shows it.

Only presence checks are offered; pronunciations are free text and are
never transcribed or checked for well-formedness.
"""

from __future__ import annotations

from itertools import chain

IPA_CATEGORIES: dict[str, dict[str, list[str]]] = {
    "vowels": {
        "close": ["i", "y", "ɨ", "ʉ", "ɯ", "u"],
        "near_close": ["ɪ", "ʏ", "ʊ"],
        "close_mid": ["e", "ø", "ɘ", "ɵ", "ɤ", "o"],
        "mid": ["ə"],
        "open_mid": ["ɛ", "œ", "ɜ", "ɞ", "ʌ", "ɔ"],
        "near_open": ["æ", "ɐ"],
        "open": ["a", "ɶ", "ɑ", "ɒ"],
    },
    "consonants": {
        "plosive": ["p", "b", "t", "d", "ʈ", "ɖ", "c", "ɟ", "k", "g", "q", "ɢ", "ʔ"],
        "nasal": ["m", "ɱ", "n", "ɳ", "ɲ", "ŋ", "ɴ"],
        "trill": ["ʙ", "r", "ʀ"],
        "tap": ["ⱱ", "ɾ", "ɽ"],
        "fricative": [
            "ɸ", "β", "f", "v", "θ", "ð", "s", "z", "ʃ", "ʒ", "ʂ",
            "ʐ", "ç", "ʝ", "x", "ɣ", "χ", "ʁ", "ħ", "ʕ", "h", "ɦ",
        ],
        "lateral_fricative": ["ɬ", "ɮ"],
        "approximant": ["ʋ", "ɹ", "ɻ", "j", "ɰ"],
        "lateral_approximant": ["l", "ɭ", "ʎ", "ʟ"],
        "affricate": ["t͡ʃ", "d͡ʒ", "t͡s", "d͡z", "t͡ɕ", "d͡ʑ"],
    },
    "diacritics": {
        "length": ["ː", "ˑ", "̆"],
        "stress": ["ˈ", "ˌ"],
        "tone": ["˥", "˦", "˧", "˨", "˩", "꜀", "꜁", "꜂", "꜃", "꜄", "꜅", "꜆"],
        "nasalization": ["̃"],
        "voicing": ["̥", "̬"],
        "aspiration": ["ʰ", "̤"],
        "other": [
            "̩", "̯", "̊", "̍", "̝", "̞",
            "̘", "̙", "̪", "̺", "̻", "̼",
        ],
    },
}

ALL_SYMBOLS: frozenset[str] = frozenset(
    chain.from_iterable(
        symbols
        for groups in IPA_CATEGORIES.values()
        for symbols in groups.values()
    )
)


def contains_ipa(text: str) -> bool:
    """True if any inventory symbol occurs in ``text``."""
    return any(symbol in text for symbol in ALL_SYMBOLS)


def validate_ipa(text: str) -> bool:
    """An IPA field only has to be non-empty."""
    return len(text) > 0
