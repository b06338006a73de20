from __future__ import annotations

from enum import Enum


class LangEnum(str, Enum):
    AUTO = "auto"
    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    CANTONESE = "yue"
    ENGLISH = "en"
    JAPANESE = "ja"
    KOREAN = "ko"
    FRENCH = "fr"
    SPANISH = "es"
    RUSSIAN = "ru"
    GERMAN = "de"
    ITALIAN = "it"
    TURKISH = "tr"
    PORTUGUESE_PORTUGAL = "pt-PT"
    PORTUGUESE_BRAZIL = "pt-BR"
    VIETNAMESE = "vi"
    INDONESIAN = "id"
    THAI = "th"
    MALAY = "ms"
    ARABIC = "ar"
    HINDI = "hi"
    MONGOLIAN_CYRILLIC = "mn-Cyrl"
    MONGOLIAN_TRADITIONAL = "mn-Mong"
    KHMER = "km"
    NORWEGIAN_BOKMAL = "nb"
    NORWEGIAN_NYNORSK = "nn"
    PERSIAN = "fa"
    SWEDISH = "sv"
    POLISH = "pl"
    DUTCH = "nl"
    UKRAINIAN = "uk"


AUTO_DETECT_PHRASE = "Requires you to identify automatically"

LANGUAGE_NAMES: dict[LangEnum, str] = {
    LangEnum.AUTO: AUTO_DETECT_PHRASE,
    LangEnum.CHINESE_SIMPLIFIED: "Simplified Chinese",
    LangEnum.CHINESE_TRADITIONAL: "Traditional Chinese",
    LangEnum.CANTONESE: "Cantonese",
    LangEnum.ENGLISH: "English",
    LangEnum.JAPANESE: "Japanese",
    LangEnum.KOREAN: "Korean",
    LangEnum.FRENCH: "French",
    LangEnum.SPANISH: "Spanish",
    LangEnum.RUSSIAN: "Russian",
    LangEnum.GERMAN: "German",
    LangEnum.ITALIAN: "Italian",
    LangEnum.TURKISH: "Turkish",
    LangEnum.PORTUGUESE_PORTUGAL: "Portuguese",
    LangEnum.PORTUGUESE_BRAZIL: "Portuguese",
    LangEnum.VIETNAMESE: "Vietnamese",
    LangEnum.INDONESIAN: "Indonesian",
    LangEnum.THAI: "Thai",
    LangEnum.MALAY: "Malay",
    LangEnum.ARABIC: "Arabic",
    LangEnum.HINDI: "Hindi",
    LangEnum.MONGOLIAN_CYRILLIC: "Mongolian",
    LangEnum.MONGOLIAN_TRADITIONAL: "Mongolian",
    LangEnum.KHMER: "Central Khmer",
    LangEnum.NORWEGIAN_BOKMAL: "Norwegian Bokmål",
    LangEnum.NORWEGIAN_NYNORSK: "Norwegian Nynorsk",
    LangEnum.PERSIAN: "Persian",
    LangEnum.SWEDISH: "Swedish",
    LangEnum.POLISH: "Polish",
    LangEnum.DUTCH: "Dutch",
    LangEnum.UKRAINIAN: "Ukrainian",
}


def language_name(language: object) -> str:
    """Return the English display name used in prompts for a language."""

    if not isinstance(language, LangEnum):
        try:
            language = LangEnum(language)
        except ValueError:
            return AUTO_DETECT_PHRASE
    return LANGUAGE_NAMES.get(language, AUTO_DETECT_PHRASE)


def parse_language(value: str) -> LangEnum:
    """Accept either an enum value ("zh-Hans") or member name ("CHINESE_SIMPLIFIED")."""

    cleaned = value.strip()
    try:
        return LangEnum(cleaned)
    except ValueError:
        pass
    key = cleaned.upper().replace("-", "_")
    if key in LangEnum.__members__:
        return LangEnum[key]
    raise ValueError(f"Unsupported language: {value}")
