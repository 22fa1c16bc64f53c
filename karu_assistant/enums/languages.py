"""
Supported languages, summary options and locale lookup tables.
"""

from enum import Enum
from typing import Dict, Union


class SummaryLength(str, Enum):
    """Possible lengths for generated summaries."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SummaryStyle(str, Enum):
    """Tone/style options for summaries."""
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ACADEMIC = "academic"
    TECHNICAL = "technical"
    SIMPLE = "simple"


class Languages(str, Enum):
    """Lowercase ISO 639-1 codes of the languages the assistant works with."""
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    RU = "ru"
    ZH = "zh"
    JA = "ja"
    KO = "ko"
    AR = "ar"
    HI = "hi"
    TR = "tr"


# Locale strings (lowercase) -> canonical language
LOCALE_TO_LANGUAGE: Dict[str, Languages] = {
    "en-us": Languages.EN,
    "en-gb": Languages.EN,
    "en": Languages.EN,
    "es-es": Languages.ES,
    "es-mx": Languages.ES,
    "es": Languages.ES,
    "fr-fr": Languages.FR,
    "fr": Languages.FR,
    "de-de": Languages.DE,
    "de": Languages.DE,
    "it-it": Languages.IT,
    "it": Languages.IT,
    "pt-br": Languages.PT,
    "pt": Languages.PT,
    "ru-ru": Languages.RU,
    "ru": Languages.RU,
    "zh-cn": Languages.ZH,
    "zh-hans": Languages.ZH,
    "zh": Languages.ZH,
    "ja-jp": Languages.JA,
    "ja": Languages.JA,
    "ko-kr": Languages.KO,
    "ko": Languages.KO,
    "ar-sa": Languages.AR,
    "ar": Languages.AR,
    "hi-in": Languages.HI,
    "hi": Languages.HI,
    "tr-tr": Languages.TR,
    "tr": Languages.TR,
}

# Human-readable names, used in UI text and dropdowns
LANGUAGE_DISPLAY_NAME: Dict[Languages, str] = {
    Languages.EN: "English",
    Languages.ES: "Spanish",
    Languages.FR: "French",
    Languages.DE: "German",
    Languages.IT: "Italian",
    Languages.PT: "Portuguese",
    Languages.RU: "Russian",
    Languages.ZH: "Chinese",
    Languages.JA: "Japanese",
    Languages.KO: "Korean",
    Languages.AR: "Arabic",
    Languages.HI: "Hindi",
    Languages.TR: "Turkish",
}

# Natural-language phrase placed in the summarize prompt
SUMMARY_LENGTH_PHRASE: Dict[SummaryLength, str] = {
    SummaryLength.SHORT: "2-3 sentences",
    SummaryLength.MEDIUM: "1-2 paragraphs",
    SummaryLength.LONG: "3-4 paragraphs",
}


def _check_total(table: Dict[Enum, str], enum_cls) -> None:
    """Fail at import if an enum member has no (non-empty) entry in the table."""
    missing = [member.name for member in enum_cls if not table.get(member)]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} members without an entry: {', '.join(missing)}")


_check_total(LANGUAGE_DISPLAY_NAME, Languages)
_check_total(SUMMARY_LENGTH_PHRASE, SummaryLength)


def get_language_display_name(language: Union[Languages, str]) -> str:
    """
    Return the display name for a language enum member or its code.

    Raises:
        ValueError: If the code is not one of the supported languages.
    """
    return LANGUAGE_DISPLAY_NAME[Languages(language)]
