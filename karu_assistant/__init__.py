"""
Karu Assistant - convenience helpers around Google's Gen AI text models.
"""

from karu_assistant.client import KaruAssistant, TranslateResult
from karu_assistant.config import Config
from karu_assistant.enums import (
    Languages, SummaryLength, SummaryStyle,
    LOCALE_TO_LANGUAGE, LANGUAGE_DISPLAY_NAME, get_language_display_name
)
from karu_assistant.exceptions import KaruAssistantError, ConfigurationError, MalformedResponseError
from karu_assistant.prompts import PromptLoader, PromptTemplate
from karu_assistant.utils.locale import resolve_language_from_locale

__all__ = [
    "KaruAssistant",
    "TranslateResult",
    "Config",
    "Languages",
    "SummaryLength",
    "SummaryStyle",
    "LOCALE_TO_LANGUAGE",
    "LANGUAGE_DISPLAY_NAME",
    "get_language_display_name",
    "KaruAssistantError",
    "ConfigurationError",
    "MalformedResponseError",
    "PromptLoader",
    "PromptTemplate",
    "resolve_language_from_locale"
]
