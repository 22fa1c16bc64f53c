"""
Language and summary option enumerations.
"""

from karu_assistant.enums.languages import (
    Languages, SummaryLength, SummaryStyle,
    LOCALE_TO_LANGUAGE, LANGUAGE_DISPLAY_NAME, SUMMARY_LENGTH_PHRASE,
    get_language_display_name
)

__all__ = [
    'Languages',
    'SummaryLength',
    'SummaryStyle',
    'LOCALE_TO_LANGUAGE',
    'LANGUAGE_DISPLAY_NAME',
    'SUMMARY_LENGTH_PHRASE',
    'get_language_display_name'
]
