"""
Locale string -> supported language resolution.
"""

import re
from typing import Optional

from karu_assistant.enums.languages import Languages, LOCALE_TO_LANGUAGE

# Primary language subtag (2-3 or 5-8 letters), then optional '-' or '_' separated subtags
_LOCALE_PATTERN = re.compile(r"^([a-z]{2,3}|[a-z]{5,8})(?:[-_][a-z0-9]{1,8})*$", re.IGNORECASE)


def primary_language_subtag(locale: str) -> Optional[str]:
    """Return the lowercase primary language subtag of a locale, or None if it does not parse."""
    match = _LOCALE_PATTERN.match(locale.strip())
    if not match:
        return None
    return match.group(1).lower()


def resolve_language_from_locale(locale: str) -> Optional[Languages]:
    """
    Map a locale string such as "en-US" or "pt_BR" to a supported language.

    Tries the full lowercased locale first, then its primary language subtag.

    Args:
        locale (str): Locale identifier, possibly empty.

    Returns:
        Optional[Languages]: The matching language, or None when nothing matches
        (including empty and unparseable input).
    """
    if not locale:
        return None

    language = LOCALE_TO_LANGUAGE.get(locale.lower())
    if language is not None:
        return language

    subtag = primary_language_subtag(locale)
    if subtag is None:
        return None
    return LOCALE_TO_LANGUAGE.get(subtag)
