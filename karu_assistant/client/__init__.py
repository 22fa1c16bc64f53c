"""
Gen AI assistant client.
"""

from karu_assistant.client.assistant import KaruAssistant, TranslateResult

__all__ = [
    "KaruAssistant",
    "TranslateResult"
]
