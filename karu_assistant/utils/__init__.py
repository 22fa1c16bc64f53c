"""
Utility functions for file handling, logging and locale resolution.
"""

from karu_assistant.utils.file_handling import read_file, read_json
from karu_assistant.utils.logger import setup_logger, clear_loggers
from karu_assistant.utils.locale import resolve_language_from_locale

__all__ = [
    'read_file',
    'read_json',
    'setup_logger',
    'clear_loggers',
    'resolve_language_from_locale'
]
