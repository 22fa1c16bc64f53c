"""
Prompt catalog and template rendering.
"""

from karu_assistant.prompts.loader import PromptLoader, PromptTemplate
from karu_assistant.prompts.templating import substitute

__all__ = [
    'PromptLoader',
    'PromptTemplate',
    'substitute'
]
