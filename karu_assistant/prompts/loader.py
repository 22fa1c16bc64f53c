"""
Prompt templates for the assistant operations, loaded once from the packaged JSON catalog.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from karu_assistant.config import Config
from karu_assistant.utils.file_handling import read_json
from karu_assistant.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PromptTemplate:
    """A named prompt: what it is for and the template text with {placeholders}."""
    description: str
    template: str


class PromptLoader:
    """Process-wide, read-only cache of the prompt catalog."""

    prompts_file: Union[str, Path] = Config.PROMPTS_FILE

    _prompts: Optional[Mapping[str, PromptTemplate]] = None
    _lock = threading.Lock()

    @classmethod
    def load(cls) -> Mapping[str, PromptTemplate]:
        """
        Return the prompt catalog, reading it from disk on first use.

        Returns:
            Mapping[str, PromptTemplate]: Read-only mapping of prompt name -> template.

        Raises:
            FileNotFoundError: If the catalog file is missing.
            ValueError: If the file is not valid JSON or an entry is malformed.
        """
        prompts = cls._prompts
        if prompts is not None:
            return prompts

        with cls._lock:
            if cls._prompts is None:
                cls._prompts = cls._read_catalog(cls.prompts_file)
            return cls._prompts

    @staticmethod
    def _read_catalog(path: Union[str, Path]) -> Mapping[str, PromptTemplate]:
        raw = read_json(path)
        if not isinstance(raw, dict):
            raise ValueError(f"Prompt catalog {path} must be a JSON object")

        catalog: Dict[str, PromptTemplate] = {}
        for name, entry in raw.items():
            if not isinstance(entry, dict) or not isinstance(entry.get("template"), str):
                raise ValueError(f"Prompt '{name}' in {path} has no string 'template'")
            catalog[name] = PromptTemplate(
                description=str(entry.get("description", "")),
                template=entry["template"],
            )

        logger.info(f"Loaded {len(catalog)} prompt templates from {path}")
        return MappingProxyType(catalog)

    @classmethod
    def get(cls, name: str) -> Optional[PromptTemplate]:
        """Return the named prompt, or None if the catalog has no such entry."""
        return cls.load().get(name)

    @classmethod
    def list_available(cls) -> Dict[str, str]:
        """
        List all available templates with their descriptions.

        Returns:
            Dict[str, str]: Dictionary of template name -> description
        """
        return {name: prompt.description for name, prompt in cls.load().items()}

    @classmethod
    def reset(cls) -> None:
        """Drop the cached catalog so the next access reads the file again."""
        with cls._lock:
            cls._prompts = None
