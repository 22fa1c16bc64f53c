"""
Question answering, summarization, key points and translation on top of Google's Gen AI SDK.
"""

import asyncio
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from google import genai
from google.genai.types import GenerateContentConfig

from karu_assistant.config import Config
from karu_assistant.enums.languages import Languages, SummaryLength, SummaryStyle, SUMMARY_LENGTH_PHRASE
from karu_assistant.exceptions import ConfigurationError, MalformedResponseError
from karu_assistant.prompts.loader import PromptLoader
from karu_assistant.prompts.templating import substitute
from karu_assistant.utils.logger import setup_logger

logger = setup_logger(__name__)

# Custom emoji markup, e.g. <:wave:123456789012345678> or <a:dance:123456789012345678>
EMOJI_MARKUP_PATTERN = re.compile(r"<a?:.+?:\d{18}>")
CLEANED_PATTERN = re.compile(r"Cleaned:\s*(.+)", re.IGNORECASE)
TRANSLATED_PATTERN = re.compile(r"Translated:\s*(.+)", re.IGNORECASE)


@dataclass(frozen=True)
class TranslateResult:
    """Cleaned source text and its translation, as returned by the model."""
    cleaned: str
    translated: str


def _value(option: Union[Enum, str]) -> str:
    """Plain string for an enum member or a raw string."""
    return option.value if isinstance(option, Enum) else str(option)


def default_generation_config() -> GenerateContentConfig:
    return GenerateContentConfig(
        temperature=Config.DEFAULT_TEMPERATURE,
        max_output_tokens=Config.DEFAULT_MAX_OUTPUT_TOKENS,
        top_p=Config.DEFAULT_TOP_P,
        top_k=Config.DEFAULT_TOP_K,
    )


class KaruAssistant:
    """Wrapper around a Gen AI model with ready-made prompts for common text tasks."""

    def __init__(
            self,
            api_key: Optional[str] = None,
            model_name: str = Config.DEFAULT_MODEL,
            generation_config: Optional[Union[GenerateContentConfig, Dict[str, Any]]] = None,
    ):
        """
        Create the Gen AI client. No request is sent here.

        Args:
            api_key (Optional[str]): API key. Falls back to the GOOGLE_AI_API_KEY environment
                variable, then to Config.GOOGLE_AI_API_KEY.
            model_name (str): Model to generate with.
            generation_config: GenerateContentConfig or a dict of its fields
                (temperature, max_output_tokens, top_p, top_k, ...).

        Raises:
            ConfigurationError: If no API key is available from any source.
        """
        resolved_key = Config.resolve_api_key(api_key)
        if not resolved_key:
            raise ConfigurationError(
                f"Missing API key. Provide it via api_key, the {Config.API_KEY_ENV_VAR} "
                f"environment variable, or Config.GOOGLE_AI_API_KEY."
            )

        if generation_config is None:
            generation_config = default_generation_config()
        elif isinstance(generation_config, dict):
            generation_config = GenerateContentConfig(**generation_config)

        self.model_id = model_name
        self.generation_config = generation_config
        self.client = genai.Client(api_key=resolved_key)

        logger.info(f"Initialized KaruAssistant with model {self.model_id}")

    async def _generate(self, prompt: str) -> str:
        """Send one prompt and return the generated text. SDK errors propagate unchanged."""
        logger.debug(f"Prompt (first 100 chars): {prompt[:100]}...")

        # Run the blocking generate_content in an executor
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(
            None,
            lambda: self.client.models.generate_content(
                model=self.model_id,
                contents=prompt,
                config=self.generation_config
            )
        )

        usage = getattr(response, "usage_metadata", None)
        if usage is not None:
            logger.debug(f"Generated with {usage.total_token_count} tokens "
                         f"({usage.prompt_token_count} prompt, {usage.candidates_token_count} response)")

        return response.text

    @staticmethod
    def _template(name: str) -> str:
        prompt = PromptLoader.get(name)
        if prompt is None or not prompt.template:
            raise ConfigurationError(f"Prompt template '{name}' not found")
        return prompt.template

    async def ask(self, text: str) -> str:
        """
        Send text to the model as-is and return the generated response.

        Args:
            text (str): The input prompt text.

        Returns:
            str: The generated response text.
        """
        return await self._generate(text)

    async def summarize(
            self,
            text: str,
            language: Union[Languages, str] = Languages.EN,
            length: Union[SummaryLength, str] = SummaryLength.MEDIUM,
            style: Union[SummaryStyle, str] = SummaryStyle.PROFESSIONAL,
    ) -> str:
        """
        Summarize text in the given language, length and style.

        Args:
            text (str): The text to summarize.
            language: Language of the summary.
            length: Desired summary length.
            style: Tone of the summary.

        Returns:
            str: The summary as generated by the model.

        Raises:
            ConfigurationError: If the "summarize" template is missing.
            ValueError: If length is not a SummaryLength value.
        """
        template = self._template("summarize")
        length_phrase = SUMMARY_LENGTH_PHRASE[SummaryLength(length)]

        prompt = substitute(template, "language", _value(language))
        prompt = substitute(prompt, "length", length_phrase)
        prompt = substitute(prompt, "style", _value(style))
        prompt = substitute(prompt, "text", text)

        logger.info(f"Summarizing {len(text)} characters ({_value(length)}, {_value(style)})")
        return await self._generate(prompt)

    async def get_key_points(
            self,
            text: str,
            language: Union[Languages, str] = Languages.EN,
            max_points: int = 5,
    ) -> str:
        """
        Extract key points from text.

        Args:
            text (str): The text to extract key points from.
            language: Language of the key points.
            max_points (int): Maximum number of points to ask for.

        Returns:
            str: The key points as generated by the model.

        Raises:
            ConfigurationError: If the "keypoints" template is missing.
        """
        template = self._template("keypoints")

        prompt = substitute(template, "count", str(max_points))
        prompt = substitute(prompt, "language", _value(language))
        prompt = substitute(prompt, "text", text)

        logger.info(f"Extracting up to {max_points} key points from {len(text)} characters")
        return await self._generate(prompt)

    async def translate(
            self,
            text: str,
            target_language: Union[Languages, str],
            from_language: Optional[Union[Languages, str]] = None,
    ) -> TranslateResult:
        """
        Clean a chat message and translate it into the target language.

        Custom emoji markup is removed from the input before anything else.

        Args:
            text (str): The text to translate.
            target_language: Target language (enum member or free-form name/code).
            from_language: Optional source language.

        Returns:
            TranslateResult: The model's cleaned source text and its translation.

        Raises:
            ConfigurationError: If the "translate" template is missing.
            MalformedResponseError: If the reply lacks a non-empty Cleaned or Translated line.
        """
        input_text = EMOJI_MARKUP_PATTERN.sub("", text).strip()
        template = self._template("translate")

        prompt = substitute(template, "targetLanguage", _value(target_language), every=True)
        prompt = substitute(prompt, "text", input_text)
        prompt = substitute(prompt, "fromLanguage", _value(from_language) if from_language else "", every=True)

        logger.info(f"Translating {len(input_text)} characters to {_value(target_language)}")
        raw = (await self._generate(prompt) or "").strip()

        cleaned_match = CLEANED_PATTERN.search(raw)
        translated_match = TRANSLATED_PATTERN.search(raw)
        cleaned = cleaned_match.group(1).strip() if cleaned_match else ""
        translated = translated_match.group(1).strip() if translated_match else ""

        if not cleaned or not translated:
            raise MalformedResponseError(f"Malformed response from AI: {raw[:200]!r}")

        return TranslateResult(cleaned=cleaned, translated=translated)
