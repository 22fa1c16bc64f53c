# karu_assistant/config.py
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables at module import time, BEFORE class definition
load_dotenv()

class Config:
    """Stores configuration settings for the assistant."""

    # --- Package Root ---
    # Assumes config.py sits at the top of the karu_assistant package
    PACKAGE_ROOT = Path(__file__).parent

    # --- Directories ---
    DATA_DIR = PACKAGE_ROOT / "data"
    PROMPTS_DIR = DATA_DIR / "prompts"

    # --- Files ---
    PROMPTS_FILE = PROMPTS_DIR / "prompts.json" # Prompt name -> {description, template}

    # --- API Credentials ---
    API_KEY_ENV_VAR = "GOOGLE_AI_API_KEY"
    # Process-wide fallback, assigned by the host application if it prefers not to use env vars
    GOOGLE_AI_API_KEY: Optional[str] = None

    # --- AI Model Settings ---
    DEFAULT_MODEL = "gemma-3n-e4b-it"
    DEFAULT_TEMPERATURE = 0.3
    DEFAULT_MAX_OUTPUT_TOKENS = 1024
    DEFAULT_TOP_P = 0.9
    DEFAULT_TOP_K = 10

    # --- Logging ---
    LOG_LEVEL = os.getenv("KARU_LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("KARU_LOG_FILE") # Console only when unset

    @classmethod
    def resolve_api_key(cls, explicit: Optional[str] = None) -> Optional[str]:
        """
        Resolve the API key: explicit argument, then environment, then the process-wide value.

        The environment is read on every call so keys exported after import are picked up.
        """
        if explicit:
            return explicit
        from_env = os.getenv(cls.API_KEY_ENV_VAR)
        if from_env:
            return from_env
        return cls.GOOGLE_AI_API_KEY
