"""
Exceptions raised by the assistant.

Errors coming from the google-genai SDK are not wrapped; they reach the caller as-is.
"""


class KaruAssistantError(Exception):
    """Base class for errors raised by this library."""
    pass


class ConfigurationError(KaruAssistantError):
    """Raised when a credential or a prompt template is missing."""
    pass


class MalformedResponseError(KaruAssistantError):
    """Raised when the model output does not have the expected shape."""
    pass
