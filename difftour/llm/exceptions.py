"""LLM-related exception classes.

Contains all exception classes for handling model responses:
- LLMError: Base exception for LLM-related errors
- JSONParseError: Raised when a model response cannot be parsed
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class JSONParseError(LLMError):
    """Raised when the LLM response cannot be parsed as valid JSON."""

    pass
