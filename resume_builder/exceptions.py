# resume_builder/exceptions.py


class ResumeBuilderError(Exception):
    """Base class for all resume builder errors"""


class ConfigError(ResumeBuilderError):
    """Raised when scoring configuration is invalid"""


class LLMProviderError(ResumeBuilderError):
    """Raised when the text-generation backend is unreachable or misbehaves"""


class SuggestionError(LLMProviderError):
    """Raised when suggestion enrichment fails or returns unusable output.

    The scorer catches this and falls back to templated suggestions.
    """


class KeywordExtractionError(LLMProviderError):
    """Raised when an AI keyword extraction response cannot be used"""
