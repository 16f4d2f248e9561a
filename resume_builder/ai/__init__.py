"""
Optional AI enrichment backed by a local Ollama model
"""

from resume_builder.ai.ollama_client import OllamaClient
from resume_builder.ai.suggestion_enricher import OllamaSuggestionProvider
from resume_builder.ai.keyword_extractor import OllamaKeywordExtractor

__all__ = [
    'OllamaClient',
    'OllamaSuggestionProvider',
    'OllamaKeywordExtractor',
]
