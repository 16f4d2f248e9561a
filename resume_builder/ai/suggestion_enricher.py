# resume_builder/ai/suggestion_enricher.py
import logging
from typing import List, Optional

from pydantic import ValidationError

from resume_builder.ai.ollama_client import OllamaClient
from resume_builder.ai.models import SuggestionsResponse
from resume_builder.ats.suggestions import SuggestionProvider
from resume_builder.exceptions import SuggestionError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an ATS expert providing actionable suggestions.
Based on the keyword analysis, provide 3-5 specific suggestions to improve the resume's ATS score.
Return JSON: { "suggestions": ["string"] }"""


class OllamaSuggestionProvider(SuggestionProvider):
    """
    Ask a local LLM for a short list of improvement suggestions

    The scorer trims the list to ``ScoringConfig.max_ai_suggestions``.
    """

    def __init__(self, ollama_client: Optional[OllamaClient] = None):
        """
        Args:
            ollama_client: Ollama client (creates default if None)
        """
        self.ollama = ollama_client or OllamaClient()

    def build_prompt(
        self,
        matched_count: int,
        total_count: int,
        missing_keywords: List[str]
    ) -> str:
        missing = ", ".join(missing_keywords) if missing_keywords else "none"
        return (
            f"Resume has {matched_count}/{total_count} keywords matched. "
            f"Missing: {missing}. Provide improvement suggestions."
        )

    def suggest(
        self,
        matched_count: int,
        total_count: int,
        missing_keywords: List[str]
    ) -> List[str]:
        prompt = self.build_prompt(matched_count, total_count, missing_keywords)

        data = self.ollama.generate_json(
            prompt=prompt,
            system_prompt=SYSTEM_PROMPT,
            temperature=0.3,
            max_tokens=400
        )

        if data is None:
            raise SuggestionError("No response from text-generation backend")

        try:
            parsed = SuggestionsResponse.model_validate(data)
        except ValidationError as e:
            raise SuggestionError(f"Malformed suggestion response: {e.error_count()} errors") from e

        suggestions = [s.strip() for s in parsed.suggestions if s and s.strip()]
        if not suggestions:
            raise SuggestionError("Suggestion response contained only blank items")

        logger.info(f"Received {len(suggestions)} AI suggestions")
        return suggestions
