# resume_builder/ai/keyword_extractor.py
import logging
from typing import List, Optional

from pydantic import ValidationError

from resume_builder.ai.ollama_client import OllamaClient
from resume_builder.ai.models import KeywordsResponse
from resume_builder.ats.keyword_extractor import KeywordExtractor
from resume_builder.ats.models import Keyword
from resume_builder.exceptions import KeywordExtractionError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an ATS (Applicant Tracking System) expert.
Extract key keywords from job descriptions and categorize them.
Return JSON in this exact format:
{ "keywords": [{ "keyword": "string", "category": "skill" | "experience" | "education" | "certification" | "general", "importance": "high" | "medium" | "low" }] }"""


class OllamaKeywordExtractor:
    """
    Extract keywords with a local LLM, falling back to curated term lists

    Exposes the same ``extract_keywords`` call as KeywordExtractor.
    """

    def __init__(
        self,
        ollama_client: Optional[OllamaClient] = None,
        fallback: Optional[KeywordExtractor] = None,
        max_keywords: int = 50
    ):
        self.ollama = ollama_client or OllamaClient()
        self.fallback = fallback or KeywordExtractor()
        self.max_keywords = max_keywords

    def extract_keywords(self, job_description: str) -> List[Keyword]:
        """
        Extract keywords from job description

        Never raises for backend problems; the curated extractor is used
        instead.
        """
        if not job_description or not job_description.strip():
            return []

        try:
            keywords = self._extract_with_llm(job_description)
        except KeywordExtractionError as e:
            logger.warning(f"AI keyword extraction failed, using curated lists: {e}")
            return self.fallback.extract_keywords(job_description)

        logger.info(f"Extracted {len(keywords)} keywords with AI")
        return keywords

    def _extract_with_llm(self, job_description: str) -> List[Keyword]:
        data = self.ollama.generate_json(
            prompt=f"Extract keywords from this job description:\n\n{job_description}",
            system_prompt=SYSTEM_PROMPT,
            temperature=0.3,
            max_tokens=1000
        )

        if data is None:
            raise KeywordExtractionError("No response from text-generation backend")

        try:
            parsed = KeywordsResponse.model_validate(data)
        except ValidationError as e:
            raise KeywordExtractionError(
                f"Malformed keyword response: {e.error_count()} errors"
            ) from e

        if not parsed.keywords:
            raise KeywordExtractionError("Keyword response was empty")

        return [
            Keyword(
                keyword=item.keyword,
                category=item.category,
                importance=item.importance
            )
            for item in parsed.keywords[:self.max_keywords]
        ]
