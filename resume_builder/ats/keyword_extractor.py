# resume_builder/ats/keyword_extractor.py
import logging
from typing import List, Tuple

from resume_builder.ats.models import Keyword, KeywordCategory, Importance

logger = logging.getLogger(__name__)


# Languages, frameworks, platforms and tooling
TECHNICAL_TERMS: Tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
    "react", "angular", "vue", "node", "express", "django", "flask", "spring", "asp.net",
    "html", "css", "sass", "less", "webpack", "vite", "babel", "docker", "kubernetes",
    "aws", "azure", "gcp", "firebase", "mongodb", "mysql", "postgresql", "redis", "graphql",
    "rest", "api", "git", "github", "gitlab", "ci/cd", "jenkins", "travis", "circle",
)

SOFT_SKILLS: Tuple[str, ...] = (
    "communication", "teamwork", "leadership", "problem solving", "analytical",
    "time management", "organization", "creativity", "adaptability", "flexibility",
    "project management", "critical thinking", "attention to detail", "collaboration",
)

TOOLS: Tuple[str, ...] = (
    "vscode", "intellij", "eclipse", "xcode", "android studio", "postman", "jira",
    "confluence", "slack", "teams", "office", "photoshop", "figma", "sketch",
)

EDUCATION_MARKERS: Tuple[str, ...] = (
    "degree", "bachelor", "master", "phd", "certification", "diploma",
)

EXPERIENCE_PHRASES: Tuple[str, ...] = (
    "years of experience",
    "year experience",
    "years experience",
    "professional experience",
    "worked with",
    "responsible for",
    "led",
    "managed",
    "developed",
    "implemented",
    "created",
)


class KeywordExtractor:
    """
    Extract keywords from job descriptions using curated term lists

    Every term is checked independently with a case-insensitive substring
    test, so overlapping terms ("java" / "javascript") both match and the
    same word may be emitted by more than one list.
    """

    # (terms, category, importance) in emission order
    TERM_GROUPS = (
        (TECHNICAL_TERMS, KeywordCategory.SKILL, Importance.HIGH),
        (SOFT_SKILLS, KeywordCategory.SKILL, Importance.MEDIUM),
        (TOOLS, KeywordCategory.SKILL, Importance.MEDIUM),
        (EDUCATION_MARKERS, KeywordCategory.EDUCATION, Importance.HIGH),
        (EXPERIENCE_PHRASES, KeywordCategory.EXPERIENCE, Importance.HIGH),
    )

    def extract_keywords(self, job_description: str) -> List[Keyword]:
        """
        Extract keywords from job description

        Args:
            job_description: Full JD text

        Returns:
            List of Keyword objects with matched=False, in curated-list order
        """
        if not job_description or not job_description.strip():
            logger.debug("Empty job description, no keywords extracted")
            return []

        text_lower = job_description.lower()
        keywords = []

        for terms, category, importance in self.TERM_GROUPS:
            for term in terms:
                if term in text_lower:
                    keywords.append(Keyword(
                        keyword=term,
                        category=category,
                        importance=importance
                    ))

        logger.info(f"Extracted {len(keywords)} keywords from job description")
        return keywords


_default_extractor = KeywordExtractor()


def extract_keywords(job_description: str) -> List[Keyword]:
    """Extract keywords with the default curated term lists"""
    return _default_extractor.extract_keywords(job_description)
