# resume_builder/ats/scorer.py
import math
import logging
from typing import List, Optional

from resume_builder.models import Resume
from resume_builder.config import ScoringConfig, FormatPolicy
from resume_builder.exceptions import SuggestionError
from resume_builder.ats.models import Keyword, ScoreBreakdown
from resume_builder.ats.matcher import KeywordMatcher
from resume_builder.ats.suggestions import SuggestionProvider, templated_suggestions

logger = logging.getLogger(__name__)


def round_score(value: float) -> int:
    """Round half up and clamp to 0-100"""
    return max(0, min(100, int(math.floor(value + 0.5))))


class ATSScorer:
    """
    Calculate ATS compatibility score for a resume against extracted keywords

    Stateless between calls; a single instance can be shared across requests.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        suggestion_provider: Optional[SuggestionProvider] = None
    ):
        """
        Args:
            config: Weights and format policy (standard preset if None)
            suggestion_provider: Optional enrichment for suggestions; failures
                fall back to templated suggestions
        """
        self.config = config or ScoringConfig.preset('standard')
        self.suggestion_provider = suggestion_provider
        self.keyword_matcher = KeywordMatcher()

    def calculate_score(
        self,
        resume: Resume,
        keywords: List[Keyword]
    ) -> ScoreBreakdown:
        """
        Score resume against keywords

        Args:
            resume: Validated resume
            keywords: Keywords from extraction; ``matched`` is set in place

        Returns:
            ScoreBreakdown with component scores and suggestions
        """
        matched, missing = self.keyword_matcher.match_keywords(resume, keywords)

        keyword_score = self._calculate_keyword_score(len(matched), len(keywords))
        format_score = self._calculate_format_score(resume)
        section_score = self._calculate_section_completeness(resume)

        weights = self.config.weights
        overall = round_score(
            keyword_score * weights['keyword'] +
            format_score * weights['format'] +
            section_score * weights['section']
        )

        suggestions = self._generate_suggestions(len(matched), len(keywords), missing)

        score = ScoreBreakdown(
            overall_score=overall,
            keyword_match_score=keyword_score,
            format_score=format_score,
            section_completeness_score=section_score,
            keywords=keywords,
            suggestions=suggestions,
            matched_keywords=matched,
            missing_keywords=missing,
            pass_threshold_score=self.config.pass_threshold
        )

        logger.info(
            f"ATS Score: {score.overall_score}/100 ({score.grade}) - "
            f"{len(matched)}/{len(keywords)} keywords matched"
        )
        return score

    def _calculate_keyword_score(self, matched_count: int, total: int) -> int:
        """Percentage of keywords found in the resume (0 when there are none)"""
        if total == 0:
            return 0
        return round_score(matched_count / total * 100)

    def _calculate_format_score(self, resume: Resume) -> int:
        """
        Calculate format score from required contact fields

        PARTIAL_CREDIT: name+email+phone 100, name+email 70, otherwise 40
        ALL_OR_NOTHING: name+email+phone 100, otherwise 0
        """
        personal = resume.personal_info
        has_name = bool(personal.full_name)
        has_email = bool(personal.email)
        has_phone = bool(personal.phone)

        if has_name and has_email and has_phone:
            return 100

        if self.config.format_policy is FormatPolicy.ALL_OR_NOTHING:
            return 0

        if has_name and has_email:
            return 70
        return 40

    def _calculate_section_completeness(self, resume: Resume) -> int:
        """Share of summary/experience/education/skills sections present"""
        sections_present = sum([
            bool(resume.summary),
            bool(resume.experience),
            bool(resume.education),
            bool(resume.skills),
        ])
        return round_score(sections_present / 4 * 100)

    def _generate_suggestions(
        self,
        matched_count: int,
        total: int,
        missing: List[str]
    ) -> List[str]:
        """Templated suggestions, optionally replaced by the enrichment provider"""
        suggestions = templated_suggestions(missing)

        if self.suggestion_provider is None:
            return suggestions

        try:
            enriched = self.suggestion_provider.suggest(
                matched_count,
                total,
                missing[:self.config.max_missing_for_ai]
            )
        except SuggestionError as e:
            logger.warning(f"Suggestion enrichment failed, using defaults: {e}")
            return suggestions
        except Exception:
            logger.exception("Unexpected error from suggestion provider, using defaults")
            return suggestions

        if not enriched:
            logger.warning("Suggestion provider returned nothing, using defaults")
            return suggestions

        return list(enriched)[:self.config.max_ai_suggestions]


_default_scorer = ATSScorer()


def calculate_score(resume: Resume, keywords: List[Keyword]) -> ScoreBreakdown:
    """Score with the standard preset and templated suggestions"""
    return _default_scorer.calculate_score(resume, keywords)
