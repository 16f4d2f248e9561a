# resume_builder/ats/analyzer.py
import logging
from typing import List, Optional, Tuple

from resume_builder.models import Resume
from resume_builder.ats.models import Keyword, ScoreBreakdown
from resume_builder.ats.keyword_extractor import KeywordExtractor
from resume_builder.ats.scorer import ATSScorer

logger = logging.getLogger(__name__)


class ATSAnalyzer:
    """
    Run keyword extraction and scoring for one job description / resume pair
    """

    def __init__(
        self,
        keyword_extractor=None,
        scorer: Optional[ATSScorer] = None
    ):
        """
        Args:
            keyword_extractor: Anything with ``extract_keywords(text)``
                (curated-list extractor if None)
            scorer: ATS scorer (standard preset if None)
        """
        self.keyword_extractor = keyword_extractor or KeywordExtractor()
        self.scorer = scorer or ATSScorer()

    def extract_keywords(self, job_description: str) -> List[Keyword]:
        return self.keyword_extractor.extract_keywords(job_description)

    def analyze(
        self,
        job_description: str,
        resume: Resume
    ) -> Tuple[List[Keyword], ScoreBreakdown]:
        """
        Extract keywords from the JD and score the resume against them

        Returns:
            (keywords, score); keywords carry their ``matched`` flags
        """
        logger.info("Analyzing resume against job description")

        keywords = self.extract_keywords(job_description)
        score = self.scorer.calculate_score(resume, keywords)

        return keywords, score
