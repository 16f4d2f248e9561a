# resume_builder/ats/matcher.py
import logging
from typing import List, Tuple

from resume_builder.models import Resume
from resume_builder.ats.models import Keyword

logger = logging.getLogger(__name__)


class KeywordMatcher:
    """
    Match keywords from JD against resume content
    """

    def build_resume_text(self, resume: Resume) -> str:
        """Build full searchable lowercase text from resume field values"""
        return ' '.join(resume.iter_text_values()).lower()

    def match_keywords(
        self,
        resume: Resume,
        keywords: List[Keyword]
    ) -> Tuple[List[str], List[str]]:
        """
        Match keywords against resume

        Sets ``matched`` on each keyword in place.

        Args:
            resume: Resume to search
            keywords: Keywords to match

        Returns:
            (matched, missing) keyword strings, in keyword order
        """
        resume_text = self.build_resume_text(resume)

        matched = []
        missing = []

        for keyword in keywords:
            keyword.matched = keyword.keyword.lower() in resume_text
            if keyword.matched:
                matched.append(keyword.keyword)
            else:
                missing.append(keyword.keyword)

        logger.debug(f"Matched {len(matched)}/{len(keywords)} keywords")
        return matched, missing
