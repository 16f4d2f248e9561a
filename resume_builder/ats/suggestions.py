# resume_builder/ats/suggestions.py
from abc import ABC, abstractmethod
from typing import List

SUGGESTION_TEMPLATE = 'Consider adding experience or skills related to "{keyword}"'


def templated_suggestions(missing_keywords: List[str]) -> List[str]:
    """One suggestion per missing keyword"""
    return [SUGGESTION_TEMPLATE.format(keyword=k) for k in missing_keywords]


class SuggestionProvider(ABC):
    """Source of improvement suggestions for a scored resume"""

    @abstractmethod
    def suggest(
        self,
        matched_count: int,
        total_count: int,
        missing_keywords: List[str]
    ) -> List[str]:
        """
        Produce suggestions for the given match result

        Raises:
            SuggestionError: if no usable suggestions could be produced
        """


class TemplateSuggestionProvider(SuggestionProvider):
    """Deterministic suggestions built from the missing keywords"""

    def suggest(
        self,
        matched_count: int,
        total_count: int,
        missing_keywords: List[str]
    ) -> List[str]:
        return templated_suggestions(missing_keywords)
