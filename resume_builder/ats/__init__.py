# resume_builder/ats/__init__.py
"""
ATS (Applicant Tracking System) keyword extraction and scoring
"""

from resume_builder.ats.models import (
    Keyword, KeywordCategory, Importance, ScoreBreakdown
)
from resume_builder.ats.keyword_extractor import KeywordExtractor, extract_keywords
from resume_builder.ats.matcher import KeywordMatcher
from resume_builder.ats.scorer import ATSScorer, calculate_score
from resume_builder.ats.suggestions import (
    SuggestionProvider, TemplateSuggestionProvider, templated_suggestions
)
from resume_builder.ats.analyzer import ATSAnalyzer

__all__ = [
    'Keyword',
    'KeywordCategory',
    'Importance',
    'ScoreBreakdown',
    'KeywordExtractor',
    'extract_keywords',
    'KeywordMatcher',
    'ATSScorer',
    'calculate_score',
    'SuggestionProvider',
    'TemplateSuggestionProvider',
    'templated_suggestions',
    'ATSAnalyzer',
]
