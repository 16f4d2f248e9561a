# resume_builder/ats/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Any
from enum import Enum


class KeywordCategory(Enum):
    """What a keyword says about the role"""
    SKILL = "skill"                 # Technical skills, soft skills and tools
    EXPERIENCE = "experience"       # Experience-indicating phrases
    EDUCATION = "education"         # Degrees and education markers
    CERTIFICATION = "certification"
    GENERAL = "general"


class Importance(Enum):
    """How much a keyword matters to the job"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class Keyword:
    """Keyword extracted from a job description"""
    keyword: str
    category: KeywordCategory
    importance: Importance
    matched: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keyword': self.keyword,
            'category': self.category.value,
            'importance': self.importance.value,
            'matched': self.matched,
        }


@dataclass
class ScoreBreakdown:
    """Complete ATS scoring result"""
    overall_score: int             # 0-100

    # Component scores
    keyword_match_score: int       # 0-100
    format_score: int              # 0-100
    section_completeness_score: int  # 0-100

    # Detailed analysis
    keywords: List[Keyword] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)

    pass_threshold_score: int = 65

    @property
    def grade(self) -> str:
        """Get letter grade"""
        if self.overall_score >= 90:
            return "A+"
        elif self.overall_score >= 85:
            return "A"
        elif self.overall_score >= 80:
            return "A-"
        elif self.overall_score >= 75:
            return "B+"
        elif self.overall_score >= 70:
            return "B"
        elif self.overall_score >= 65:
            return "B-"
        elif self.overall_score >= 60:
            return "C+"
        elif self.overall_score >= 55:
            return "C"
        else:
            return "F"

    @property
    def pass_threshold(self) -> bool:
        """Does resume likely pass ATS screening?"""
        return self.overall_score >= self.pass_threshold_score

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary used on the wire"""
        return {
            'overallScore': self.overall_score,
            'keywordMatchScore': self.keyword_match_score,
            'formatScore': self.format_score,
            'sectionCompletenessScore': self.section_completeness_score,
            'keywords': [k.to_dict() for k in self.keywords],
            'suggestions': list(self.suggestions),
            'matchedKeywords': list(self.matched_keywords),
            'missingKeywords': list(self.missing_keywords),
        }
