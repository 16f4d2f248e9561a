# resume_builder/web/schemas.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from resume_builder.models import (
    Resume, PersonalInfo, ExperienceEntry, EducationEntry, SkillGroup
)
from resume_builder.ats.models import KeywordCategory, Importance


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, as the editor sends them"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============= Resume =============

class PersonalInfoSchema(CamelModel):
    full_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    location: str = Field(min_length=1)
    linkedin: Optional[str] = None
    website: Optional[str] = None


class ExperienceSchema(CamelModel):
    id: str
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    location: Optional[str] = None
    start_date: str = Field(min_length=1)
    end_date: Optional[str] = None
    current: bool = False
    responsibilities: List[str] = Field(default_factory=list)


class EducationSchema(CamelModel):
    id: str
    institution: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field: str = Field(min_length=1)
    location: Optional[str] = None
    graduation_date: Optional[str] = None
    gpa: Optional[str] = None


class SkillSchema(CamelModel):
    id: str
    category: str = Field(min_length=1)
    skills: List[str] = Field(min_length=1)


class ResumeSchema(CamelModel):
    personal_info: PersonalInfoSchema
    summary: Optional[str] = None
    experience: List[ExperienceSchema] = Field(default_factory=list)
    education: List[EducationSchema] = Field(default_factory=list)
    skills: List[SkillSchema] = Field(default_factory=list)

    def to_resume(self) -> Resume:
        """Convert the validated request body into the engine's Resume"""
        personal = self.personal_info
        return Resume(
            personal_info=PersonalInfo(
                full_name=personal.full_name,
                email=str(personal.email),
                phone=personal.phone,
                location=personal.location,
                linkedin=personal.linkedin,
                website=personal.website,
            ),
            summary=self.summary,
            experience=[
                ExperienceEntry(
                    id=e.id,
                    company=e.company,
                    position=e.position,
                    location=e.location,
                    start_date=e.start_date,
                    end_date=e.end_date,
                    current=e.current,
                    responsibilities=list(e.responsibilities),
                )
                for e in self.experience
            ],
            education=[
                EducationEntry(
                    id=e.id,
                    institution=e.institution,
                    degree=e.degree,
                    field=e.field,
                    location=e.location,
                    graduation_date=e.graduation_date,
                    gpa=e.gpa,
                )
                for e in self.education
            ],
            skills=[
                SkillGroup(id=s.id, category=s.category, skills=list(s.skills))
                for s in self.skills
            ],
        )


# ============= Requests =============

class AnalyzeRequest(CamelModel):
    job_description: str = Field(min_length=10)
    resume: ResumeSchema


class OptimizeRequest(CamelModel):
    job_description: str = Field(min_length=10)
    current_resume: Optional[ResumeSchema] = None


class JobDescriptionRequest(CamelModel):
    description: str = Field(min_length=10)


# ============= Responses =============

class KeywordSchema(CamelModel):
    keyword: str
    category: KeywordCategory
    importance: Importance
    matched: bool = False


class AnalysisSchema(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    keyword_match_score: int = Field(ge=0, le=100)
    format_score: int = Field(ge=0, le=100)
    section_completeness_score: int = Field(ge=0, le=100)
    keywords: List[KeywordSchema]
    suggestions: List[str]
    matched_keywords: List[str]
    missing_keywords: List[str]


class AnalyzeResponse(CamelModel):
    keywords: List[KeywordSchema]
    analysis: AnalysisSchema


class OptimizeResponse(CamelModel):
    resume: Dict[str, Any]
    analysis: AnalysisSchema
    suggestions: List[str]
    keywords: List[KeywordSchema]


class KeywordsResponse(CamelModel):
    keywords: List[KeywordSchema]
