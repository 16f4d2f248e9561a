# resume_builder/models.py
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, Iterator


@dataclass
class PersonalInfo:
    """Contact block at the top of the resume"""
    full_name: str
    email: str
    phone: str
    location: str
    linkedin: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'fullName': self.full_name,
            'email': self.email,
            'phone': self.phone,
            'location': self.location,
        }
        if self.linkedin is not None:
            data['linkedin'] = self.linkedin
        if self.website is not None:
            data['website'] = self.website
        return data


@dataclass
class ExperienceEntry:
    """Work experience entry"""
    id: str
    company: str
    position: str
    start_date: str
    location: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    responsibilities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'company': self.company,
            'position': self.position,
            'location': self.location,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'current': self.current,
            'responsibilities': list(self.responsibilities),
        }


@dataclass
class EducationEntry:
    """Education entry"""
    id: str
    institution: str
    degree: str
    field: str
    location: Optional[str] = None
    graduation_date: Optional[str] = None
    gpa: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'institution': self.institution,
            'degree': self.degree,
            'field': self.field,
            'location': self.location,
            'graduationDate': self.graduation_date,
            'gpa': self.gpa,
        }


@dataclass
class SkillGroup:
    """Named group of skills (e.g. 'Languages': ['Python', 'Go'])"""
    id: str
    category: str
    skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Resume:
    """Complete structured resume, as edited by the user"""
    personal_info: PersonalInfo
    summary: Optional[str] = None
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillGroup] = field(default_factory=list)

    def iter_text_values(self) -> Iterator[str]:
        """
        Yield every user-entered text value in the resume

        Identifiers and flags are skipped; they are bookkeeping, not content.
        """
        personal = self.personal_info
        for value in (
            personal.full_name, personal.email, personal.phone,
            personal.location, personal.linkedin, personal.website
        ):
            if value:
                yield value

        if self.summary:
            yield self.summary

        for exp in self.experience:
            for value in (exp.company, exp.position, exp.location,
                          exp.start_date, exp.end_date):
                if value:
                    yield value
            for item in exp.responsibilities:
                if item:
                    yield item

        for edu in self.education:
            for value in (edu.institution, edu.degree, edu.field,
                          edu.location, edu.graduation_date, edu.gpa):
                if value:
                    yield value

        for group in self.skills:
            if group.category:
                yield group.category
            for skill in group.skills:
                if skill:
                    yield skill

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary used on the wire"""
        data = {
            'personalInfo': self.personal_info.to_dict(),
            'experience': [e.to_dict() for e in self.experience],
            'education': [e.to_dict() for e in self.education],
            'skills': [s.to_dict() for s in self.skills],
        }
        if self.summary is not None:
            data['summary'] = self.summary
        return data

    def __repr__(self):
        return (
            f"<Resume: {self.personal_info.full_name} | "
            f"{len(self.experience)} roles, {len(self.education)} degrees, "
            f"{len(self.skills)} skill groups>"
        )
