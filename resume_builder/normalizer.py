# resume_builder/normalizer.py
import re
import uuid
import logging
from typing import Any, Dict, List, Optional

import ftfy

from resume_builder.models import (
    Resume, PersonalInfo, ExperienceEntry, EducationEntry, SkillGroup
)

logger = logging.getLogger(__name__)


class ResumeNormalizer:
    """
    Repair loosely structured resume data into a typed Resume

    Runs before validation and scoring. Input may come from the editor
    (camelCase keys), from YAML files (snake_case keys) or from text
    scraping / LLM output (missing collections, strings where lists are
    expected). Required contact fields are never invented: a missing value
    becomes an empty string and is left for the validator to report.
    """

    MULTIPLE_SPACES = re.compile(r'\s+')
    BULLET_MARKER = re.compile(r'^[\-\*•·]\s*')
    ONGOING_END_DATES = {'present', 'current', 'now'}
    DEFAULT_SKILL_CATEGORY = "Skills"

    def normalize(self, data: Optional[Dict[str, Any]]) -> Resume:
        """
        Normalize raw resume data

        Args:
            data: Resume mapping (camelCase or snake_case keys)

        Returns:
            Resume with cleaned text and empty collections where data was missing
        """
        data = data if isinstance(data, dict) else {}

        resume = Resume(
            personal_info=self._normalize_personal(
                self._get(data, 'personalInfo', 'personal_info', 'personal') or {}
            ),
            summary=self._clean_optional(data.get('summary')),
            experience=self._normalize_entries(
                data.get('experience'), self._normalize_experience, 'experience'
            ),
            education=self._normalize_entries(
                data.get('education'), self._normalize_education, 'education'
            ),
            skills=self._normalize_skills(data.get('skills')),
        )

        logger.debug(f"Normalized {resume!r}")
        return resume

    def clean_text(self, value: Any) -> str:
        """Fix encoding damage and collapse whitespace"""
        if value is None:
            return ""
        text = ftfy.fix_text(str(value), normalization="NFC")
        text = text.replace('\u200b', '').replace('\ufeff', '')
        return self.MULTIPLE_SPACES.sub(' ', text).strip()

    def _clean_optional(self, value: Any) -> Optional[str]:
        text = self.clean_text(value)
        return text or None

    @staticmethod
    def _get(data: Dict[str, Any], *keys: str) -> Any:
        """First present value among alternative key spellings"""
        for key in keys:
            if key in data and data[key] is not None:
                return data[key]
        return None

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex[:10]

    def _normalize_personal(self, data: Any) -> PersonalInfo:
        if not isinstance(data, dict):
            logger.warning("Personal info is not a mapping, using empty contact block")
            data = {}

        return PersonalInfo(
            full_name=self.clean_text(self._get(data, 'fullName', 'full_name', 'name')),
            email=self.clean_text(data.get('email')),
            phone=self.clean_text(data.get('phone')),
            location=self.clean_text(data.get('location')),
            linkedin=self._clean_optional(data.get('linkedin')),
            website=self._clean_optional(data.get('website')),
        )

    def _normalize_entries(self, items: Any, normalize_one, section: str) -> List:
        if items is None:
            return []
        if isinstance(items, dict):
            items = [items]
        if not isinstance(items, list):
            logger.warning(f"Ignoring {section}: expected a list, got {type(items).__name__}")
            return []

        entries = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning(f"Skipping {section}[{index}]: not a mapping")
                continue
            entries.append(normalize_one(item))
        return entries

    def _normalize_experience(self, data: Dict[str, Any]) -> ExperienceEntry:
        end_date = self._clean_optional(self._get(data, 'endDate', 'end_date'))
        current = data.get('current', False)
        if isinstance(current, str):
            current = current.strip().lower() in ('true', 'yes', '1')
        current = bool(current)
        if end_date and end_date.lower() in self.ONGOING_END_DATES:
            current = True

        return ExperienceEntry(
            id=self.clean_text(data.get('id')) or self._new_id(),
            company=self.clean_text(data.get('company')),
            position=self.clean_text(self._get(data, 'position', 'title')),
            location=self._clean_optional(data.get('location')),
            start_date=self.clean_text(self._get(data, 'startDate', 'start_date')),
            end_date=end_date,
            current=current,
            responsibilities=self._normalize_lines(
                self._get(data, 'responsibilities', 'bullets')
            ),
        )

    def _normalize_education(self, data: Dict[str, Any]) -> EducationEntry:
        return EducationEntry(
            id=self.clean_text(data.get('id')) or self._new_id(),
            institution=self.clean_text(self._get(data, 'institution', 'school')),
            degree=self.clean_text(data.get('degree')),
            field=self.clean_text(self._get(data, 'field', 'major')),
            location=self._clean_optional(data.get('location')),
            graduation_date=self._clean_optional(
                self._get(data, 'graduationDate', 'graduation_date')
            ),
            gpa=self._clean_optional(data.get('gpa')),
        )

    def _normalize_lines(self, value: Any) -> List[str]:
        """Accept a list of bullets or a newline separated block"""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.splitlines()
        if not isinstance(value, list):
            value = [value]

        lines = []
        for item in value:
            text = self.clean_text(item)
            text = self.BULLET_MARKER.sub('', text)
            if text:
                lines.append(text)
        return lines

    def _normalize_skills(self, value: Any) -> List[SkillGroup]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            logger.warning(f"Ignoring skills: expected a list, got {type(value).__name__}")
            return []

        groups = []
        loose = []
        for item in value:
            if isinstance(item, dict):
                skills = self._split_skills(item.get('skills'))
                if not skills:
                    continue
                groups.append(SkillGroup(
                    id=self.clean_text(item.get('id')) or self._new_id(),
                    category=self.clean_text(item.get('category')) or self.DEFAULT_SKILL_CATEGORY,
                    skills=skills,
                ))
            else:
                loose.extend(self._split_skills(item))

        if loose:
            groups.append(SkillGroup(
                id=self._new_id(),
                category=self.DEFAULT_SKILL_CATEGORY,
                skills=loose,
            ))
        return groups

    def _split_skills(self, value: Any) -> List[str]:
        """Skills may arrive as a list or a comma separated string"""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(',')
        if not isinstance(value, list):
            value = [value]
        return [s for s in (self.clean_text(v) for v in value) if s]


def normalize_resume(data: Optional[Dict[str, Any]]) -> Resume:
    """Normalize raw resume data with the default normalizer"""
    return ResumeNormalizer().normalize(data)
