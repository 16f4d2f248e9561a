# resume_builder/validator.py
import logging
import re
from typing import List, Tuple

from resume_builder.models import Resume, ExperienceEntry, EducationEntry

logger = logging.getLogger(__name__)


class ResumeValidator:
    """Validate resume structure before it is scored or exported"""

    EMAIL_PATTERN = re.compile(r'^[\w.+-]+@[\w-]+(\.[\w-]+)+$')
    # "responsible for" is a scored experience keyword, so it is not flagged
    WEAK_PHRASES = ['worked on', 'helped with', 'involved in']

    def validate_resume(self, resume: Resume) -> Tuple[bool, List[str]]:
        """
        Validate complete resume

        Returns:
            Tuple of (is_valid, list of errors/warnings)
        """
        issues = []
        personal = resume.personal_info

        # Required contact fields
        if not personal.full_name:
            issues.append("ERROR: Missing full name")
        if not personal.email:
            issues.append("ERROR: Missing email")
        elif not self.EMAIL_PATTERN.match(personal.email):
            issues.append(f"ERROR: Invalid email address '{personal.email}'")
        if not personal.phone:
            issues.append("ERROR: Missing phone")
        if not personal.location:
            issues.append("ERROR: Missing location")

        # Recommended sections
        if not resume.summary:
            issues.append("WARNING: No summary")
        if not resume.experience:
            issues.append("WARNING: No experience section")
        if not resume.education:
            issues.append("WARNING: No education section")
        if not resume.skills:
            issues.append("WARNING: No skills section")

        for i, exp in enumerate(resume.experience):
            issues.extend(self._validate_experience(exp, i))

        for i, edu in enumerate(resume.education):
            issues.extend(self._validate_education(edu, i))

        for group in resume.skills:
            if not group.category:
                issues.append(f"ERROR: Skills[{group.id}]: Missing category")
            if not group.skills:
                issues.append(f"ERROR: Skills[{group.id}]: At least one skill is required")

        is_valid = not any(issue.startswith("ERROR") for issue in issues)
        if not is_valid:
            logger.debug(f"Resume failed validation with {len(issues)} issues")

        return is_valid, issues

    def _validate_experience(self, exp: ExperienceEntry, index: int) -> List[str]:
        """Validate single experience entry"""
        issues = []
        prefix = f"Experience[{index}] ({exp.company or 'unknown'})"

        if not exp.company:
            issues.append(f"ERROR: {prefix}: Missing company")
        if not exp.position:
            issues.append(f"ERROR: {prefix}: Missing position")
        if not exp.start_date:
            issues.append(f"ERROR: {prefix}: Missing start date")

        if not exp.responsibilities:
            issues.append(f"WARNING: {prefix}: No responsibilities listed")

        for item in exp.responsibilities:
            text_lower = item.lower()
            for weak in self.WEAK_PHRASES:
                if weak in text_lower:
                    issues.append(f"INFO: {prefix}: Contains weak phrase '{weak}'")

        return issues

    def _validate_education(self, edu: EducationEntry, index: int) -> List[str]:
        """Validate single education entry"""
        issues = []
        prefix = f"Education[{index}] ({edu.institution or 'unknown'})"

        if not edu.institution:
            issues.append(f"ERROR: {prefix}: Missing institution")
        if not edu.degree:
            issues.append(f"ERROR: {prefix}: Missing degree")
        if not edu.field:
            issues.append(f"ERROR: {prefix}: Missing field of study")

        return issues

    def generate_report(self, resume: Resume) -> str:
        """Generate validation report"""
        is_valid, issues = self.validate_resume(resume)

        report = f"""
=== Resume Validation Report ===
Name: {resume.personal_info.full_name}
Experience Entries: {len(resume.experience)}
Education Entries: {len(resume.education)}
Skill Groups: {len(resume.skills)}

Status: {'VALID' if is_valid else 'INVALID'}

Issues Found: {len(issues)}
"""

        if issues:
            report += "\n".join(f"  - {issue}" for issue in issues)
        else:
            report += "\n  No issues found!"

        return report
