import pytest

from resume_builder.models import (
    Resume, PersonalInfo, ExperienceEntry, EducationEntry, SkillGroup
)


@pytest.fixture
def personal_info() -> PersonalInfo:
    return PersonalInfo(
        full_name="Jane Doe",
        email="jane.doe@acmecorp.io",
        phone="555-123-4567",
        location="Austin, TX",
        linkedin="linkedin.com/in/janedoe",
    )


@pytest.fixture
def full_resume(personal_info) -> Resume:
    """Resume with every section populated"""
    return Resume(
        personal_info=personal_info,
        summary="Frontend engineer focused on JavaScript and React applications.",
        experience=[
            ExperienceEntry(
                id="exp1",
                company="Acme Corp",
                position="Senior Frontend Engineer",
                start_date="2019-01",
                current=True,
                responsibilities=[
                    "Developed a React design system used by 12 teams",
                    "Managed migration from Webpack to Vite",
                ],
            )
        ],
        education=[
            EducationEntry(
                id="edu1",
                institution="State University",
                degree="Bachelor of Science",
                field="Computer Science",
            )
        ],
        skills=[
            SkillGroup(id="sk1", category="Languages", skills=["TypeScript", "Python"]),
            SkillGroup(id="sk2", category="Tools", skills=["Docker", "Jira", "Figma"]),
        ],
    )


@pytest.fixture
def bare_resume(personal_info) -> Resume:
    """Resume with contact details only"""
    return Resume(personal_info=personal_info)


@pytest.fixture
def resume_dict() -> dict:
    """Camel-cased resume body as sent by the editor"""
    return {
        "personalInfo": {
            "fullName": "Jane Doe",
            "email": "jane.doe@acmecorp.io",
            "phone": "555-123-4567",
            "location": "Austin, TX",
        },
        "summary": "Frontend engineer focused on JavaScript and React applications.",
        "experience": [
            {
                "id": "exp1",
                "company": "Acme Corp",
                "position": "Senior Frontend Engineer",
                "startDate": "2019-01",
                "current": True,
                "responsibilities": ["Developed a React design system"],
            }
        ],
        "education": [
            {
                "id": "edu1",
                "institution": "State University",
                "degree": "Bachelor of Science",
                "field": "Computer Science",
            }
        ],
        "skills": [
            {"id": "sk1", "category": "Languages", "skills": ["TypeScript", "Python"]}
        ],
    }
