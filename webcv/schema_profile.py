"""
Canonical profile schema.

PROFILE_SCHEMA is the JSON shape the model is asked for; the dataclasses
are what the rest of the app works with once a reply has been normalised.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

# example shape shown to the model
PROFILE_SCHEMA = {
    "name": "Full Name",
    "email": "email@example.com",
    "phone": "Phone Number",
    "website": "Website URL",
    "summary": "Professional summary paragraph",
    "work_experience": [
        {
            "job_title": "Job Title",
            "company": "Company Name",
            "dates": "Start Date - End Date",
            "responsibilities": ["Responsibility 1", "Responsibility 2", "Responsibility 3"],
        }
    ],
    "education": [
        {
            "degree": "Degree Name",
            "university": "University Name",
            "dates": "Start Date - End Date",
        }
    ],
    "skills": ["Skill 1", "Skill 2", "Skill 3"],
}

# ───────────────────────────────────────── fallbacks ──
PROFILE_FALLBACKS = {
    "name": "Name not found",
    "email": "Email not found",
    "phone": "Phone not found",
    "website": "Website not found",
    "summary": "Summary not found",
}
WORK_FALLBACKS = {
    "job_title": "Job title not found",
    "company": "Company not found",
    "dates": "Dates not found",
}
EDU_FALLBACKS = {
    "degree": "Degree not found",
    "university": "University not found",
    "dates": "Dates not found",
}
SKILLS_FALLBACK = "Skills not found"
RESPONSIBILITIES_FALLBACK = "Responsibilities not found"


# ───────────────────────────────────────── records ──
@dataclass(frozen=True)
class WorkItem:
    job_title: str = WORK_FALLBACKS["job_title"]
    company: str = WORK_FALLBACKS["company"]
    dates: str = WORK_FALLBACKS["dates"]
    responsibilities: Tuple[str, ...] = (RESPONSIBILITIES_FALLBACK,)


@dataclass(frozen=True)
class EduItem:
    degree: str = EDU_FALLBACKS["degree"]
    university: str = EDU_FALLBACKS["university"]
    dates: str = EDU_FALLBACKS["dates"]


@dataclass(frozen=True)
class Profile:
    name: str = PROFILE_FALLBACKS["name"]
    email: str = PROFILE_FALLBACKS["email"]
    phone: str = PROFILE_FALLBACKS["phone"]
    website: str = PROFILE_FALLBACKS["website"]
    summary: str = PROFILE_FALLBACKS["summary"]
    work_experience: Tuple[WorkItem, ...] = ()
    education: Tuple[EduItem, ...] = ()
    skills: Tuple[str, ...] = (SKILLS_FALLBACK,)

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON shape (lists, not tuples) – safe to feed back into normalize()."""
        return _listify(asdict(self))


def _listify(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _listify(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    return value
