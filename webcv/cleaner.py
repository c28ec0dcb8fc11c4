"""
Profile normalisation.

Turns whatever JSON the model produced into a Profile.  normalize() is
total: missing keys, wrong types and prose-instead-of-arrays all fall
back to the literals in schema_profile, and nothing here raises.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, List, Tuple

from webcv.schema_profile import (
    EDU_FALLBACKS,
    PROFILE_FALLBACKS,
    RESPONSIBILITIES_FALLBACK,
    SKILLS_FALLBACK,
    WORK_FALLBACKS,
    EduItem,
    Profile,
    WorkItem,
)

# ───────────────────────────────────────── helpers ──
def _text(src: Mapping, key: str, fallback: str) -> str:
    value = src.get(key)
    return value if isinstance(value, str) and value else fallback


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _strings(items: List[Any]) -> Tuple[str, ...]:
    """Keep strings, stringify numbers, drop null/bool/nested values."""
    out = []
    for item in items:
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            out.append(str(item))
    return tuple(out)


def _string_list(value: Any, fallback: str) -> Tuple[str, ...]:
    # list → as-is, str → wrapped, anything else → placeholder
    if _is_list(value):
        return _strings(value)
    if isinstance(value, str):
        return (value,)
    return (fallback,)


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


# ───────────────────────────────────────── items ──
def _work_item(raw: Any) -> WorkItem:
    job = _mapping(raw)
    return WorkItem(
        job_title=_text(job, "job_title", WORK_FALLBACKS["job_title"]),
        company=_text(job, "company", WORK_FALLBACKS["company"]),
        dates=_text(job, "dates", WORK_FALLBACKS["dates"]),
        responsibilities=_string_list(job.get("responsibilities"), RESPONSIBILITIES_FALLBACK),
    )


def _edu_item(raw: Any) -> EduItem:
    edu = _mapping(raw)
    return EduItem(
        degree=_text(edu, "degree", EDU_FALLBACKS["degree"]),
        university=_text(edu, "university", EDU_FALLBACKS["university"]),
        dates=_text(edu, "dates", EDU_FALLBACKS["dates"]),
    )


# ───────────────────────────────────────── normaliser ──
def normalize(raw: Any) -> Profile:
    """Build a fully populated Profile from an untrusted JSON value.

    Scalars fall back to a placeholder string; work_experience and
    education fall back to an empty tuple, not a placeholder item.
    """
    r = _mapping(raw)
    jobs = r.get("work_experience")
    schools = r.get("education")
    return Profile(
        **{key: _text(r, key, fallback) for key, fallback in PROFILE_FALLBACKS.items()},
        work_experience=tuple(_work_item(j) for j in jobs) if _is_list(jobs) else (),
        education=tuple(_edu_item(e) for e in schools) if _is_list(schools) else (),
        skills=_string_list(r.get("skills"), SKILLS_FALLBACK),
    )
