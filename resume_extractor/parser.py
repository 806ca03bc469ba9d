from __future__ import annotations

import logging
from typing import Optional

from .models import (
    ResumeData,
    PersonalInfo,
    Education,
    Skill,
    Experience,
    Project,
    Certification,
)
from .ingest import read_document_text
from .sections import extract_section, normalize_lines
from . import rules

logger = logging.getLogger(__name__)

# section name -> (accumulator, record type)
ACCUMULATORS = {
    "education": (rules.extract_education, Education),
    "skills": (rules.extract_skills, Skill),
    "experience": (rules.extract_experience, Experience),
    "projects": (rules.extract_projects, Project),
    "certifications": (rules.extract_certifications, Certification),
}


def _section_entries(text: str, name: str, strict: Optional[bool]) -> list:
    span = extract_section(text, name, strict=strict)
    if span is None:
        logger.debug("no %s section", name)
        return []

    accumulate, model = ACCUMULATORS[name]
    entries = [model(**it) for it in accumulate(normalize_lines(span))]
    if span and not entries:
        logger.warning("%s section present but no entries were extracted", name.capitalize())
    else:
        logger.debug("%s: %d entries", name, len(entries))
    return entries


def parse_text(
    text: str,
    *,
    strict_headings: Optional[bool] = None,
    phone_region: Optional[str] = None,
) -> ResumeData:
    """
    Build a ResumeData record from decoded resume text.

    Best-effort: missing sections give empty lists and missing fields give
    empty strings. Only a non-string payload is rejected.
    """
    if not isinstance(text, str):
        raise TypeError(f"resume text must be str, not {type(text).__name__}")

    lines = normalize_lines(text)
    personal = PersonalInfo(
        **rules.extract_personal_info(lines, text, phone_region=phone_region)
    )

    return ResumeData(
        personal_info=personal,
        education=_section_entries(text, "education", strict_headings),
        skills=_section_entries(text, "skills", strict_headings),
        experience=_section_entries(text, "experience", strict_headings),
        projects=_section_entries(text, "projects", strict_headings),
        certifications=_section_entries(text, "certifications", strict_headings),
    )


def parse_file(path: str, **kwargs) -> ResumeData:
    text = read_document_text(path)
    return parse_text(text, **kwargs)


def adapt_for_backend(resume: ResumeData) -> dict:
    return resume.to_dict()
