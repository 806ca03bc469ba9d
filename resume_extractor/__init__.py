from .models import (
    ResumeData,
    PersonalInfo,
    Education,
    Skill,
    Experience,
    Project,
    Certification,
    CustomSection,
)
from .parser import parse_text, parse_file, adapt_for_backend
from .sections import locate_section, extract_section, normalize_lines

__all__ = [
    "ResumeData",
    "PersonalInfo",
    "Education",
    "Skill",
    "Experience",
    "Project",
    "Certification",
    "CustomSection",
    "parse_text",
    "parse_file",
    "adapt_for_backend",
    "locate_section",
    "extract_section",
    "normalize_lines",
]
