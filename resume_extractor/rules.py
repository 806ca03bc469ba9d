from __future__ import annotations
import re
from enum import Enum
from typing import List, Optional

import phonenumbers

from . import config

# ------- Contact / header patterns -------

EMAIL = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
PHONE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN = re.compile(r"linkedin\.com/in/[\w-]+")
GITHUB = re.compile(r"github\.com/[\w-]+")
WEBSITE = re.compile(r"https?://[\w.-]+\.\w+")
NAME = re.compile(r"^(?:[A-Z][a-z]+ )+[A-Z][a-z]+$")
LOCATION = re.compile(r"[A-Z][a-z]+,\s*[A-Z]{2}|[A-Z][a-z]+,\s*[A-Z][a-z]+")

NAME_WINDOW = 5

# ------- Entry patterns -------

MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t|tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DASH = r"[-–—]"
MONTH_YEAR = rf"\b{MONTHS}\.?\s+\d{{4}}"

# Experience entries are anchored on a date range: 'Jan 2020 - Present'
EXP_DATE_RE = re.compile(
    rf"(?P<start>\d{{4}}|{MONTH_YEAR})\s*{DASH}\s*(?P<end>\d{{4}}|{MONTH_YEAR}|present)",
    re.I,
)
EDU_DATE_RE = re.compile(rf"(?P<start>\d{{4}})\s*{DASH}\s*(?P<end>\d{{4}}|present)", re.I)

DEGREE_RE = re.compile(
    r"(?<!\w)("
    r"bachelor(?:'?s)?|master(?:'?s)?|doctorate|ph\.?\s?d\.?|mba|"
    r"b\.s\.?|b\.a\.?|m\.s\.?|m\.a\.?|b\.?sc|m\.?sc|b\.?eng|m\.?eng|bs|ba|ms|ma"
    r")(?!\w)",
    re.I,
)
GPA_RE = re.compile(r"\bgpa\b\s*[:\-]?\s*(\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?)", re.I)

BULLET = re.compile(r"^[•\-*]\s*")
LABELED = re.compile(r"^([^:]+):\s*(.+)$")
TECH_LABELS = ("technologies:", "tech stack:")
YEAR = re.compile(r"\d{4}")
ITEM_SEP = re.compile(r"[,;]")


class LineRole(str, Enum):
    TITLE = "title"
    BULLET = "bullet"
    CONTINUATION = "continuation"
    DATE_RANGE = "date_range"
    LABELED_LIST = "labeled_list"


def is_bullet(line: str) -> bool:
    return line.startswith(("•", "-", "*"))


def strip_bullet(line: str) -> str:
    return BULLET.sub("", line, count=1)


def split_items(blob: str) -> List[str]:
    return [t.strip() for t in ITEM_SEP.split(blob or "") if t.strip()]


def _is_tech_line(line: str) -> bool:
    low = line.lower()
    return any(label in low for label in TECH_LABELS)


def classify_line(line: str, section: str) -> LineRole:
    """
    Role of a section line for the given section's accumulator.

    education:      degree line -> TITLE, 'YYYY - YYYY' -> DATE_RANGE, 'GPA: x' -> LABELED_LIST
    experience:     date range -> DATE_RANGE, bullet -> BULLET
    skills:         'label: items' -> LABELED_LIST
    projects:       non-bullet -> TITLE, bullet tech line -> LABELED_LIST, bullet -> BULLET
    certifications: every line -> TITLE
    Anything else is a CONTINUATION.
    """
    if section == "education":
        if DEGREE_RE.search(line):
            return LineRole.TITLE
        if EDU_DATE_RE.search(line):
            return LineRole.DATE_RANGE
        if GPA_RE.search(line):
            return LineRole.LABELED_LIST
        return LineRole.CONTINUATION

    if section == "experience":
        if EXP_DATE_RE.search(line):
            return LineRole.DATE_RANGE
        if is_bullet(line):
            return LineRole.BULLET
        return LineRole.CONTINUATION

    if section == "skills":
        return LineRole.LABELED_LIST if LABELED.match(line) else LineRole.CONTINUATION

    if section == "projects":
        if not is_bullet(line):
            return LineRole.TITLE
        if _is_tech_line(strip_bullet(line)):
            return LineRole.LABELED_LIST
        return LineRole.BULLET

    if section == "certifications":
        return LineRole.TITLE

    raise ValueError(f"Unknown section: {section}")


# ------- Field extractors (whole text) -------


def _first(pat: re.Pattern, text: str) -> str:
    m = pat.search(text or "")
    return m.group(0) if m else ""


def extract_email(text: str) -> str:
    return _first(EMAIL, text)


def extract_phone(
    text: str, *, region: Optional[str] = None, fallback: Optional[bool] = None
) -> str:
    phone = _first(PHONE, text)
    if phone:
        return phone

    if fallback is None:
        fallback = config.PHONE_FALLBACK
    if not fallback:
        return ""
    # formats the plain pattern misses, e.g. '+44 20 7123 4567'; only valid numbers,
    # so bare figures like '2500000' never count as a phone
    for m in phonenumbers.PhoneNumberMatcher(text or "", region or config.PHONE_REGION):
        return m.raw_string
    return ""


def extract_linkedin(text: str) -> str:
    handle = _first(LINKEDIN, text)
    return f"https://{handle}" if handle else ""


def extract_github(text: str) -> str:
    handle = _first(GITHUB, text)
    return f"https://{handle}" if handle else ""


def extract_website(text: str) -> str:
    for m in WEBSITE.finditer(text or ""):
        url = m.group(0)
        if "linkedin" not in url and "github" not in url:
            return url
    return ""


def extract_name(lines: List[str]) -> str:
    """First of the top lines shaped like 'First Last'; never looks further down."""
    for ln in lines[:NAME_WINDOW]:
        if NAME.match(ln):
            return ln
    return ""


def extract_location(text: str) -> str:
    return _first(LOCATION, text)


def extract_personal_info(
    lines: List[str], text: str, *, phone_region: Optional[str] = None
) -> dict:
    return {
        "full_name": extract_name(lines),
        "email": extract_email(text),
        "phone": extract_phone(text, region=phone_region),
        "location": extract_location(text),
        "linkedin": extract_linkedin(text) or None,
        "github": extract_github(text) or None,
        "website": extract_website(text) or None,
    }


# ------- Entry accumulators (section lines) -------


def extract_education(lines: List[str]) -> list[dict]:
    """
    A degree line opens an entry; the lines after it fill the rest:

      Bachelor of Science in Computer Science
      MIT
      2016 - 2020
      GPA: 3.8/4.0
    """
    items: list[dict] = []
    cur: dict | None = None

    for line in lines:
        role = classify_line(line, "education")

        if role is LineRole.TITLE:
            if cur:
                items.append(cur)
            cur = {
                "id": f"edu-{len(items)}",
                "institution": "",
                "degree": line,
                "field": "",
                "start_date": "",
                "end_date": "",
            }
            m = EDU_DATE_RE.search(line)
            if m:
                cur["start_date"], cur["end_date"] = m.group("start"), m.group("end")
            continue

        if cur is None:
            continue

        if role is LineRole.DATE_RANGE:
            m = EDU_DATE_RE.search(line)
            if not cur["start_date"]:
                cur["start_date"], cur["end_date"] = m.group("start"), m.group("end")
            # 'MIT 2016 - 2020' still names the school
            rest = (line[: m.start()] + " " + line[m.end() :]).strip(" ,|()–—-")
            if rest and not cur["institution"]:
                cur["institution"] = rest
        elif role is LineRole.LABELED_LIST:
            if not cur.get("gpa"):
                cur["gpa"] = GPA_RE.search(line).group(1)
        elif not cur["institution"]:
            cur["institution"] = line

    if cur:
        items.append(cur)
    return items


def extract_skills(lines: List[str]) -> list[dict]:
    groups: list[dict] = []
    for line in lines:
        m = LABELED.match(line)
        if m:
            groups.append({"category": m.group(1).strip(), "items": split_items(m.group(2))})
            continue
        items = split_items(line)
        if items:
            groups.append({"category": "General", "items": items})
    return groups


def extract_experience(lines: List[str]) -> list[dict]:
    """
    Entries are anchored on a date-range line. Bullets below it are
    responsibilities; the first plain line is the position, the second the
    company. Lines before the first date range are ignored.
    """
    items: list[dict] = []
    cur: dict | None = None

    for line in lines:
        role = classify_line(line, "experience")

        if role is LineRole.DATE_RANGE:
            if cur:
                items.append(cur)
            m = EXP_DATE_RE.search(line)
            end = m.group("end")
            cur = {
                "id": f"exp-{len(items)}",
                "company": "",
                "position": "",
                "location": "",
                "start_date": m.group("start"),
                "end_date": end,
                "current": end.lower() == "present",
                "responsibilities": [],
                "achievements": [],
            }
        elif cur is None:
            continue
        elif role is LineRole.BULLET:
            cur["responsibilities"].append(strip_bullet(line))
        elif not cur["position"]:
            cur["position"] = line
        elif not cur["company"]:
            cur["company"] = line

    if cur:
        items.append(cur)
    return items


def extract_projects(lines: List[str]) -> list[dict]:
    """
    Contract:
      every non-bullet line starts a project titled by that line;
      '- Technologies: a, b' / '- Tech stack: a; b' sets technologies;
      the first other bullet is the description, the rest are highlights.
    """
    projects: list[dict] = []
    cur: dict | None = None

    for line in lines:
        role = classify_line(line, "projects")

        if role is LineRole.TITLE:
            if cur:
                projects.append(cur)
            cur = {
                "id": f"proj-{len(projects)}",
                "title": line,
                "description": "",
                "technologies": [],
                "highlights": [],
            }
            continue

        if cur is None:
            continue

        text = strip_bullet(line)
        if role is LineRole.LABELED_LIST:
            _, _, tail = text.partition(":")
            if tail.strip():
                cur["technologies"] = split_items(tail)
        elif not cur["description"]:
            cur["description"] = text
        else:
            cur["highlights"].append(text)

    if cur:
        projects.append(cur)
    return projects


def extract_certifications(lines: List[str]) -> list[dict]:
    certs: list[dict] = []
    for i, line in enumerate(lines):
        m = YEAR.search(line)
        certs.append(
            {
                "id": f"cert-{i}",
                "name": YEAR.sub("", line, count=1).strip(),
                "issuer": "",
                "date": m.group(0) if m else "",
            }
        )
    return certs
