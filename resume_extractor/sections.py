# resume_extractor/sections.py
from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from . import config

logger = logging.getLogger(__name__)

# Alias keywords per canonical section, in priority order.
# NOTE: the first alias found anywhere wins, even when a later alias occurs
# earlier in the text. "experience" therefore always beats "work experience".
SECTION_ALIASES: Dict[str, Tuple[str, ...]] = {
    "education": ("education", "academic background"),
    "skills": ("skills", "technical skills", "core competencies"),
    "experience": (
        "experience",
        "work experience",
        "professional experience",
        "employment",
    ),
    "projects": ("projects", "personal projects", "key projects"),
    "certifications": ("certifications", "certificates", "licenses"),
}

# Any of these ends the current section span
BOUNDARY_KEYWORDS: Tuple[str, ...] = (
    "education",
    "experience",
    "skills",
    "projects",
    "certifications",
    "references",
)


def normalize_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines in original order."""
    return [ln.strip() for ln in (text or "").splitlines() if ln.strip()]


def _find_keyword(text: str, keyword: str, pos: int, strict: bool) -> int:
    if strict:
        # keyword opens a line, or closes a short heading line like 'Work Experience'
        kw = re.escape(keyword)
        pat = re.compile(
            rf"^[ \t]*((?:[A-Za-z&/]+[ \t]+){{1,3}}{kw}(?=[ \t:]*$)|{kw})", re.I | re.M
        )
        m = pat.search(text, pos)
        return m.start(1) if m else -1
    m = re.compile(re.escape(keyword), re.I).search(text, pos)
    return m.start() if m else -1


def locate_section(
    text: str, aliases: Sequence[str], *, strict: Optional[bool] = None
) -> Optional[str]:
    """
    Return the text between the first found alias and the next boundary keyword.

    Aliases are tried in list order and the first one present anywhere in the
    text is used; its span starts right after the alias and ends at the
    earliest boundary keyword (other than the alias itself) at or after that
    point, or at the end of the text. Returns None when no alias occurs.

    This is plain substring search: a boundary keyword inside a sentence
    ("... and soft skills") truncates the span. With strict=True boundary
    keywords only count when they open a line or end a short heading line
    such as "Work Experience".
    """
    if strict is None:
        strict = config.STRICT_HEADINGS
    text = text or ""

    for alias in aliases:
        m = re.compile(re.escape(alias), re.I).search(text)
        if not m:
            continue

        start = m.end()
        end = len(text)
        for kw in BOUNDARY_KEYWORDS:
            if kw == alias.lower():
                continue
            idx = _find_keyword(text, kw, start, strict)
            if idx != -1 and idx < end:
                end = idx

        logger.debug("section alias %r matched at %d, span ends at %d", alias, m.start(), end)
        return text[start:end].strip()

    return None


def extract_section(
    text: str, name: str, *, strict: Optional[bool] = None
) -> Optional[str]:
    """Locate a canonical section (e.g. 'experience') by its alias list."""
    try:
        aliases = SECTION_ALIASES[name]
    except KeyError:
        raise ValueError(f"Unknown section: {name}") from None
    return locate_section(text, aliases, strict=strict)
