from __future__ import annotations
import os
from typing import Dict

from resume_extractor import parse_file, adapt_for_backend
from resume_extractor.ingest import SUPPORTED_EXTENSIONS


def parse_resume(filepath: str) -> Dict:
    """
    Entry point for .pdf, .docx and .txt resumes.
    Decodes the file to text, runs the extraction pipeline and returns the
    camelCase ResumeData dict.
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {ext}")

    res = parse_file(filepath)
    return adapt_for_backend(res)
