from __future__ import annotations
import logging
import os
import re
import unicodedata

import docx
import fitz  # PyMuPDF
import pdfplumber

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")

# below this many visible characters a PDF is re-read with pdfplumber
SPARSE_TEXT_CHARS = 120


def _norm_ws(s: str) -> str:
    if not s:
        return ""
    s = s.replace("\ufeff", "")
    s = "".join(" " if (ch.isspace() or unicodedata.category(ch) == "Zs") else ch for ch in s)
    return re.sub(r"\s+", " ", s).strip()


def _page_blocks_sorted(page):
    blocks = page.get_text("blocks") or []
    blocks.sort(key=lambda b: (round(b[1], 1), round(b[0], 1)))
    return blocks


def _blocks_to_text(blocks):
    lines = []
    for b in blocks:
        t = (b[4] or "").strip()
        if t:
            lines.append(t)
    return "\n".join(lines)


def read_pdf_text(path: str) -> str:
    """Text in reading order (top-to-bottom blocks); pdfplumber rescues sparse output."""
    with fitz.open(path) as doc:
        pages = [
            _blocks_to_text(_page_blocks_sorted(page)) or (page.get_text("text") or "")
            for page in doc
        ]
    text = "\n".join(pages).strip()

    if len(_norm_ws(text)) < SPARSE_TEXT_CHARS:
        with pdfplumber.open(path) as pdf:
            text2 = "\n".join((p.extract_text() or "") for p in pdf.pages)
        if len(_norm_ws(text2)) > len(_norm_ws(text)):
            logger.info("pdfplumber recovered more text from %s", path)
            text = text2

    return text


def read_docx_text(path: str) -> str:
    document = docx.Document(path)
    return "\n".join(p.text for p in document.paragraphs).strip()


def read_plain_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()


def read_document_text(path: str) -> str:
    """Decode a .pdf, .docx or .txt file into plain text with line breaks kept."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".pdf":
        return read_pdf_text(path)
    if ext == ".docx":
        return read_docx_text(path)
    if ext == ".txt":
        return read_plain_text(path)
    raise ValueError(f"Unsupported file type: {ext}")
