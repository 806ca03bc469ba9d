from __future__ import annotations
import os

# Segmenter boundary keywords only count at the start of a line
STRICT_HEADINGS = os.getenv("RESUME_STRICT_HEADINGS", "0") == "1"

# phonenumbers fallback when the plain phone pattern finds nothing
PHONE_FALLBACK = os.getenv("RESUME_PHONE_FALLBACK", "1") == "1"
PHONE_REGION = os.getenv("RESUME_PHONE_REGION", "US")

LOG_LEVEL = os.getenv("RESUME_LOG_LEVEL", "WARNING").upper()
