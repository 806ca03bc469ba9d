import argparse
import json
import logging
import sys

from . import config
from .parser import parse_file, parse_text

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog="resume_extractor",
        description="Extract structured resume data (JSON) from a .pdf, .docx or .txt file.",
    )
    ap.add_argument("path", help="Resume file, or '-' to read plain text from stdin.")
    ap.add_argument(
        "--strict-headings",
        action="store_true",
        default=None,
        help="Only end a section at keywords on heading lines.",
    )
    ap.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL if config.LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Logging level (default: %(default)s).",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.path == "-":
        resume = parse_text(sys.stdin.read(), strict_headings=args.strict_headings)
    else:
        resume = parse_file(args.path, strict_headings=args.strict_headings)

    print(json.dumps(resume.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
