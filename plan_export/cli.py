#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plan Export CLI

Usage:
    plan-export plan.md -o plan.pdf -t "Plan de dieta"
    cat plan.md | plan-export - -t "Rutina semanal"
"""

import argparse
import logging
import sys
from typing import List, Optional

from config.logging_config import add_file_handler, get_logger
from config.settings import settings

from .exceptions import PlanExportError
from .pdf_renderer import PlanPdfRenderer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GymAI plan markup to PDF")
    parser.add_argument("input", help="Input markup file, or - for stdin")
    parser.add_argument("-o", "--output", help=f"Output PDF path (default: {settings.resolve_output_path()})")
    parser.add_argument("-t", "--title", default=settings.default_title, help="Document title")
    return parser


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.getLogger("plan_export").setLevel(settings.log_level)
    if settings.log_file:
        add_file_handler(settings.log_file)

    try:
        content = read_source(args.input)
    except OSError as e:
        logger.error(f"Cannot read '{args.input}': {e}")
        return 1

    output_path = settings.resolve_output_path(args.output)

    try:
        result = PlanPdfRenderer().render_to_file(args.title, content, str(output_path))
    except (OSError, PlanExportError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    print(f"""
╔══════════════════════════════════════════════════════════════════════╗
║                       Plan PDF Export Complete                       ║
╠══════════════════════════════════════════════════════════════════════╣
   Output:   {result['output_path']}
   Blocks:   {result['blocks']}
   Pages:    {result['pages']}
   Size:     {result['size_bytes']:,} bytes
╚══════════════════════════════════════════════════════════════════════╝
""")
    return 0


if __name__ == "__main__":
    sys.exit(main())
