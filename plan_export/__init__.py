"""
GymAI Plan Export

Turns LLM-generated plan markup (headings, lists, label:value pairs and
pipe tables) into a styled, paginated PDF.

Pipeline:
    raw text -> normalize() -> segment() -> classify() -> PlanPdfRenderer

Usage:
    from plan_export import render_plan_pdf

    pdf_bytes = render_plan_pdf("Plan GymAI", llm_text)
"""

from .contracts import (
    Block,
    BlockType,
    SectionHeader,
    SubsectionHeader,
    BulletItem,
    NumberedItem,
    LabelValue,
    ParagraphText,
    Table,
)
from .exceptions import PlanExportError, RenderBackendFailure
from .normalizer import normalize
from .classifier import classify
from .segmenter import BlockSegmenter, SegmenterState, parse_table, segment
from .pdf_renderer import PlanPdfRenderer, parse_plan, render_plan_pdf

__all__ = [
    # Blocks
    "Block",
    "BlockType",
    "SectionHeader",
    "SubsectionHeader",
    "BulletItem",
    "NumberedItem",
    "LabelValue",
    "ParagraphText",
    "Table",

    # Errors
    "PlanExportError",
    "RenderBackendFailure",

    # Pipeline
    "normalize",
    "classify",
    "BlockSegmenter",
    "SegmenterState",
    "parse_table",
    "segment",
    "parse_plan",

    # Rendering
    "PlanPdfRenderer",
    "render_plan_pdf",
]

__version__ = "1.0.0"
