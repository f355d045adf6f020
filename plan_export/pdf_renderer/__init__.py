"""
Plan PDF Renderer
GymAI Plan Export

Usage:
    from plan_export.pdf_renderer import PlanPdfRenderer, render_plan_pdf

    pdf_bytes = render_plan_pdf("Plan de dieta", llm_text)

    renderer = PlanPdfRenderer()
    result = renderer.render_to_file("Rutina", llm_text, "plan.pdf")
    print(f"Pages: {result['pages']}")
"""

from .pdf_renderer import (
    PlanPdfRenderer,
    parse_plan,
    plan_subtitle,
    render_plan_pdf,
    attachment_filename,
)

__all__ = [
    "PlanPdfRenderer",
    "parse_plan",
    "plan_subtitle",
    "render_plan_pdf",
    "attachment_filename",
]
