#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plan Export Errors

Parsing and classification never raise; only the PDF backend can fail.
"""


class PlanExportError(Exception):
    """Base error for plan export"""
    pass


class RenderBackendFailure(PlanExportError):
    """Raised when reportlab cannot finish building the document.

    The render call that raised it has produced no output bytes.
    """

    def __init__(self, title: str, reason: str):
        self.title = title
        self.reason = reason
        super().__init__(f"Error generating PDF '{title}': {reason}")
