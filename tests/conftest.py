"""
Pytest configuration and shared fixtures for GymAI Plan Export tests.
"""
import sys
from datetime import date
from pathlib import Path

import fitz
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from plan_export.pdf_renderer import PlanPdfRenderer


# ============================================================================
# Fixtures: Renderer
# ============================================================================

@pytest.fixture
def renderer() -> PlanPdfRenderer:
    return PlanPdfRenderer()


@pytest.fixture
def fixed_date() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def pdf_text():
    """Extract the text of every page of a PDF byte string."""
    def _extract(pdf_bytes: bytes) -> str:
        with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
            return "\n".join(page.get_text() for page in doc)
    return _extract


@pytest.fixture
def pdf_page_count():
    def _count(pdf_bytes: bytes) -> int:
        with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
            return doc.page_count
    return _count


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_plan_text() -> str:
    """A typical assistant reply with every block kind."""
    return (
        "```markdown\n"
        "## **Fuerza**\n"
        "Plan pensado para 4 días por semana.\n"
        "\n"
        "### Calentamiento\n"
        "- Peso: 80kg\n"
        "- Corre 5km suave\n"
        "1. Haz sentadillas\n"
        "2. Press banca\n"
        "\n"
        "| Día | Ejercicio | Series |\n"
        "|-----|:---------:|-------:|\n"
        "| Lunes | Sentadilla | 4 |\n"
        "| Martes | Dominadas |\n"
        "| Jueves | Peso muerto | 3 | extra |\n"
        "Descansa entre series.\n"
        "```"
    )
