"""
Unit tests for plan_export/normalizer.py
"""
from plan_export.normalizer import normalize


class TestNormalize:
    """Test markup stripping before line splitting."""

    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""

    def test_plain_text_unchanged(self):
        assert normalize("Texto libre\n## Sección") == "Texto libre\n## Sección"

    def test_removes_markdown_fences(self):
        text = "```markdown\n## Plan\n```"
        assert normalize(text) == "\n## Plan\n"

    def test_removes_bare_fences_keeps_content(self):
        assert normalize("```\ncodigo\n```") == "\ncodigo\n"

    def test_strips_bold_markers(self):
        assert normalize("**Fuerza** y **cardio**") == "Fuerza y cardio"

    def test_single_asterisk_bullet_kept(self):
        assert normalize("* item") == "* item"

    def test_bullet_glyph_becomes_dash_line(self):
        assert normalize("Comidas:•Avena•Fruta") == "Comidas:\n- Avena\n- Fruta"

    def test_operations_run_in_order(self):
        # bold removal happens before bullet expansion
        assert normalize("•**Proteína**: 150g") == "\n- Proteína: 150g"
