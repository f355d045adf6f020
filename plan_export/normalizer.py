"""
Normalizer - strips markup the renderer ignores before line splitting.
"""

from typing import Optional

FENCE_MARKERS = ("```markdown", "```")
BOLD_MARKER = "**"
BULLET_GLYPH = "•"
BULLET_PREFIX = "- "


def normalize(text: Optional[str]) -> str:
    """
    Clean raw LLM output.

    In order: drop code fence markers (the fenced content stays as plain
    text), drop every `**` pair marker, and turn each `•` into a new line
    starting with the canonical `- ` bullet prefix.

    None is treated as empty text.
    """
    if not text:
        return ""

    for marker in FENCE_MARKERS:
        text = text.replace(marker, "")
    text = text.replace(BOLD_MARKER, "")
    return text.replace(BULLET_GLYPH, "\n" + BULLET_PREFIX)
