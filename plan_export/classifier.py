"""
Block Classifier - assigns one single-line block kind to a trimmed line.
"""

import re

from .contracts import (
    Block,
    BulletItem,
    LabelValue,
    NumberedItem,
    ParagraphText,
    SectionHeader,
    SubsectionHeader,
)

SECTION_PREFIX = "## "
SUBSECTION_PREFIX = "### "
LIST_PREFIXES = ("- ", "* ")

# A colon at or beyond this index is part of the item text, not a label separator
LABEL_MAX_CHARS = 40

NUMBERED_RE = re.compile(r'^(\d+)\.\s+(.+)$', re.DOTALL)


def classify_list_item(item_text: str) -> Block:
    """Split a list item into a label/value pair when it has an early colon"""
    colon = item_text.find(":")
    if 0 < colon < LABEL_MAX_CHARS:
        return LabelValue(
            label=item_text[:colon].strip(),
            value=item_text[colon + 1:].strip(),
        )
    return BulletItem(item_text)


def classify(line: str) -> Block:
    """
    Classify a trimmed, non-empty line. First match wins:

    1. `## `          -> SectionHeader
    2. `### `         -> SubsectionHeader
    3. `- ` or `* `   -> LabelValue or BulletItem
    4. `12. content`  -> NumberedItem
    5. anything else  -> ParagraphText

    Never raises; ParagraphText is the fallback.
    """
    if line.startswith(SECTION_PREFIX):
        return SectionHeader(line[len(SECTION_PREFIX):].strip())

    if line.startswith(SUBSECTION_PREFIX):
        return SubsectionHeader(line[len(SUBSECTION_PREFIX):].strip())

    if line.startswith(LIST_PREFIXES):
        return classify_list_item(line[2:].strip())

    match = NUMBERED_RE.match(line)
    if match:
        return NumberedItem(ordinal=match.group(1), text=match.group(2).strip())

    return ParagraphText(line)
