#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plan Block Contract

Defines the blocks produced by the segmenter/classifier and consumed by
the PDF renderer. Blocks are immutable and created fresh per render call.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Tuple, Union
from enum import Enum


class BlockType(Enum):
    """Types of plan blocks"""
    SECTION_HEADER = "section_header"
    SUBSECTION_HEADER = "subsection_header"
    BULLET_ITEM = "bullet_item"
    NUMBERED_ITEM = "numbered_item"
    LABEL_VALUE = "label_value"
    PARAGRAPH = "paragraph"
    TABLE = "table"


@dataclass(frozen=True)
class SectionHeader:
    """`## ` heading, rendered as a coloured band"""
    text: str
    type: ClassVar[BlockType] = BlockType.SECTION_HEADER


@dataclass(frozen=True)
class SubsectionHeader:
    """`### ` heading"""
    text: str
    type: ClassVar[BlockType] = BlockType.SUBSECTION_HEADER


@dataclass(frozen=True)
class BulletItem:
    text: str
    type: ClassVar[BlockType] = BlockType.BULLET_ITEM


@dataclass(frozen=True)
class NumberedItem:
    ordinal: str
    text: str
    type: ClassVar[BlockType] = BlockType.NUMBERED_ITEM


@dataclass(frozen=True)
class LabelValue:
    """List item split at an early colon, e.g. `- Peso: 80kg`"""
    label: str
    value: str
    type: ClassVar[BlockType] = BlockType.LABEL_VALUE


@dataclass(frozen=True)
class ParagraphText:
    text: str
    type: ClassVar[BlockType] = BlockType.PARAGRAPH


@dataclass(frozen=True)
class Table:
    """
    Pipe table.

    The header fixes the column count. Data rows keep their raw cell
    count; reconciled_rows() pads missing trailing cells with "" and
    drops extra cells so every row has exactly column_count cells.
    """
    header_cells: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)
    type: ClassVar[BlockType] = BlockType.TABLE

    @property
    def column_count(self) -> int:
        return len(self.header_cells)

    def reconciled_rows(self) -> List[List[str]]:
        n = self.column_count
        return [list(row[:n]) + [""] * (n - len(row)) for row in self.rows]


Block = Union[
    SectionHeader,
    SubsectionHeader,
    BulletItem,
    NumberedItem,
    LabelValue,
    ParagraphText,
    Table,
]
