"""
Block Segmenter - turns normalized text into an ordered list of blocks.

Pipe-table lines are grouped into one Table block; every other non-blank
line becomes a single-line block through the classifier. The segmenter is
a two-state machine:

    SCANNING            --'|' line-->  ACCUMULATING_TABLE
    ACCUMULATING_TABLE  --other line--> flush table, SCANNING
    ACCUMULATING_TABLE  --end of input--> flush table

Blank lines are skipped in both states and never flush a table, so a
table interrupted by a blank line keeps collecting rows.
"""

import re
from enum import Enum
from typing import Iterable, List

from config.logging_config import get_logger

from .classifier import classify
from .contracts import Block, Table

logger = get_logger(__name__)

LINE_SPLIT_RE = re.compile(r'\r?\n')
SEPARATOR_CHARS_RE = re.compile(r'[|\-:\s]')
TABLE_PREFIX = "|"


class SegmenterState(Enum):
    """Segmenter states"""
    SCANNING = "scanning"
    ACCUMULATING_TABLE = "accumulating_table"


def is_separator_row(line: str) -> bool:
    """True for rows such as `|---|:---:|` that mark the header boundary"""
    return SEPARATOR_CHARS_RE.sub("", line) == ""


def split_row(line: str) -> List[str]:
    """Split a data row, dropping one optional leading and trailing pipe"""
    line = line.strip()
    if line.startswith(TABLE_PREFIX):
        line = line[1:]
    if line.endswith(TABLE_PREFIX):
        line = line[:-1]
    return [cell.strip() for cell in line.split(TABLE_PREFIX)]


def parse_table(lines: List[str]) -> Table:
    """
    Build a Table from buffered pipe lines.

    The first line's non-empty segments are the header cells. Separator
    rows are dropped. Data rows keep their raw cell count.
    """
    header = tuple(cell.strip() for cell in lines[0].split(TABLE_PREFIX) if cell.strip())
    rows = tuple(
        tuple(split_row(line))
        for line in lines[1:]
        if not is_separator_row(line)
    )
    return Table(header_cells=header, rows=rows)


class BlockSegmenter:
    """
    Single-pass segmenter. Feed trimmed lines, then call finish().

    Usage:
        segmenter = BlockSegmenter()
        for line in lines:
            segmenter.feed(line)
        blocks = segmenter.finish()
    """

    def __init__(self):
        self.state = SegmenterState.SCANNING
        self.table_lines: List[str] = []
        self.blocks: List[Block] = []

    def feed(self, line: str) -> None:
        line = line.strip()
        if not line:
            return

        if line.startswith(TABLE_PREFIX):
            self.table_lines.append(line)
            self.state = SegmenterState.ACCUMULATING_TABLE
            return

        if self.state is SegmenterState.ACCUMULATING_TABLE:
            self._flush_table()

        self.blocks.append(classify(line))

    def finish(self) -> List[Block]:
        if self.state is SegmenterState.ACCUMULATING_TABLE:
            self._flush_table()
        return self.blocks

    def _flush_table(self) -> None:
        """Emit the buffered table and return to SCANNING"""
        if self.table_lines:
            table = parse_table(self.table_lines)
            logger.debug(
                f"Table block: {table.column_count} columns, {len(table.rows)} rows"
            )
            self.blocks.append(table)
        self.table_lines = []
        self.state = SegmenterState.SCANNING


def split_lines(text: str) -> List[str]:
    return LINE_SPLIT_RE.split(text) if text else []


def segment_lines(lines: Iterable[str]) -> List[Block]:
    segmenter = BlockSegmenter()
    for line in lines:
        segmenter.feed(line)
    return segmenter.finish()


def segment(normalized_text: str) -> List[Block]:
    """Segment normalized text into ordered blocks"""
    return segment_lines(split_lines(normalized_text))
