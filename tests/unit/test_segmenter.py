"""
Unit tests for plan_export/segmenter.py - table grouping state machine
"""
from plan_export.contracts import (
    BulletItem,
    ParagraphText,
    SectionHeader,
    Table,
)
from plan_export.segmenter import (
    BlockSegmenter,
    SegmenterState,
    is_separator_row,
    parse_table,
    segment,
    split_row,
)


class TestParseTable:
    """Test the table parser sub-routine."""

    def test_basic_table(self):
        table = parse_table(["| A | B |", "|---|---|", "| 1 | 2 |"])
        assert table == Table(header_cells=("A", "B"), rows=(("1", "2"),))

    def test_header_drops_empty_segments(self):
        table = parse_table(["|| A |  | B ||"])
        assert table.header_cells == ("A", "B")
        assert table.rows == ()

    def test_alignment_separator_dropped(self):
        table = parse_table(["| A | B | C |", "|:--|:-:|--:|", "| 1 | 2 | 3 |"])
        assert table.rows == (("1", "2", "3"),)

    def test_separator_with_spaces_dropped(self):
        assert is_separator_row("| --- | : - : |")
        assert is_separator_row("|   |")
        assert not is_separator_row("| - | x |")

    def test_data_row_keeps_inner_empty_cells(self):
        assert split_row("| 1 |  | 3 |") == ["1", "", "3"]

    def test_data_row_without_trailing_pipe(self):
        assert split_row("| 1 | 2") == ["1", "2"]

    def test_raw_cell_count_preserved(self):
        table = parse_table(["| A | B | C |", "| 1 |", "| 1 | 2 | 3 | 4 |"])
        assert table.rows == (("1",), ("1", "2", "3", "4"))

    def test_separator_never_becomes_data_row(self):
        table = parse_table(["| A |", "|---|", "| x |", "|:-:|", "| y |"])
        assert table.rows == (("x",), ("y",))


class TestBlockSegmenter:
    """Test the SCANNING / ACCUMULATING_TABLE state machine."""

    def test_initial_state(self):
        segmenter = BlockSegmenter()
        assert segmenter.state is SegmenterState.SCANNING
        assert segmenter.finish() == []

    def test_pipe_line_enters_accumulating(self):
        segmenter = BlockSegmenter()
        segmenter.feed("| A | B |")
        assert segmenter.state is SegmenterState.ACCUMULATING_TABLE
        assert segmenter.blocks == []

    def test_non_pipe_line_flushes_then_classifies(self):
        segmenter = BlockSegmenter()
        segmenter.feed("| A |")
        segmenter.feed("| 1 |")
        segmenter.feed("Texto libre")
        assert segmenter.state is SegmenterState.SCANNING
        assert segmenter.blocks == [
            Table(header_cells=("A",), rows=(("1",),)),
            ParagraphText("Texto libre"),
        ]

    def test_end_of_input_flushes_table(self):
        segmenter = BlockSegmenter()
        segmenter.feed("| A |")
        segmenter.feed("| 1 |")
        blocks = segmenter.finish()
        assert blocks == [Table(header_cells=("A",), rows=(("1",),))]
        assert segmenter.state is SegmenterState.SCANNING

    def test_blank_line_does_not_flush_table(self):
        segmenter = BlockSegmenter()
        segmenter.feed("| A |")
        segmenter.feed("")
        segmenter.feed("   ")
        assert segmenter.state is SegmenterState.ACCUMULATING_TABLE
        segmenter.feed("| 2 |")
        assert segmenter.finish() == [Table(header_cells=("A",), rows=(("2",),))]

    def test_lines_are_trimmed(self):
        segmenter = BlockSegmenter()
        segmenter.feed("   | A |   ")
        segmenter.feed("  ## Dieta  ")
        assert segmenter.finish() == [Table(header_cells=("A",)), SectionHeader("Dieta")]


class TestSegment:
    """Test segment() over whole texts."""

    def test_empty_text(self):
        assert segment("") == []

    def test_blank_lines_never_produce_blocks(self):
        assert segment("\n\n  \r\n\t\n") == []

    def test_crlf_line_endings(self):
        assert segment("## Plan\r\n- Corre 5km\r\n") == [
            SectionHeader("Plan"),
            BulletItem("Corre 5km"),
        ]

    def test_table_example(self):
        blocks = segment("| A | B |\n|---|---|\n| 1 | 2 |")
        assert blocks == [Table(header_cells=("A", "B"), rows=(("1", "2"),))]

    def test_table_split_by_blank_line_stays_one_table(self):
        blocks = segment("| A | B |\n|---|---|\n| 1 | 2 |\n\n| 3 | 4 |\nFin")
        assert blocks == [
            Table(header_cells=("A", "B"), rows=(("1", "2"), ("3", "4"))),
            ParagraphText("Fin"),
        ]

    def test_two_tables_separated_by_text(self):
        blocks = segment("| A |\n| 1 |\nEntre medias\n| B |\n| 2 |")
        assert blocks == [
            Table(header_cells=("A",), rows=(("1",),)),
            ParagraphText("Entre medias"),
            Table(header_cells=("B",), rows=(("2",),)),
        ]

    def test_every_non_blank_line_maps_to_one_block(self):
        text = "## A\nuno\n\ndos\n- tres\n4. cuatro"
        assert len(segment(text)) == 5
