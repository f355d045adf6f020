"""
Plan PDF Renderer
GymAI Plan Export

Renders LLM-generated plan markup to a styled A4 PDF (ReportLab):
- Dark banner header with title, plan subtitle and generation date
- Section bands, subsection headings, bullet and numbered rows
- Bordered label/value rows
- Pipe tables with a coloured header row and zebra striping
- Ruled disclaimer footer and page numbers

Input: raw plan text (markup) and a title
Output: complete PDF bytes
"""

from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.colors import white
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable,
)

from config.constants import DEFAULT_TITLE, DEFAULT_FILENAME
from config.logging_config import get_logger

from ..contracts import (
    Block,
    BlockType,
    BulletItem,
    LabelValue,
    NumberedItem,
    ParagraphText,
    SectionHeader,
    SubsectionHeader,
    Table as TableBlock,
)
from ..exceptions import RenderBackendFailure
from ..normalizer import normalize
from ..segmenter import segment
from . import theme

logger = get_logger(__name__)


def plan_subtitle(title: str) -> str:
    """Diet plans get the nutrition subtitle, everything else the training one"""
    if theme.DIET_KEYWORD in (title or "").casefold():
        return theme.SUBTITLE_DIET
    return theme.SUBTITLE_TRAINING


def striped_rows(data_row_count: int) -> List[int]:
    """Table row indices (header is row 0) that get the zebra tint"""
    return [i + 1 for i in range(1, data_row_count, 2)]


def parse_plan(source_text: Optional[str]) -> List[Block]:
    """Normalize and segment plan text into ordered blocks"""
    return segment(normalize(source_text))


class PlanPdfRenderer:
    """
    Plan PDF renderer using ReportLab

    Each render call builds its own story and output buffer; the renderer
    keeps only the immutable styles, so one instance can serve concurrent
    calls.

    Usage:
        renderer = PlanPdfRenderer()
        pdf_bytes = renderer.render("Plan de dieta", llm_text)
    """

    def __init__(self):
        self.styles = theme.create_styles()
        self.page_width, self.page_height = theme.PAGE_SIZE
        self.frame_width = self.page_width - 2 * theme.PAGE_MARGIN

        self._handlers: Dict[BlockType, Callable[[Any], List[Any]]] = {
            BlockType.SECTION_HEADER: self._section_header,
            BlockType.SUBSECTION_HEADER: self._subsection_header,
            BlockType.BULLET_ITEM: self._bullet_item,
            BlockType.NUMBERED_ITEM: self._numbered_item,
            BlockType.LABEL_VALUE: self._label_value,
            BlockType.PARAGRAPH: self._paragraph,
            BlockType.TABLE: self._table,
        }

    # =========================================
    # BLOCKS
    # =========================================

    def _section_header(self, block: SectionHeader) -> List[Any]:
        band = Table(
            [[Paragraph(escape(block.text), self.styles['SectionHeading'])]],
            colWidths=[self.frame_width],
            spaceBefore=theme.SECTION_SPACE_BEFORE,
            spaceAfter=theme.SECTION_SPACE_AFTER,
            splitInRow=1,
        )
        band.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), theme.COLOR_ACCENT_TINT),
            ('LINEBEFORE', (0, 0), (0, -1), 4, theme.COLOR_ACCENT),
            ('LEFTPADDING', (0, 0), (-1, -1), 10),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]))
        return [band]

    def _subsection_header(self, block: SubsectionHeader) -> List[Any]:
        return [Paragraph(escape(block.text), self.styles['SubsectionHeading'])]

    def _two_column_row(self, left, right, left_width: float, commands: list) -> Table:
        row = Table(
            [[left, right]],
            colWidths=[left_width, self.frame_width - left_width],
            spaceAfter=theme.ITEM_SPACE_AFTER,
            splitInRow=1,
        )
        row.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('TOPPADDING', (0, 0), (-1, -1), 2),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
            *commands,
        ]))
        return row

    def _bullet_item(self, block: BulletItem) -> List[Any]:
        return [self._two_column_row(
            Paragraph(theme.BULLET_GLYPH, self.styles['Bullet']),
            Paragraph(escape(block.text), self.styles['Cell']),
            theme.BULLET_COLUMN_WIDTH,
            [('LEFTPADDING', (0, 0), (0, 0), 0)],
        )]

    def _numbered_item(self, block: NumberedItem) -> List[Any]:
        return [self._two_column_row(
            Paragraph(escape(block.ordinal), self.styles['Badge']),
            Paragraph(escape(block.text), self.styles['Cell']),
            theme.BADGE_COLUMN_WIDTH,
            [
                ('BACKGROUND', (0, 0), (0, 0), theme.COLOR_PRIMARY),
                ('VALIGN', (0, 0), (0, 0), 'MIDDLE'),
                ('LEFTPADDING', (0, 0), (0, 0), 1),
                ('RIGHTPADDING', (0, 0), (0, 0), 1),
                ('LEFTPADDING', (1, 0), (1, 0), 8),
            ],
        )]

    def _label_value(self, block: LabelValue) -> List[Any]:
        return [self._two_column_row(
            Paragraph(escape(block.label), self.styles['CellBold']),
            Paragraph(escape(block.value), self.styles['Cell']),
            self.frame_width * theme.LABEL_COLUMN_RATIO,
            [
                ('BACKGROUND', (0, 0), (0, 0), theme.COLOR_LABEL_TINT),
                ('BACKGROUND', (1, 0), (1, 0), white),
                ('BOX', (0, 0), (-1, -1), 0.5, theme.COLOR_BORDER),
                ('INNERGRID', (0, 0), (-1, -1), 0.5, theme.COLOR_BORDER),
                ('TOPPADDING', (0, 0), (-1, -1), theme.CELL_PADDING),
                ('BOTTOMPADDING', (0, 0), (-1, -1), theme.CELL_PADDING),
            ],
        )]

    def _paragraph(self, block: ParagraphText) -> List[Any]:
        return [Paragraph(escape(block.text), self.styles['Body'])]

    def _table(self, block: TableBlock) -> List[Any]:
        n = block.column_count
        if n == 0:
            logger.debug("Skipping table without header cells")
            return []

        rows = block.reconciled_rows()
        data = [[Paragraph(escape(cell), self.styles['TableHeader']) for cell in block.header_cells]]
        data += [[Paragraph(escape(cell), self.styles['Cell']) for cell in row] for row in rows]

        table = Table(
            data,
            colWidths=[self.frame_width / n] * n,
            repeatRows=1,
            spaceBefore=theme.TABLE_SPACE_BEFORE,
            spaceAfter=theme.TABLE_SPACE_AFTER,
            splitInRow=1,
        )
        table.setStyle(TableStyle([
            # Header row
            ('BACKGROUND', (0, 0), (-1, 0), theme.COLOR_PRIMARY),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),

            # Data rows
            ('ALIGN', (0, 1), (-1, -1), 'LEFT'),
            ('TOPPADDING', (0, 0), (-1, -1), theme.CELL_PADDING),
            ('BOTTOMPADDING', (0, 0), (-1, -1), theme.CELL_PADDING),

            # Alternating row colors
            *[('BACKGROUND', (0, r), (-1, r), theme.COLOR_ZEBRA)
              for r in striped_rows(len(rows))],

            ('GRID', (0, 0), (-1, -1), 0.5, theme.COLOR_BORDER),
        ]))
        return [table]

    # =========================================
    # FRAME
    # =========================================

    def _header_band(self, title: str, generated_on: date) -> Table:
        band = Table(
            [
                [Paragraph(escape(title), self.styles['Title'])],
                [Paragraph(escape(plan_subtitle(title)), self.styles['BannerMeta'])],
                [Paragraph(
                    f"{theme.DATE_LABEL} {generated_on.strftime(theme.DATE_FORMAT)}",
                    self.styles['BannerMeta'],
                )],
            ],
            colWidths=[self.frame_width],
            spaceAfter=12,
            splitInRow=1,
        )
        band.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), theme.COLOR_BANNER),
            ('LEFTPADDING', (0, 0), (-1, -1), 14),
            ('RIGHTPADDING', (0, 0), (-1, -1), 14),
            ('TOPPADDING', (0, 0), (-1, 0), 14),
            ('TOPPADDING', (0, 1), (-1, -1), 1),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 1),
            ('BOTTOMPADDING', (0, -1), (-1, -1), 14),
        ]))
        return band

    def _footer(self) -> List[Any]:
        footer = [
            Spacer(1, 12),
            HRFlowable(
                width="100%", thickness=1, color=theme.COLOR_BORDER,
                spaceBefore=4, spaceAfter=6,
            ),
        ]
        footer += [Paragraph(escape(line), self.styles['Footer']) for line in theme.DISCLAIMER_LINES]
        return footer

    def build_story(
        self,
        title: str,
        blocks: List[Block],
        generated_on: Optional[date] = None,
    ) -> List[Any]:
        """Map blocks to flowables, framed by the header band and footer"""
        story = [self._header_band(title, generated_on or date.today())]
        for block in blocks:
            story.extend(self._handlers[block.type](block))
        story.extend(self._footer())
        return story

    # =========================================
    # OUTPUT
    # =========================================

    def _build(
        self,
        title: Optional[str],
        source_text: Optional[str],
        generated_on: Optional[date] = None,
    ) -> Tuple[bytes, int, int]:
        title = (title or "").strip() or DEFAULT_TITLE
        blocks = parse_plan(source_text)
        logger.debug(f"Parsed {len(blocks)} blocks for '{title}'")

        story = self.build_story(title, blocks, generated_on)
        pages = [0]

        def add_page_number(canvas, doc):
            canvas.saveState()
            canvas.setFont(theme.FONT_REGULAR, theme.FONT_SIZE_SMALL)
            canvas.setFillColor(theme.COLOR_MUTED)
            canvas.drawCentredString(
                self.page_width / 2,
                theme.PAGE_MARGIN / 2,
                f"Página {doc.page}"
            )
            canvas.restoreState()
            pages[0] = max(pages[0], doc.page)

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=theme.PAGE_SIZE,
            leftMargin=theme.PAGE_MARGIN,
            rightMargin=theme.PAGE_MARGIN,
            topMargin=theme.PAGE_MARGIN,
            bottomMargin=theme.PAGE_MARGIN,
            title=title,
            author=theme.AUTHOR,
            subject=plan_subtitle(title),
        )

        try:
            doc.build(story, onFirstPage=add_page_number, onLaterPages=add_page_number)
        except Exception as exc:
            logger.error(f"PDF build failed for '{title}': {exc}")
            raise RenderBackendFailure(title, str(exc)) from exc

        return buffer.getvalue(), pages[0], len(blocks)

    def render(
        self,
        title: Optional[str],
        source_text: Optional[str],
        generated_on: Optional[date] = None,
    ) -> bytes:
        """
        Render plan text to PDF.

        Args:
            title: Document title (blank falls back to the default title)
            source_text: LLM markup; None or "" renders header and footer only
            generated_on: Date shown in the header, today by default

        Returns:
            Complete PDF bytes

        Raises:
            RenderBackendFailure: ReportLab could not build the document
        """
        pdf_bytes, pages, block_count = self._build(title, source_text, generated_on)
        logger.info(f"Rendered plan PDF: {block_count} blocks, {pages} pages, {len(pdf_bytes):,} bytes")
        return pdf_bytes

    def render_to_file(
        self,
        title: Optional[str],
        source_text: Optional[str],
        output_path: str,
        generated_on: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Render plan text and write the PDF to output_path.

        Returns:
            Dict with output info
        """
        pdf_bytes, pages, block_count = self._build(title, source_text, generated_on)

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)
        logger.info(f"Wrote {path} ({pages} pages)")

        return {
            "output_path": str(path),
            "pages": pages,
            "size_bytes": len(pdf_bytes),
            "blocks": block_count,
            "format": "plan",
            "page_size": "A4",
        }


# =========================================
# CONVENIENCE FUNCTIONS
# =========================================

def render_plan_pdf(title: Optional[str], source_text: Optional[str]) -> bytes:
    """Quick function to render a plan PDF."""
    return PlanPdfRenderer().render(title, source_text)


def attachment_filename() -> str:
    """Download name for exported plans"""
    return DEFAULT_FILENAME
