"""
Fixed visual theme for exported plans.

Colors, fonts and spacing live here; the renderer exposes no override.
"""

from reportlab.lib.colors import HexColor, white
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm

# =========================================
# PAGE
# =========================================
PAGE_SIZE = A4
PAGE_MARGIN = 18 * mm        # same on all four sides

# =========================================
# COLORS
# =========================================
COLOR_BANNER = HexColor('#111827')        # header band background
COLOR_BANNER_MUTED = HexColor('#9CA3AF')  # subtitle / date in the band
COLOR_PRIMARY = HexColor('#2563EB')       # table headers, number badges
COLOR_ACCENT = HexColor('#F97316')        # section text, accent border, bullets
COLOR_ACCENT_TINT = HexColor('#FFF7ED')   # section band background
COLOR_LABEL_TINT = HexColor('#F3F4F6')    # label cells
COLOR_ZEBRA = HexColor('#EFF6FF')         # every other table data row
COLOR_BORDER = HexColor('#D1D5DB')
COLOR_TEXT = HexColor('#1F2937')
COLOR_MUTED = HexColor('#6B7280')

# =========================================
# FONTS
# =========================================
FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'

FONT_SIZE_TITLE = 20
FONT_SIZE_SECTION = 14
FONT_SIZE_SUBSECTION = 12
FONT_SIZE_BODY = 10.5
FONT_SIZE_SMALL = 8

# =========================================
# SPACING (points)
# =========================================
SECTION_SPACE_BEFORE = 10
SECTION_SPACE_AFTER = 6
SUBSECTION_SPACE_BEFORE = 6
SUBSECTION_SPACE_AFTER = 3
ITEM_SPACE_AFTER = 2
PARAGRAPH_SPACE_AFTER = 4
TABLE_SPACE_BEFORE = 4
TABLE_SPACE_AFTER = 8
CELL_PADDING = 4

BULLET_COLUMN_WIDTH = 7 * mm
BADGE_COLUMN_WIDTH = 9 * mm
LABEL_COLUMN_RATIO = 0.35

# =========================================
# FIXED TEXT
# =========================================
BULLET_GLYPH = '•'
DIET_KEYWORD = 'diet'
SUBTITLE_DIET = 'Plan de alimentación personalizado'
SUBTITLE_TRAINING = 'Rutina de entrenamiento personalizada'
DATE_LABEL = 'Generado el'
DATE_FORMAT = '%d/%m/%Y'
DISCLAIMER_LINES = (
    'Este plan ha sido generado automáticamente por GymAI con fines informativos.',
    'Consulta con un profesional sanitario antes de iniciar cualquier rutina o dieta.',
)
AUTHOR = 'GymAI'


def create_styles() -> dict:
    """Create the paragraph styles used by the renderer"""
    styles = {}

    styles['Title'] = ParagraphStyle(
        name='Title',
        fontName=FONT_BOLD,
        fontSize=FONT_SIZE_TITLE,
        leading=FONT_SIZE_TITLE * 1.25,
        textColor=white,
        alignment=TA_LEFT,
    )

    styles['BannerMeta'] = ParagraphStyle(
        name='BannerMeta',
        fontName=FONT_REGULAR,
        fontSize=FONT_SIZE_BODY,
        leading=FONT_SIZE_BODY * 1.4,
        textColor=COLOR_BANNER_MUTED,
    )

    styles['Body'] = ParagraphStyle(
        name='Body',
        fontName=FONT_REGULAR,
        fontSize=FONT_SIZE_BODY,
        leading=FONT_SIZE_BODY * 1.4,
        textColor=COLOR_TEXT,
        spaceAfter=PARAGRAPH_SPACE_AFTER,
    )

    # Body text inside table cells, without paragraph spacing
    styles['Cell'] = ParagraphStyle(
        name='Cell',
        parent=styles['Body'],
        spaceAfter=0,
    )

    styles['CellBold'] = ParagraphStyle(
        name='CellBold',
        parent=styles['Cell'],
        fontName=FONT_BOLD,
    )

    styles['TableHeader'] = ParagraphStyle(
        name='TableHeader',
        parent=styles['Cell'],
        fontName=FONT_BOLD,
        textColor=white,
        alignment=TA_CENTER,
    )

    styles['SectionHeading'] = ParagraphStyle(
        name='SectionHeading',
        fontName=FONT_BOLD,
        fontSize=FONT_SIZE_SECTION,
        leading=FONT_SIZE_SECTION * 1.3,
        textColor=COLOR_ACCENT,
    )

    styles['SubsectionHeading'] = ParagraphStyle(
        name='SubsectionHeading',
        fontName=FONT_BOLD,
        fontSize=FONT_SIZE_SUBSECTION,
        leading=FONT_SIZE_SUBSECTION * 1.3,
        textColor=COLOR_TEXT,
        spaceBefore=SUBSECTION_SPACE_BEFORE,
        spaceAfter=SUBSECTION_SPACE_AFTER,
    )

    styles['Bullet'] = ParagraphStyle(
        name='Bullet',
        fontName=FONT_BOLD,
        fontSize=FONT_SIZE_SECTION,
        leading=FONT_SIZE_BODY * 1.4,
        textColor=COLOR_ACCENT,
        alignment=TA_CENTER,
    )

    styles['Badge'] = ParagraphStyle(
        name='Badge',
        fontName=FONT_BOLD,
        fontSize=FONT_SIZE_BODY,
        leading=FONT_SIZE_BODY * 1.4,
        textColor=white,
        alignment=TA_CENTER,
    )

    styles['Footer'] = ParagraphStyle(
        name='Footer',
        fontName=FONT_REGULAR,
        fontSize=FONT_SIZE_SMALL,
        leading=FONT_SIZE_SMALL * 1.4,
        textColor=COLOR_MUTED,
        alignment=TA_CENTER,
    )

    return styles
