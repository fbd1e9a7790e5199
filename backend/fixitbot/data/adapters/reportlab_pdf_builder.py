from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from PIL import Image as PILImage
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import Image as RLImage
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.entities.estimate_entity import SEVERITY_HIGH, SEVERITY_MEDIUM, EstimateResult

_logger = get_logger("pdf_builder")

TITLE = "FixItBot - Reporte de Análisis"

CATEGORY_NAMES = {
    "lamp_broken": "Faro roto",
    "scratch": "Rayón / rasguño",
    "dent": "Abolladura",
    "bumper_damage": "Daño en defensa",
    "door_ding": "Golpe de puerta",
    "glass_shatter": "Cristal roto",
    "paint_damage": "Daño de pintura",
}


def translate_category(category: str) -> str:
    known = CATEGORY_NAMES.get(category)
    if known:
        return known
    return category.replace("_", " ").title()


def severity_info(severity: str):
    """(badge text, detail line, colour) for a severity tier."""
    if severity == SEVERITY_HIGH:
        return "AVANZADO", "Reparación profesional indispensable.", "#D32F2F"
    if severity == SEVERITY_MEDIUM:
        return "INTERMEDIO", "Se recomienda evaluación en taller.", "#F57C00"
    return "BAJO", "Generalmente reparable con guías DIY.", "#388E3C"


def format_mxn(amount: float) -> str:
    return f"${amount:,.2f} MXN"


class ReportlabPdfBuilder:
    """Builds the downloadable analysis report with reportlab platypus."""

    def __init__(self, image_width: float = 16 * cm, image_max_height: float = 8 * cm):
        self._image_width = image_width
        self._image_max_height = image_max_height
        self._title = ParagraphStyle("title", fontSize=20, leading=24, fontName="Helvetica-Bold",
                                     textColor=colors.HexColor("#2C3E50"), alignment=TA_CENTER, spaceAfter=6)
        self._sub = ParagraphStyle("sub", fontSize=10, fontName="Helvetica",
                                   textColor=colors.HexColor("#6B7280"), alignment=TA_CENTER, spaceAfter=18)
        self._head = ParagraphStyle("head", fontSize=13, fontName="Helvetica-Bold",
                                    textColor=colors.HexColor("#2563EB"), spaceBefore=12, spaceAfter=8)
        self._body = ParagraphStyle("body", fontSize=10, fontName="Helvetica", leading=13)
        self._right = ParagraphStyle("right", parent=self._body, alignment=TA_RIGHT)
        self._note = ParagraphStyle("note", fontSize=9, fontName="Helvetica", leading=12,
                                    textColor=colors.HexColor("#6B7280"), spaceBefore=8)
        self._link = ParagraphStyle("link", parent=self._body, textColor=colors.HexColor("#2563EB"), spaceBefore=6)
        self._footer = ParagraphStyle("foot", fontSize=8, textColor=colors.HexColor("#9CA3AF"), alignment=TA_CENTER)

    def build(self, result: EstimateResult, image: Optional[bytes] = None) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4, title=TITLE,
                                leftMargin=1.5 * cm, rightMargin=1.5 * cm,
                                topMargin=1.5 * cm, bottomMargin=1.5 * cm)
        story: List = [
            Paragraph("FixItBot — Reporte de Análisis", self._title),
            Paragraph("Diagnóstico automático a partir de una fotografía. Estimación informativa.", self._sub),
        ]

        evidence = self._evidence(image) if image else None
        if evidence is not None:
            story.append(Paragraph("Evidencia", self._head))
            story.append(evidence)

        story.extend(self._summary(result))
        if result.breakdown is not None:
            story.extend(self._breakdown(result))
        if result.diy is not None:
            story.append(Paragraph("Opción DIY sugerida", self._head))
            story.append(Paragraph(escape(result.diy.title), self._body))
            story.append(Paragraph(
                "Si decides reparar por tu cuenta, revisa el video y sigue los pasos con precaución. "
                "Para resultados profesionales o daños mayores, recomendamos acudir a un taller.", self._note))
            story.append(Paragraph(escape(result.diy.video_url), self._link))

        story.append(Spacer(1, 1 * cm))
        story.append(Paragraph(
            "Reporte generado por FixItBot — *Estimación preliminar sin efectos de cotización formal.",
            self._footer))
        doc.build(story)
        return buffer.getvalue()

    def _evidence(self, image: bytes) -> Optional[RLImage]:
        try:
            with PILImage.open(BytesIO(image)) as img:
                px_w, px_h = img.size
        except (OSError, ValueError) as e:
            _logger.warning("Imagen de evidencia no legible, se omite: %s", e)
            return None
        width = self._image_width
        height = width * px_h / px_w if px_w else self._image_max_height
        if height > self._image_max_height:
            width = width * self._image_max_height / height
            height = self._image_max_height
        return RLImage(BytesIO(image), width=width, height=height)

    def _summary(self, result: EstimateResult) -> List:
        badge, detail, colour = severity_info(result.severity)
        rows = [
            ["Severidad", Paragraph(
                f'<font color="{colour}"><b>{badge}</b></font><br/><font size="8">{detail}</font>', self._right)],
            ["Zona afectada", Paragraph(f"<b>{escape(result.area)}</b>", self._right)],
            ["Tipo de daño", Paragraph(f"<b>{escape(translate_category(result.category))}</b>", self._right)],
        ]
        table = Table(rows, colWidths=[6 * cm, 12 * cm])
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (0, -1), "Helvetica"),
            ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#4B5563")),
            ("LINEBELOW", (0, 0), (-1, -2), 0.5, colors.HexColor("#F3F4F6")),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("PADDING", (0, 0), (-1, -1), 6),
        ]))
        return [Paragraph("Resumen", self._head), table]

    def _breakdown(self, result: EstimateResult) -> List:
        b = result.breakdown
        badge, _, _ = severity_info(result.severity)
        sev_adj = b.base * (b.sev_factor - 1)
        area_adj = (b.base + sev_adj) * (b.area_factor - 1)
        area_pct = round((b.area_pct or 0) * 100)
        cat = translate_category(result.category)

        rows = [
            [Paragraph(f"1) Costo base por “{escape(cat)}”.", self._body), format_mxn(b.base)],
            [f"2) Ajuste por severidad ({badge.lower()}).", f"+ {format_mxn(sev_adj)}"],
            [f"3) Ajuste por tamaño del área (~ {area_pct}%).", f"+ {format_mxn(area_adj)}"],
            ["Total estimado", format_mxn(result.estimate)],
        ]
        table = Table(rows, colWidths=[12 * cm, 6 * cm])
        table.setStyle(TableStyle([
            ("FONTNAME", (1, 0), (1, -1), "Helvetica-Bold"),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("LINEABOVE", (0, -1), (-1, -1), 0.8, colors.HexColor("#D1D5DB")),
            ("FONTNAME", (0, -1), (0, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, -1), (-1, -1), 12),
            ("TEXTCOLOR", (1, -1), (1, -1), colors.HexColor("#059669")),
            ("PADDING", (0, 0), (-1, -1), 5),
        ]))
        note = Paragraph(
            "Notas: La estimación se basa en patrones promedio por tipo de daño y tamaño aparente del área. "
            "El costo final puede variar según piezas ocultas, color, repuestos o condiciones del vehículo.",
            self._note)
        return [Paragraph("Cómo calculamos esta estimación", self._head), table, note]
