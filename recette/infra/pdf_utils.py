import io
from typing import Iterable

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from recette.domain.ShoppingItem import ShoppingListResult

# Built-in Japanese CID font; Helvetica has no kana/kanji glyphs
JP_FONT = "HeiseiKakuGo-W5"
pdfmetrics.registerFont(UnicodeCIDFont(JP_FONT))


def generate_pdf_for_shopping_list(result: ShoppingListResult, checked: Iterable[str] = ()) -> bytes:
    """Render the shopping list as a checklist table with budget/calorie totals."""
    checked_ids = set(checked)
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title_style = styles["Title"].clone("JPTitle", fontName=JP_FONT)
    body_style = styles["Normal"].clone("JPNormal", fontName=JP_FONT)
    elements = [
        Paragraph("買い物リスト", title_style),
        Spacer(1, 16),
    ]

    data = [["", "材料", "分量"]]
    for item in result.items:
        data.append(["済" if item.id in checked_ids else "", item.name, item.quantity])

    table = Table(data, repeatRows=1, colWidths=[30, 250, 250])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E53935")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONTNAME", (0, 0), (-1, -1), JP_FONT),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("ALIGN", (0, 0), (0, -1), "CENTER"),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    elements.append(Spacer(1, 16))
    elements.append(Paragraph(f"推定予算: ¥{result.total_budget}-", body_style))
    elements.append(Paragraph(f"推定カロリー: {result.total_calories}kcal", body_style))
    doc.build(elements)
    return buf.getvalue()
