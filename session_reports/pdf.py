from __future__ import annotations  # Styled PDF rendering for interview results

import os
from datetime import datetime
from typing import Any, List, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from .models import InterviewResults


DEJAVU_SANS = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"  # System font
DEJAVU_SANS_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"  # System font

ACCENT = (45, 115, 245)  # Palette accent
TEXT = (34, 34, 34)  # Primary text color
MUTED = (100, 100, 100)  # Secondary text color
RULE = (230, 230, 230)  # Divider color
SOFT_ACCENT_BG = (243, 248, 255)  # Highlight background


def _parse_datetime(value: str | None) -> datetime | None:  # Parse ISO timestamp, None when malformed
    if not value:
        return None
    try:
        normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def _format_date(value: datetime | None) -> str:  # Format date for display
    if not value:
        return "-"
    return value.strftime("%d %b %Y").lstrip("0")


def _effective_width(pdf: FPDF) -> float:  # Compute effective page width
    return float(pdf.w) - float(pdf.l_margin) - float(pdf.r_margin)


class ReportPDF(FPDF):  # PDF with custom header/footer styling
    def __init__(self, *args, accent: Tuple[int, int, int] = ACCENT, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.accent = accent
        self.header_title = "Interview Report"
        self.font_regular = "Helvetica"
        self.font_bold = "Helvetica"
        self.supports_unicode = False

    def use_system_fonts(self) -> None:  # Switch to DejaVu when installed
        if not (os.path.exists(DEJAVU_SANS) and os.path.exists(DEJAVU_SANS_BOLD)):
            return
        self.add_font("DejaVu", "", DEJAVU_SANS)
        self.add_font("DejaVu", "B", DEJAVU_SANS_BOLD)
        self.font_regular = "DejaVu"
        self.font_bold = "DejaVu"
        self.supports_unicode = True

    def prepare_text(self, text: Any) -> str:  # Sanitize text for core (latin-1) fonts
        value = "" if text is None else str(text)
        if self.supports_unicode:
            return value
        cleaned = value.replace("•", "-").replace("’", "'").replace("“", '"').replace("”", '"')
        return cleaned.encode("latin-1", "ignore").decode("latin-1")

    @property
    def bullet(self) -> str:
        return "•" if self.supports_unicode else "-"

    def header(self) -> None:  # Render accent header band
        usable = self.w - self.l_margin - self.r_margin
        self.set_y(10)
        self.set_x(self.l_margin)
        self.set_text_color(*self.accent)
        self.set_font(self.font_bold, "B", 12)
        self.multi_cell(usable, 6, self.prepare_text(self.header_title))
        mark = self.get_y()
        self.set_draw_color(*self.accent)
        self.set_line_width(0.4)
        self.line(self.l_margin, mark + 1, self.w - self.r_margin, mark + 1)
        self.set_text_color(*TEXT)
        self.ln(4)

    def footer(self) -> None:  # Render footer with pagination
        self.set_y(-12)
        self.set_draw_color(*RULE)
        self.set_line_width(0.2)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(120, 120, 120)
        self.set_font(self.font_regular, "", 9)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="R")

    def paragraph(self, text: Any, *, size: int = 11, bold: bool = False, color: Tuple[int, int, int] = TEXT, height: float = 6) -> None:
        self.set_x(self.l_margin)
        self.set_text_color(*color)
        self.set_font(self.font_bold if bold else self.font_regular, "B" if bold else "", size)
        self.multi_cell(_effective_width(self), height, self.prepare_text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*TEXT)


def _section_title(pdf: ReportPDF, title: str) -> None:  # Render styled section title
    pdf.set_text_color(*TEXT)
    pdf.set_x(pdf.l_margin)
    pdf.set_font(pdf.font_bold, "B", 13)
    pdf.cell(0, 9, pdf.prepare_text(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(*RULE)
    pdf.set_line_width(0.2)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.l_margin + _effective_width(pdf), y)
    pdf.ln(2)


def _meta_block(pdf: ReportPDF, rows: List[Tuple[str, str]]) -> None:  # Draw two-column metadata
    col = _effective_width(pdf) / 2.0
    line = 6
    for idx in range(0, len(rows), 2):
        left = rows[idx]
        right = rows[idx + 1] if idx + 1 < len(rows) else ("", "")
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*MUTED)
        pdf.set_font(pdf.font_regular, "", 10)
        pdf.cell(col, line, pdf.prepare_text(left[0]), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, line, pdf.prepare_text(right[0]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*TEXT)
        pdf.set_font(pdf.font_bold, "B", 11)
        pdf.cell(col, line, pdf.prepare_text(left[1]), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, line, pdf.prepare_text(right[1]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(2)


def _bullets(pdf: ReportPDF, title: str, items: Sequence[str], empty: str = "None recorded.") -> None:  # Titled bullet list
    pdf.paragraph(title, size=11, bold=True, color=ACCENT)
    if not items:
        pdf.paragraph(empty, size=10, color=MUTED)
    for item in items:
        pdf.paragraph(f"{pdf.bullet} {item}", size=10)
    pdf.ln(2)


def _render_exchange(pdf: ReportPDF, index: int, results: InterviewResults) -> None:  # Question, answer and evaluation block
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.set_x(pdf.l_margin)
    pdf.set_text_color(*ACCENT)
    pdf.set_font(pdf.font_bold, "B", 11)
    pdf.cell(0, 8, f"Question {index + 1}", fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.paragraph(results.questions[index], size=10, bold=True)
    if index < len(results.answers):
        pdf.paragraph(f"Answer: {results.answers[index]}", size=10, color=(60, 60, 60))
    if index < len(results.evaluations):
        evaluation = results.evaluations[index]
        pdf.paragraph(f"Score: {evaluation.score}/10", size=10, bold=True)
        pdf.paragraph(f"Strengths: {', '.join(evaluation.strengths) or '-'}", size=10)
        pdf.paragraph(f"Areas for Improvement: {', '.join(evaluation.weaknesses) or '-'}", size=10)
        pdf.paragraph(f"Suggestions: {', '.join(evaluation.suggestions) or '-'}", size=10)
        pdf.paragraph(f"Feedback: {evaluation.overall_feedback or '-'}", size=10, color=MUTED)
    pdf.ln(3)


def pdf_filename(results: InterviewResults, today: datetime | None = None) -> str:  # Attachment name for the export
    stamp = (today or datetime.now()).strftime("%Y-%m-%d")
    return f"interview-{results.id}-{stamp}.pdf"


def generate_results_pdf(results: InterviewResults) -> bytes:  # Build PDF payload for interview results
    pdf = ReportPDF()
    pdf.use_system_fonts()
    pdf.alias_nb_pages()
    pdf.header_title = f"{results.role} - {results.domain} - Interview Report"
    pdf.set_margins(15, 22, 15)
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    _section_title(pdf, "Interview Details")
    _meta_block(
        pdf,
        [
            ("Role", results.role),
            ("Domain", results.domain),
            ("Type", results.mode.title()),
            ("Date", _format_date(_parse_datetime(results.createdAt))),
            ("Average Score", f"{results.averageScore:.1f}/10"),
            ("Total Score", f"{results.totalScore}/{10 * max(1, len(results.evaluations))}"),
        ],
    )

    _section_title(pdf, "Questions and Answers")
    for index in range(len(results.questions)):
        _render_exchange(pdf, index, results)

    summary = results.summary
    if summary is not None:
        pdf.add_page()
        _section_title(pdf, "Interview Summary")
        _bullets(pdf, "Strengths", results.strengths)
        _bullets(pdf, "Areas for Improvement", results.weaknesses)
        _bullets(pdf, "Recommendations", results.recommendations)
        if summary.key_insights:
            _bullets(pdf, "Key Insights", summary.key_insights)
        pdf.paragraph("Final Feedback", size=11, bold=True, color=ACCENT)
        pdf.paragraph(summary.final_feedback or "-", size=10)

    return bytes(pdf.output())


__all__ = ["ReportPDF", "generate_results_pdf", "pdf_filename"]
