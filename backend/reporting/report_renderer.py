"""
Decision report export.

Draws a single A4 page with the decision lines at fixed positions measured
from the top-left corner of the page.
"""

import io
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ..models.decision import Decision

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Decision Report"
DEFAULT_FILENAME = "report.pdf"
NO_DECISION_TEXT = "No decision available"

LEFT_MARGIN_MM = 20
TITLE_TOP_MM = 20
# Offsets from the top edge for the decision, reason, purpose and coordinate lines
BODY_TOPS_MM = (40, 50, 60, 70)


def report_lines(decision: Optional[Decision], title: str = DEFAULT_TITLE) -> List[str]:
    """
    Build the text lines of a report, in page order.

    Args:
        decision: Decision to report, or None when no claim was made
        title: Heading line

    Returns:
        Title followed by either four decision lines or the fallback line
    """
    if decision is None:
        return [title, NO_DECISION_TEXT]
    return [
        title,
        f"Decision: {decision.verdict.label}",
        f"Reason: {decision.reason}",
        f"Purpose: {decision.purpose.value}",
        f"Coordinates: {decision.coordinate.latitude}, {decision.coordinate.longitude}",
    ]


def _positions(count: int) -> List[Tuple[float, float]]:
    _, page_height = A4
    tops = (TITLE_TOP_MM,) + BODY_TOPS_MM
    return [(LEFT_MARGIN_MM * mm, page_height - top * mm) for top in tops[:count]]


class ReportRenderer:
    """Renders decisions into single-page PDF documents."""

    def __init__(self, title: str = DEFAULT_TITLE, filename: str = DEFAULT_FILENAME):
        self.title = title
        self.filename = filename

    @classmethod
    def from_config(cls, report_config) -> "ReportRenderer":
        return cls(title=report_config.title, filename=report_config.filename)

    def render(self, decision: Optional[Decision]) -> bytes:
        """Return the PDF bytes for a decision (or its absence)."""
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4, pageCompression=0)
        pdf.setTitle(self.title)
        pdf.setFont("Helvetica", 12)

        lines = report_lines(decision, self.title)
        for (x, y), text in zip(_positions(len(lines)), lines):
            pdf.drawString(x, y, text)

        pdf.showPage()
        pdf.save()
        return buffer.getvalue()

    def export(self, decision: Optional[Decision], directory: Union[str, Path] = ".") -> Path:
        """
        Write the report to ``<directory>/<filename>``.

        Args:
            decision: Decision to report, or None
            directory: Target directory, created if missing

        Returns:
            Path of the written file
        """
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / self.filename
        path.write_bytes(self.render(decision))
        logger.info(f"Decision report written to {path}")
        return path
