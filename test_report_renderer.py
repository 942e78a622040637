"""Tests for the decision PDF report."""

from backend.evaluator import evaluate
from backend.models.claim import Coordinate, Purpose
from backend.reporting.report_renderer import ReportRenderer, report_lines


def test_report_lines_with_decision():
    decision = evaluate(Coordinate(20.5, 80.25), Purpose.COMMERCIAL)
    assert report_lines(decision) == [
        "Decision Report",
        "Decision: Claim Approved",
        "Reason: Land suitable for commercial use",
        "Purpose: Commercial",
        "Coordinates: 20.5, 80.25",
    ]


def test_report_lines_without_decision():
    assert report_lines(None) == ["Decision Report", "No decision available"]


def test_render_produces_single_page_pdf():
    decision = evaluate(Coordinate(10, 70), Purpose.INDUSTRIAL)
    pdf = ReportRenderer().render(decision)
    assert pdf.startswith(b"%PDF")
    assert b"/Count 1" in pdf
    assert b"Further Review Required" in pdf


def test_render_without_decision():
    pdf = ReportRenderer().render(None)
    assert b"No decision available" in pdf


def test_export_writes_fixed_filename(tmp_path):
    renderer = ReportRenderer(filename="report.pdf")
    path = renderer.export(None, tmp_path / "out")
    assert path == tmp_path / "out" / "report.pdf"
    assert path.read_bytes().startswith(b"%PDF")
