"""PDF export of claim decisions."""

from .report_renderer import ReportRenderer, report_lines

__all__ = ['ReportRenderer', 'report_lines']
