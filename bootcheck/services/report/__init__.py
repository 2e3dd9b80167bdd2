"""Test report rendering."""

from bootcheck.services.report.renderer import ReportRenderer

__all__ = ["ReportRenderer"]
