"""Reporting API domain: link statistics collection and rendering."""

from .format_json import format_json
from .format_summary import format_summary
from .FormatOptions import FormatOptions
from .LinkStats import LinkStats
from .PathMode import PathMode
from .render_report import render_report
from .ReportConfig import ReportConfig
from .ReportConfigError import ReportConfigError
from .StatsCollector import StatsCollector

__all__ = [
    "FormatOptions",
    "LinkStats",
    "PathMode",
    "ReportConfig",
    "ReportConfigError",
    "StatsCollector",
    "format_json",
    "format_summary",
    "render_report",
]
