"""Unit tests for contentops.api.reporting.render_report module."""

import json

import pytest

from contentops.api.reporting.format_summary import format_summary
from contentops.api.reporting.render_report import render_report

pytestmark = pytest.mark.reporting


def test_render_report_defaults_to_summary(sample_stats):
    assert render_report(sample_stats) == format_summary(sample_stats)


def test_render_report_json(sample_stats):
    parsed = json.loads(render_report(sample_stats, {"dryRun": True}, output_format="json"))
    assert parsed["totalLinks"] == 10
    assert parsed["dryRun"] is True


def test_render_report_passes_options_to_summary(sample_stats):
    output = render_report(sample_stats, {"pathMode": "absolute"}, output_format="summary")
    assert "Path mode: absolute" in output


def test_render_report_unknown_format(sample_stats):
    with pytest.raises(ValueError, match="Unknown output format: yaml"):
        render_report(sample_stats, output_format="yaml")
