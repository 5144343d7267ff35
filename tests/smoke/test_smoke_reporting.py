"""Smoke test: a driver run from config to rendered report."""

import json

from contentops.api.reporting import ReportConfig, StatsCollector, render_report


def test_driver_run_end_to_end():
    config = ReportConfig.from_config({"report": {"output_format": "json", "path_mode": "absolute", "dry_run": True}})
    collector = StatsCollector()

    # Two files: the first has three links, two rewritten; the second has one untouched link
    collector.record_links(3)
    collector.record_transformation("relative→absolute", 2)
    collector.record_file_modified()
    collector.record_links(1)

    parsed = json.loads(render_report(collector.get_stats(), config.to_format_options(), config.output_format))
    assert parsed == {
        "totalLinks": 4,
        "filesModified": 1,
        "linksByCategory": {"relative→absolute": 2},
        "pathMode": "absolute",
        "dryRun": True,
        "verbose": False,
    }

    summary = render_report(collector.get_stats(), config.to_format_options())
    assert "Path mode: absolute" in summary
    assert "DRY RUN" in summary
    assert "relative→absolute: 2" in summary
