"""Format link statistics as a human-readable summary."""

from collections.abc import Callable, Mapping
from typing import Any

from ._coerce import _coerce_options, _coerce_stats
from .FormatOptions import FormatOptions
from .LinkStats import LinkStats
from .PathMode import PathMode

_BULLET = "  • "


def _header(stats: LinkStats, options: FormatOptions) -> list[str]:
    return ["📊 Summary:"]


def _path_mode(stats: LinkStats, options: FormatOptions) -> list[str]:
    if options.path_mode is None:
        return []
    return [f"{_BULLET}Path mode: {PathMode(options.path_mode).value}"]


def _dry_run(stats: LinkStats, options: FormatOptions) -> list[str]:
    if not options.dry_run:
        return []
    return [f"{_BULLET}Mode: DRY RUN (no files modified)"]


def _totals(stats: LinkStats, options: FormatOptions) -> list[str]:
    return [
        f"{_BULLET}Total links processed: {stats.total_links}",
        f"{_BULLET}Files modified: {stats.files_modified}",
    ]


def _categories(stats: LinkStats, options: FormatOptions) -> list[str]:
    # Omitted entirely, header included, when there is nothing to break down
    if not stats.links_by_category:
        return []
    lines = ["", "🔗 Links by transformation:"]
    lines.extend(f"{_BULLET}{category}: {count}" for category, count in stats.links_by_category.items())
    return lines


_SECTIONS: tuple[Callable[[LinkStats, FormatOptions], list[str]], ...] = (
    _header,
    _path_mode,
    _dry_run,
    _totals,
    _categories,
)


def format_summary(
    stats: LinkStats | Mapping[str, Any],
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str:
    """Render statistics as a multi-line summary block.

    Args:
        stats: Snapshot from StatsCollector.get_stats() or an equivalent mapping
        options: Run options; path mode and dry-run lines appear only when set

    Returns:
        Lines joined with newlines, no trailing newline
    """
    stats = _coerce_stats(stats)
    options = _coerce_options(options)

    lines: list[str] = []
    for section in _SECTIONS:
        lines.extend(section(stats, options))
    return "\n".join(lines)
