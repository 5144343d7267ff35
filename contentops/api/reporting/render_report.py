"""Render a report in a named output format."""

from collections.abc import Callable, Mapping
from typing import Any

from contentops.utils.get_logger import get_logger

from .format_json import format_json
from .format_summary import format_summary
from .FormatOptions import FormatOptions
from .LinkStats import LinkStats

logger = get_logger("reporting.render_report")

_RENDERERS: dict[str, Callable[..., str]] = {
    "summary": format_summary,
    "json": format_json,
}


def render_report(
    stats: LinkStats | Mapping[str, Any],
    options: FormatOptions | Mapping[str, Any] | None = None,
    output_format: str = "summary",
) -> str:
    """Render statistics with the renderer registered for output_format.

    Raises:
        ValueError: If output_format is not a known format
    """
    renderer = _RENDERERS.get(output_format)
    if renderer is None:
        raise ValueError(f"Unknown output format: {output_format} (expected one of: {', '.join(_RENDERERS)})")

    logger.debug("Rendering link stats as %s", output_format)
    return renderer(stats, options)
