"""Accept plain mappings wherever report models are expected."""

from collections.abc import Mapping
from typing import Any

from .FormatOptions import FormatOptions
from .LinkStats import LinkStats


def _coerce_stats(stats: LinkStats | Mapping[str, Any]) -> LinkStats:
    if isinstance(stats, LinkStats):
        return stats
    return LinkStats.model_validate(dict(stats))


def _coerce_options(options: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.model_validate(dict(options))
