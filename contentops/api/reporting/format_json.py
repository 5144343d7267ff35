"""Format link statistics as JSON."""

import json
from collections.abc import Mapping
from typing import Any

from ._coerce import _coerce_options, _coerce_stats
from .FormatOptions import FormatOptions
from .LinkStats import LinkStats


def format_json(
    stats: LinkStats | Mapping[str, Any],
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str:
    """Serialize statistics merged with the options that were set.

    Keys use the camelCase wire names. Options left unset are omitted rather
    than written as null.
    """
    payload = _coerce_stats(stats).model_dump(mode="json", by_alias=True)
    payload.update(_coerce_options(options).model_dump(mode="json", by_alias=True, exclude_none=True))
    return json.dumps(payload, indent=2, ensure_ascii=False)
