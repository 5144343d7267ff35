"""Collector for accumulating link processing statistics."""

from contentops.utils.get_logger import get_logger

from .LinkStats import LinkStats

logger = get_logger("reporting.StatsCollector")


class StatsCollector:
    """Running totals for a single link processing run.

    Not thread-safe: one collector belongs to one run. Concurrent callers
    must synchronize externally.
    """

    def __init__(self) -> None:
        self._total_links = 0
        self._files_modified = 0
        self._links_by_category: dict[str, int] = {}

    def record_links(self, count: int) -> None:
        """Record links found in a file.

        The count is added as given; negative values reduce the total.
        """
        self._total_links += count

    def record_file_modified(self) -> None:
        """Record a file modification."""
        self._files_modified += 1

    def record_transformation(self, category: str, count: int = 1) -> None:
        """Record a link transformation under an exact category label."""
        self._links_by_category[category] = self._links_by_category.get(category, 0) + count

    def get_stats(self) -> LinkStats:
        """Return an independent snapshot of the accumulated statistics."""
        return LinkStats(
            total_links=self._total_links,
            files_modified=self._files_modified,
            links_by_category=dict(self._links_by_category),
        )

    def reset(self) -> None:
        """Discard all accumulated statistics."""
        logger.debug(
            "Resetting link stats: total_links=%d files_modified=%d categories=%d",
            self._total_links,
            self._files_modified,
            len(self._links_by_category),
        )
        self._total_links, self._files_modified, self._links_by_category = 0, 0, {}
