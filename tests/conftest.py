"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile

# Keep any log files out of the real home directory
os.environ.setdefault("CONTENTOPS_HOME", tempfile.mkdtemp(prefix="contentops-test-"))

import pytest  # noqa: E402

from contentops.api.reporting.LinkStats import LinkStats  # noqa: E402


def pytest_configure(config):
    for marker in ("unit", "smoke", "integration", "reporting", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Statistics Helpers
# =============================================================================


@pytest.fixture
def sample_stats() -> LinkStats:
    """Snapshot with two transformation categories."""
    return LinkStats(
        total_links=10,
        files_modified=3,
        links_by_category={
            "relative→absolute": 5,
            "absolute→relative": 2,
        },
    )


@pytest.fixture
def empty_category_stats() -> LinkStats:
    """Snapshot without any category breakdown."""
    return LinkStats(total_links=5, files_modified=1, links_by_category={})
