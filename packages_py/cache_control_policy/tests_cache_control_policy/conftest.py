"""Pytest configuration for cache_control_policy tests."""
import pytest

from cache_control_policy import PolicyTable


@pytest.fixture
def scenario_table():
    """HTML is revalidated, images cached for a day, everything else not stored."""
    return PolicyTable(
        [("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
        default="no-store",
    )
