"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from kakaolink.app import app
from kakaolink.models.link import ExtractedLink


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed generation time for exports."""
    return datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)


def _make_link(
    link_id: str = "0-0",
    url: str = "https://example.com/a",
    message: str = "see https://example.com/a",
    user: str = "Alice",
    date: str = "2024-01-01 10:00:00",
    domain: str = "example.com",
) -> ExtractedLink:
    return ExtractedLink(id=link_id, url=url, message=message, user=user, date=date, domain=domain)


@pytest.fixture
def sample_links() -> list[ExtractedLink]:
    """Three links from three users across two domains."""
    return [
        _make_link("0-0", "https://a.com/x", "check https://a.com/x", "Alice", "2024-01-02 09:00:00", "a.com"),
        _make_link("1-0", "https://b.org/y", "Look at https://b.org/y", "Bob", "2024-01-01 12:00:00", "b.org"),
        _make_link("2-0", "http://a.com/z", "another http://a.com/z!", "Carl", "2024-01-03 08:30:00", "a.com"),
    ]
