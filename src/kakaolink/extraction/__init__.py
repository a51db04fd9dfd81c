"""Link extraction: URL matching, hostname resolution, and record building.

Public API:
    extract_links(messages) -> list[ExtractedLink]
        Single entry point that finds every URL in every eligible message.
"""

from kakaolink.extraction.domains import resolve_domain
from kakaolink.extraction.pipeline import extract_links
from kakaolink.extraction.urls import extract_urls, strip_urls

__all__ = [
    "extract_links",
    "extract_urls",
    "resolve_domain",
    "strip_urls",
]
