"""Hostname resolution for extracted URLs."""

import re
from urllib.parse import urlsplit

from kakaolink.models.link import UNKNOWN_DOMAIN

# Characters that can never appear in a URL host
_FORBIDDEN_HOST_CHARS = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|]")


def resolve_domain(url: str) -> str:
    """Return the hostname of an absolute URL, or "Unknown".

    Never raises: a malformed URL (no scheme, no host, bad port, illegal host
    characters) yields the "Unknown" sentinel so a single bad token cannot
    abort an ingestion run.
    """
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        _ = parts.port  # Raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return UNKNOWN_DOMAIN

    if not parts.scheme or not hostname:
        return UNKNOWN_DOMAIN
    # Bracketed IPv6 literals are validated by urlsplit itself
    if ":" not in hostname and _FORBIDDEN_HOST_CHARS.search(hostname):
        return UNKNOWN_DOMAIN
    return hostname
