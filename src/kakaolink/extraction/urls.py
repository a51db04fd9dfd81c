"""URL extraction and removal for plain-text chat messages."""

import re

# http:// or https:// followed by everything up to the next whitespace.
# Trailing punctuation ("see https://a.com/x)." ) stays part of the match.
URL_PATTERN = re.compile(r"https?://\S+")


def extract_urls(text: str) -> list[str]:
    """Extract all URLs from message text, in order of appearance."""
    return [url.strip() for url in URL_PATTERN.findall(text)]


def strip_urls(text: str) -> str:
    """Remove every URL from message text.

    Used by the URL-stripped export variant so the message column does not
    repeat the link column. Surrounding whitespace is trimmed; inner spacing
    is left as it was.
    """
    return URL_PATTERN.sub("", text).strip()
