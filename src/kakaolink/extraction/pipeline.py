"""Turn ingested chat messages into ExtractedLink records."""

import logging
from collections.abc import Iterable

from kakaolink.extraction.domains import resolve_domain
from kakaolink.extraction.urls import extract_urls
from kakaolink.models.chat import ChatMessage
from kakaolink.models.link import UNKNOWN_DOMAIN, ExtractedLink

logger = logging.getLogger(__name__)


def extract_links(messages: Iterable[ChatMessage]) -> list[ExtractedLink]:
    """Build one ExtractedLink per URL occurrence, in message then URL order.

    Ids are ``"{row}-{urlIndex}"``, where row is the CSV data row the message
    came from (or its position in ``messages`` when unknown), so identical
    input yields identical ids. Messages missing a timestamp, author, or text
    are skipped.
    """
    links: list[ExtractedLink] = []
    for position, message in enumerate(messages):
        message_index = position if message.row is None else message.row
        if not message.is_eligible:
            continue
        for url_index, url in enumerate(extract_urls(message.text)):
            links.append(
                ExtractedLink(
                    id=f"{message_index}-{url_index}",
                    url=url,
                    message=message.text,
                    user=message.author,
                    date=message.timestamp,
                    domain=resolve_domain(url),
                )
            )

    unknown = sum(1 for link in links if link.domain == UNKNOWN_DOMAIN)
    logger.info("Extracted links", extra={"links": len(links), "unknown_domains": unknown})
    return links
