"""Plain-text summary used when sharing extraction results."""

from collections.abc import Sequence

from kakaolink.export.labels import DEFAULT_LOCALE, get_labels
from kakaolink.models.link import ExtractedLink


def build_share_text(links: Sequence[ExtractedLink], limit: int = 5, locale: str = DEFAULT_LOCALE) -> str:
    """Title, total count, and the first ``limit`` URLs as a numbered list."""
    labels = get_labels(locale)
    top = "\n".join(f"{index}. {link.url}" for index, link in enumerate(links[:limit], start=1))
    return (
        f"{labels['share_title']}\n\n"
        f"{labels['share_total'].format(count=len(links))}\n\n"
        f"{labels['share_top']}\n{top}"
    )
