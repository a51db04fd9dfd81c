"""Link collection: text/user filtering, sorting, and summary statistics.

Every operation returns a new list. The backing sequence and its records are
never modified, so one collection can serve any number of views.
"""

import functools
from collections.abc import Iterable, Sequence

from dateutil import parser as date_parser

from kakaolink.models.link import ExtractedLink, SortDirection, SortField
from kakaolink.models.view import CollectionStats, ViewState


def _matches_search(link: ExtractedLink, needle: str) -> bool:
    return (
        needle in link.url.lower()
        or needle in link.message.lower()
        or needle in link.domain.lower()
    )


def filter_links(links: Iterable[ExtractedLink], search: str = "", user: str = "") -> list[ExtractedLink]:
    """Return links matching both the text query and the user selection.

    ``search`` is a case-insensitive substring test against url, message and
    domain (any may match). ``user`` must equal the author exactly. Empty
    values match everything.
    """
    needle = search.lower()
    return [
        link
        for link in links
        if (not needle or _matches_search(link, needle)) and (not user or link.user == user)
    ]


def _parse_timestamp(value: str) -> float | None:
    """Best-effort conversion of a raw chat timestamp to epoch seconds."""
    try:
        return date_parser.parse(value).timestamp()
    except (ValueError, OverflowError, OSError):
        return None


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_dates(a: str, b: str, stamps: dict[str, float | None]) -> int:
    # Falls back to raw string order for the pair when either side is unparseable
    a_ts, b_ts = stamps[a], stamps[b]
    if a_ts is None or b_ts is None:
        return _compare(a, b)
    return (a_ts > b_ts) - (a_ts < b_ts)


def sort_links(
    links: Iterable[ExtractedLink],
    field: SortField = SortField.DATE,
    direction: SortDirection = SortDirection.DESC,
) -> list[ExtractedLink]:
    """Return links ordered by ``field``.

    url, user and domain compare as plain strings. Dates are compared as
    timestamps where both sides parse, otherwise as strings.
    """
    links = list(links)
    field = SortField(field)
    key = field.value
    if field is SortField.DATE:
        # Each distinct date is parsed once, not once per comparison
        stamps = {date: _parse_timestamp(date) for date in {link.date for link in links}}
        compare = functools.cmp_to_key(lambda x, y: _compare_dates(x.date, y.date, stamps))
    else:
        compare = functools.cmp_to_key(lambda x, y: _compare(getattr(x, key), getattr(y, key)))
    return sorted(links, key=compare, reverse=SortDirection(direction) is SortDirection.DESC)


class LinkCollection:
    """The full set of links produced by one ingestion run."""

    def __init__(self, links: Iterable[ExtractedLink] = ()) -> None:
        self._links: tuple[ExtractedLink, ...] = tuple(links)
        ids = {link.id for link in self._links}
        if len(ids) != len(self._links):
            raise ValueError("Link ids must be unique within a collection")

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self):
        return iter(self._links)

    @property
    def links(self) -> Sequence[ExtractedLink]:
        return self._links

    def users(self) -> list[str]:
        """Distinct authors, sorted, for the user selector."""
        return sorted({link.user for link in self._links})

    def domains(self) -> list[str]:
        return sorted({link.domain for link in self._links})

    def filter(self, search: str = "", user: str = "") -> list[ExtractedLink]:
        return filter_links(self._links, search, user)

    def view(self, state: ViewState | None = None) -> list[ExtractedLink]:
        """Apply the state's filters, then its sort order."""
        state = state or ViewState()
        filtered = filter_links(self._links, state.search, state.user)
        return sort_links(filtered, state.sort_field, state.sort_direction)

    def stats(self, state: ViewState | None = None) -> CollectionStats:
        """Totals over the whole collection plus the size of the filtered view."""
        state = state or ViewState()
        return CollectionStats(
            total_links=len(self._links),
            unique_users=len(self.users()),
            unique_domains=len(self.domains()),
            filtered_results=len(filter_links(self._links, state.search, state.user)),
        )
