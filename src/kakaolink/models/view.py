"""View state and derived statistics for a link collection."""

from pydantic import BaseModel

from kakaolink.models.link import SortDirection, SortField


class ViewState(BaseModel):
    """Caller-owned filter and sort settings for one session.

    Defaults mirror the link table's initial state: no filters, newest first.
    """

    search: str = ""
    user: str = ""  # Empty selects all users
    sort_field: SortField = SortField.DATE
    sort_direction: SortDirection = SortDirection.DESC


class CollectionStats(BaseModel):
    """Summary counts shown above the link table."""

    total_links: int  # Unfiltered
    unique_users: int  # Unfiltered
    unique_domains: int  # Unfiltered
    filtered_results: int  # Active view
