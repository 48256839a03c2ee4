"""Paging parameters shared by every list endpoint."""

from dataclasses import dataclass

from artifacts_api.values import Page, Size

DEFAULT_PAGE = 1
DEFAULT_SIZE = 50


@dataclass(frozen=True)
class PageRequest:
    """Which page of a list to fetch.

    ``page`` starts at 1 and has no upper bound; ``size`` is 1 to 100.
    """

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE


def page_query(request: PageRequest) -> list[tuple[str, Page | Size]]:
    """Validate paging and return it as the leading query parameters."""
    return [("page", Page.of(request.page)), ("size", Size.of(request.size))]
