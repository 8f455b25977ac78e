"""Pageable iterator over ARM list results."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class Pageable:
    """Lazily fetch successive pages, following each page's ``nextLink``.

    *make_request* receives ``None`` for the first page and the previous
    page's continuation link afterwards.  Iterating a ``Pageable`` yields
    the items of every page; every new iteration starts from the first page.
    """

    def __init__(self, make_request: Callable[[str | None], Any]) -> None:
        self._make_request = make_request

    def by_page(self, continuation_token: str | None = None) -> Iterator[Any]:
        """Yield whole page models, optionally resuming from *continuation_token*."""
        token = continuation_token
        while True:
            page = self._make_request(token)
            yield page
            token = _continuation(page)
            if not token:
                return

    def __iter__(self) -> Iterator[Any]:
        for page in self.by_page():
            yield from getattr(page, "value", None) or []

    def to_list(self) -> list[Any]:
        """Fetch all pages and return the merged items."""
        return list(self)


def _continuation(page: Any) -> str | None:
    if isinstance(page, dict):
        return page.get("nextLink")
    link: str | None = getattr(page, "nextLink", None)
    return link
