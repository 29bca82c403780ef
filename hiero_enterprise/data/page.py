"""
Paginated mirror node results.

A Page wraps one response body: the converted items, in upstream order,
plus the continuation link. ``links.next`` is either a relative path that
can be fetched as-is, or None. An empty string is never treated as a link.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageLinks:
    """Pagination links for navigating between pages."""

    next: str | None = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of converted mirror node results.

    Attributes:
        data: Items in this page, in upstream array order.
        links: Continuation links.
    """

    data: list[T] = field(default_factory=list)
    links: PageLinks = field(default_factory=PageLinks)

    @property
    def has_next(self) -> bool:
        """Whether a next page link is present."""
        return self.links.next is not None

    def __len__(self) -> int:
        return len(self.data)


def empty_page() -> Page[T]:
    """A page with no items and no next link."""
    return Page(data=[], links=PageLinks(next=None))
