"""An intrusive doubly linked list with sentinel ends."""

from __future__ import annotations

from typing import Any, Iterator


class Link:
    """A list node carrying the object that owns it."""

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.next: Link | None = None
        self.prev: Link | None = None

    def __repr__(self) -> str:
        return f"Link({self.owner!r})"

    def unlink(self) -> None:
        """Detach from the neighbours, joining them to each other."""
        if self.next is not None:
            self.next.prev = self.prev
        if self.prev is not None:
            self.prev.next = self.next
        self.next = self.prev = None

    def link_before(self, other: Link) -> None:
        """Insert other immediately before this link."""
        other.next = self
        other.prev = self.prev
        if self.prev is not None:
            self.prev.next = other
        self.prev = other

    def link_after(self, other: Link) -> None:
        """Insert other immediately after this link."""
        other.next = self.next
        other.prev = self
        if self.next is not None:
            self.next.prev = other
        self.next = other


class LinkedList:
    """A list bounded by begin and end sentinels; iterates over link owners."""

    def __init__(self) -> None:
        self.begin = Link()
        self.end = Link()
        self.reset()

    def reset(self) -> None:
        """Empty the list without touching the links that were in it."""
        self.begin.next = self.end
        self.begin.prev = None
        self.end.next = None
        self.end.prev = self.begin

    def push_front(self, link: Link) -> None:
        self.begin.link_after(link)

    def __iter__(self) -> Iterator[Any]:
        link = self.begin.next
        while link is not None and link is not self.end:
            yield link.owner
            link = link.next