from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MetaNode:
    """Immutable XML element value.

    ``attributes`` is an ordered tuple of pairs so serialization keeps the
    order in which they were added. ``cdata`` holds text that is written as
    a CDATA section; ``None`` means the element has no text.
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[MetaNode, ...] = ()
    cdata: str | None = None

    def attribute(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def find(self, tag: str) -> MetaNode | None:
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def iter(self):
        yield self
        for child in self.children:
            yield from child.iter()
