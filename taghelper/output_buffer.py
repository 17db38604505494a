"""Append-only buffer for rendered markup fragments."""

from __future__ import annotations

from typing import Iterable, List

from markupsafe import Markup, escape


class OutputBuffer:
    """Collect markup fragments and join them once at the end.

    Fragments that are already ``Markup`` are stored as they are; anything
    else is escaped on the way in, so the joined result is always safe.

        >>> buf = OutputBuffer()
        >>> buf.append(Markup("<b>"))
        >>> buf.append("1 < 2")
        >>> buf.to_markup()
        Markup('<b>1 &lt; 2')
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: List[Markup] = []

    def append(self, fragment: object) -> None:
        if fragment is None:
            return
        self._parts.append(escape(fragment))

    def extend(self, fragments: Iterable[object]) -> None:
        for fragment in fragments:
            self.append(fragment)

    def to_markup(self) -> Markup:
        return Markup("".join(self._parts))

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __str__(self) -> str:
        return str(self.to_markup())


__all__ = ["OutputBuffer"]
