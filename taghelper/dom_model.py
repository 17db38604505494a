"""Simple DOM model serialized through the tag helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from markupsafe import Markup

from .escaping import escape_once
from .tag_helper import content_tag, tag


@dataclass
class DomNode:
    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List["DomContent"] = field(default_factory=list)
    text: str | None = None
    raw_html: str | None = None
    void: bool = False
    open_style: bool = False


DomContent = DomNode | str


def _render_children(children: Sequence[DomContent], escape: bool) -> str:
    html_parts: List[str] = []
    for child in children:
        if isinstance(child, DomNode):
            html_parts.append(_render_node(child, escape))
        else:
            html_parts.append(escape_once(child))
    return "".join(html_parts)


def _render_node(node: DomNode, escape: bool) -> Markup:
    if node.void:
        return tag(node.tag, node.attrs, open_style=node.open_style, escape=escape)
    parts: List[str] = []
    if node.raw_html is not None:
        # Raw HTML insertion assumes content is trusted.
        parts.append(node.raw_html)
    elif node.text is not None:
        parts.append(escape_once(node.text))
    if node.children:
        parts.append(_render_children(node.children, escape))
    return content_tag(node.tag, "".join(parts), node.attrs, escape=escape)


def dom_to_html(dom: Sequence[DomNode], escape: bool = True) -> Markup:
    """Serialize ``dom`` to markup.

    Text and plain string children are escaped once; ``raw_html`` is inserted
    verbatim. Void nodes ignore their text and children.
    """

    return Markup("".join(_render_node(node, escape) for node in dom))


__all__ = ["DomContent", "DomNode", "dom_to_html"]
