"""Pydantic models for markup documents rendered by the CLI."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .dom_model import DomNode


class NodeSpec(BaseModel):
    """One element in a markup document."""

    tag: str = Field(..., description="Element name, e.g. div or input.")
    attrs: Dict[str, Any] = Field(
        default_factory=dict,
        description="Attribute mapping; null values are dropped when rendering.",
    )
    text: Optional[str] = Field(None, description="Text content, escaped when rendered.")
    raw_html: Optional[str] = Field(
        None,
        alias="rawHtml",
        description="Trusted markup inserted verbatim; takes precedence over text.",
    )
    void: bool = Field(False, description="Render as an empty tag without a closing tag.")
    open_style: bool = Field(
        False,
        alias="openStyle",
        description="For void tags, emit <br> instead of <br />.",
    )
    children: List[Union["NodeSpec", str]] = Field(
        default_factory=list, description="Nested elements or text nodes."
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_dom(self) -> DomNode:
        return DomNode(
            tag=self.tag,
            attrs=dict(self.attrs),
            children=[
                child.to_dom() if isinstance(child, NodeSpec) else child
                for child in self.children
            ],
            text=self.text,
            raw_html=self.raw_html,
            void=self.void,
            open_style=self.open_style,
        )


class MarkupDocument(BaseModel):
    """Top-level document: a list of nodes plus rendering options."""

    escape: bool = Field(
        True,
        description="Escape tag names and attributes; false uses the quote-only escape.",
    )
    nodes: List[NodeSpec] = Field(default_factory=list, description="Root nodes.")

    model_config = ConfigDict(extra="forbid")

    def to_dom(self) -> List[DomNode]:
        return [node.to_dom() for node in self.nodes]


__all__ = ["MarkupDocument", "NodeSpec"]
