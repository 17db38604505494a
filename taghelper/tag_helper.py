"""Build HTML tags programmatically.

Every function here returns ``markupsafe.Markup`` so the result can be
dropped into a Jinja template (or anything else that honours ``__html__``)
without being escaped a second time.

    >>> tag("br")
    Markup('<br />')
    >>> tag("input", {"type": "text", "disabled": True})
    Markup('<input disabled="disabled" type="text" />')
    >>> content_tag("p", "Hello world!", {"class": "strong"})
    Markup('<p class="strong">Hello world!</p>')
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

from markupsafe import Markup

from .escaping import escape_once, html_attribute_name_escape, quote_only_escape, xml_name_escape

BOOLEAN_ATTRIBUTES = frozenset({"disabled", "readonly", "multiple", "checked"})

Attributes = Optional[Mapping[Any, Any]]
Content = Union[str, Markup, None, Callable[[], Any]]


def _normalize_key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    return str(key)


def tag(
    name: str,
    attributes: Attributes = None,
    open_style: bool = False,
    escape: bool = True,
) -> Markup:
    """Return an empty tag such as ``<br />``.

    ``open_style=True`` leaves the tag unterminated (``<br>``), the way
    HTML 4 writes void elements. ``escape=False`` skips name escaping and
    switches attribute values to the quote-only escape of :func:`tag_options`.
    """

    if escape:
        name = xml_name_escape(name)
    options = tag_options(attributes, escape) or ""
    closing = ">" if open_style else " />"
    return Markup(f"<{name}{options}{closing}")


def content_tag(
    name: str,
    content: Content = None,
    attributes: Attributes = None,
    escape: bool = True,
) -> Markup:
    """Return ``<name ...>content</name>``.

    ``content`` is inserted as given; escape text with
    :func:`taghelper.escaping.escape_once` (or ``markupsafe.escape``) first
    if it is not trusted. A callable is called once, with no arguments, and
    its return value is used as the content.
    """

    if callable(content):
        content = content()
    return _content_tag_string(name, content, attributes, escape)


def render_to_string(
    name: str,
    block: Callable[[], Any],
    attributes: Attributes = None,
    escape: bool = True,
) -> Markup:
    """Render ``block()`` wrapped in a ``name`` tag and return the markup."""

    return _content_tag_string(name, block(), attributes, escape)


def render_and_append(
    buffer: Any,
    name: str,
    block: Callable[[], Any],
    attributes: Attributes = None,
    escape: bool = True,
) -> Markup:
    """Render like :func:`render_to_string` and append the result to ``buffer``.

    ``buffer`` is an :class:`~taghelper.output_buffer.OutputBuffer` or any
    object with an ``append`` method. The rendered markup is returned too.
    """

    rendered = render_to_string(name, block, attributes, escape)
    buffer.append(rendered)
    return rendered


def cdata_section(content: Any) -> Markup:
    """Wrap ``content`` in ``<![CDATA[ ... ]]>`` without escaping it.

    The content must not contain ``]]>``.
    """

    if content is None:
        content = ""
    return Markup(f"<![CDATA[{content}]]>")


def _content_tag_string(name: str, content: Any, attributes: Attributes, escape: bool) -> Markup:
    options = tag_options(attributes, escape) or ""
    if escape:
        name = xml_name_escape(name)
    if content is None:
        content = ""
    return Markup(f"<{name}{options}>{content}</{name}>")


def tag_options(attributes: Attributes, escape: bool = True) -> Optional[Markup]:
    """Render ``attributes`` as `` key="value"`` pairs, or ``None`` when there are none.

    With ``escape`` (the default) boolean attributes render as
    ``disabled="disabled"`` when truthy and vanish otherwise, keys are
    restricted to valid attribute-name characters and values go through
    :func:`~taghelper.escaping.escape_once`.

    Without ``escape`` keys are used verbatim and values only have ``"``
    replaced by ``&quot;``. This mode is for callers that already trust
    their input; it does not protect against ``<`` or ``&``.

    ``None`` values are dropped in both modes. When two keys render to the
    same attribute name (``"disabled"`` and ``"DISABLED"``) the later entry
    wins and a falsy boolean entry removes the attribute. Pairs are sorted so
    output does not depend on the mapping's order.
    """

    if not attributes:
        return None

    attrs: Dict[str, str] = {}
    for raw_key, value in attributes.items():
        if value is None:
            continue
        key = _normalize_key(raw_key)
        if not escape:
            attrs[key] = f'{key}="{quote_only_escape(value)}"'
        elif key.lower() in BOOLEAN_ATTRIBUTES:
            key = key.lower()
            if value:
                attrs[key] = f'{key}="{key}"'
            else:
                attrs.pop(key, None)
        else:
            key = html_attribute_name_escape(key)
            attrs[key] = f'{key}="{escape_once(value)}"'

    if not attrs:
        return None
    return Markup(" " + " ".join(sorted(attrs.values())))


__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "cdata_section",
    "content_tag",
    "render_and_append",
    "render_to_string",
    "tag",
    "tag_options",
]
