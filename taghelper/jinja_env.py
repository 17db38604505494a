"""Expose the tag helpers to Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .escaping import escape_once
from .tag_helper import cdata_section, content_tag, tag, tag_options


def _template_tag_options(attributes: Optional[Mapping[Any, Any]], escape: bool = True) -> Markup:
    # Templates splice the result after a tag name, so "no attributes" is empty markup.
    return tag_options(attributes, escape) or Markup("")


def install_helpers(env: Environment) -> Environment:
    """Register ``tag``, ``content_tag``, ``tag_options`` and ``cdata_section`` as
    globals and ``escape_once`` as a filter on ``env``.

    The template ``tag_options`` renders an empty string where the Python
    function returns ``None``."""

    env.globals.update(
        tag=tag,
        content_tag=content_tag,
        tag_options=_template_tag_options,
        cdata_section=cdata_section,
    )
    env.filters["escape_once"] = escape_once
    return env


def jinja_env(template_dirs: Iterable[Path]) -> Environment:
    """Create an autoescaping Jinja environment with the helpers installed."""

    env = Environment(
        loader=FileSystemLoader([Path(path) for path in template_dirs]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return install_helpers(env)


__all__ = ["install_helpers", "jinja_env"]
