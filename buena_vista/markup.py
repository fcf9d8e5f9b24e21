"""Render truncated text as HTML with an "expand" link.

This is a consumer of ``truncate_text``: it turns each ``(visible, hidden)``
pair into an escaped block and adds the expand affordance afterwards.

    display_truncated_text("hello. world.", length=8)
    # '<p>hello. <a href="#" class="expand-truncated">…</a>'
    # '<span class="truncated">world.</span></p>'
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from html import escape
from typing import Any, cast

from buena_vista.config import DisplayOptions, coerce_options
from buena_vista.truncation import truncate_text

TRUNCATED_CLASS = "truncated"
EXPAND_CLASS = "expand-truncated"
DEFAULT_MORE = " …"


@dataclass
class _Block:
    text: str
    hidden: bool
    parts: list[str] = field(default_factory=list)

    @property
    def visible(self) -> bool:
        return bool(self.text.strip())


def _truncated_class(opts: DisplayOptions) -> str | None:
    if opts.truncated_text is False:
        return None
    if isinstance(opts.truncated_text, dict):
        return opts.truncated_text.get("class", TRUNCATED_CLASS)
    return TRUNCATED_CLASS


def _render_block(visible: str, hidden: str, css_class: str | None) -> _Block:
    block = _Block(text=visible, hidden=bool(hidden), parts=[escape(visible)])
    if hidden and css_class is not None:
        block.parts.append(
            f'<span class="{escape(css_class)}">{escape(hidden)}</span>'
            if block.visible
            else escape(hidden)
        )
    return block


def _more_markup(more: str, visible: str, link: bool) -> str:
    # Never double the space between the visible text and the label.
    label = more.lstrip() if visible[-1:].isspace() else more
    if not link:
        return escape(label)
    return f'<a href="#" class="{EXPAND_CLASS}">{escape(label)}</a>'


def _wrap(block: _Block, opts: DisplayOptions, css_class: str | None) -> str:
    body = "".join(block.parts)
    if opts.block_tag is False:
        return body
    tag = "p" if opts.block_tag is True else opts.block_tag
    hidden_block = css_class and block.hidden and not block.visible
    attr = f' class="{escape(css_class)}"' if hidden_block else ""
    return f"<{tag}{attr}>{body}</{tag}>"


def display_truncated_text(text: str | Sequence[str] | None, **options: Any) -> str:
    """Return ``text`` truncated and rendered as HTML blocks.

    Options (all but ``length`` optional):
        length: Target number of visible characters
        whitespace: "normalize" (default) or "preserve"
        block_tag: Wrapper tag for each segment, or False for none
        more: Text of the expand link; None/False omits it
        truncated_text: False drops hidden text; {"class": ...} renames its class
    """
    opts = cast(DisplayOptions, coerce_options(options, DisplayOptions))
    css_class = _truncated_class(opts)

    blocks = truncate_text(
        text, opts, lambda visible, hidden: _render_block(visible, hidden, css_class)
    )

    visible_blocks = [block for block in blocks if block.visible]
    if opts.more and visible_blocks and any(block.hidden for block in blocks):
        more = DEFAULT_MORE if opts.more is True else str(opts.more)
        last_visible = visible_blocks[-1]
        last_visible.parts.insert(
            1, _more_markup(more, last_visible.text, link=css_class is not None)
        )

    kept = (b for b in blocks if b.visible or not b.hidden or css_class is not None)
    return "".join(_wrap(block, opts, css_class) for block in kept)


__all__ = ["display_truncated_text"]
