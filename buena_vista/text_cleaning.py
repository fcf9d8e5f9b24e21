from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from buena_vista.config import WhitespaceMode

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""

    return _WHITESPACE_RUN.sub(" ", text).strip()


def _normalized(segments: Iterable[str]) -> Iterator[str]:
    return (cleaned for cleaned in map(normalize_whitespace, segments) if cleaned)


def prepare_segments(segments: Iterable[str], mode: WhitespaceMode) -> tuple[str, ...]:
    """Return the segments that take part in truncation.

    ``NORMALIZE`` collapses whitespace and drops segments left empty.
    ``PRESERVE`` keeps every segment untouched, empty ones included.
    """

    return tuple(_normalized(segments) if mode is WhitespaceMode.NORMALIZE else segments)


__all__ = ["normalize_whitespace", "prepare_segments"]
