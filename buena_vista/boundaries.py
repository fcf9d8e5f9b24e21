"""Locate the rightmost boundary of a split type that fits within a limit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from buena_vista.errors import InvalidLimit
from buena_vista.patterns import SplitSide, SplitType


class Cut(NamedTuple):
    """A split of one text into two parts; ``before + after`` is the text."""

    before: str
    after: str


@dataclass(frozen=True)
class BoundarySearch:
    """Outcome of scanning a text for one split type.

    Attributes:
        within: Cut at the last boundary whose visible part fits the limit,
            or ``('', text)`` when no boundary fits
        separator: Text of the match at ``within`` (empty when none fitted)
        beyond: Cut at the first boundary past ``within``, or ``None`` when
            the pattern does not match again
    """

    within: Cut
    separator: str
    beyond: Cut | None

    @property
    def found(self) -> bool:
        return bool(self.separator)


def _cut_at(text: str, start: int, end: int, side: SplitSide) -> Cut:
    pos = start if side is SplitSide.BEFORE else end
    return Cut(text[:pos], text[pos:])


def locate(split_type: SplitType, text: str, limit: int) -> BoundarySearch:
    """Greedily advance through matches of ``split_type`` while they fit ``limit``.

    A BEFORE-side match is accepted while the text preceding it is no longer
    than ``limit``. An AFTER-side match is accepted while the text preceding
    its start is no longer than ``limit``; the visible part then includes the
    match and may run past ``limit`` by up to the match length.

    Raises:
        InvalidLimit: ``text`` already fits within ``limit``.
    """
    if limit >= len(text):
        raise InvalidLimit(limit, len(text))

    accepted = None
    rejected = None
    pos = 0
    while True:
        match = split_type.search(text, pos)
        if match is None:
            break
        if match.start() > limit:
            rejected = match
            break
        accepted = match
        # Zero-width matches cannot occur in the catalog, but never loop forever.
        pos = match.end() if match.end() > match.start() else match.end() + 1

    within = (
        Cut("", text) if accepted is None else _cut_at(text, *accepted.span(), split_type.side)
    )
    beyond = None if rejected is None else _cut_at(text, *rejected.span(), split_type.side)
    return BoundarySearch(
        within=within,
        separator="" if accepted is None else accepted.group(),
        beyond=beyond,
    )


__all__ = ["BoundarySearch", "Cut", "locate"]
