"""Catalog of split types used when choosing where to cut text.

Each split type pairs a regular expression with a structural cost and a side
telling whether the cut falls immediately before or immediately after a match.
Lower cost means a more natural place to stop reading:

    sentence boundary (0) < disjunctive punctuation (10)
        < word boundary (40) < mid-word (90)

Costs share a unit with the distance term used by ``candidates.split_cost``
(percent of the target length), so a difference of 40 between two split types
means a cut may drift up to 40% of the target length further away to land on
the better boundary.

Usage:
    for split_type in SPLIT_TYPES:
        match = split_type.search(text, 0)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum


class SplitCost(IntEnum):
    """Structural cost of cutting at a given kind of boundary."""

    SENTENCE = 0
    PUNCTUATION = 10
    WORD = 40
    MID_WORD = 90


class SplitSide(Enum):
    """Which side of a match the cut falls on."""

    BEFORE = "before"  # match opens the hidden text
    AFTER = "after"  # match closes the visible text


@dataclass(frozen=True)
class SplitType:
    """A pattern-based boundary with its cost and split side.

    Attributes:
        name: Identifier used as the candidate label in logs and results
        match: Compiled pattern locating boundaries of this kind
        cost: Structural cost of splitting here (lower is preferred)
        side: Whether the cut falls before or after the match
        description: Human-readable explanation
    """

    name: str
    match: re.Pattern[str]
    cost: int
    side: SplitSide
    description: str

    def search(self, text: str, pos: int = 0) -> re.Match[str] | None:
        """Return the first match in ``text`` at or after ``pos``."""
        return self.match.search(text, pos)


# "Disjunctive" characters imply some separation between the text on either
# side. Conjunctive ones such as "&" and "+" are left out so "a & b" stays
# together where possible.
# fmt: off
DISJUNCTIVE_CHARS: tuple[str, ...] = (
    "/", "\\", "~", "|", ".", "<", ">", ":", ";", "-", "=", "#", "_",
    "¦",  # broken bar
    "«",  # left guillemet
    "·",  # middle dot
    "»",  # right guillemet
    "‐",  # hyphen
    "‑",  # non-breaking hyphen
    "‒",  # figure dash
    "–",  # en dash
    "—",  # em dash
    "―",  # horizontal bar
    "‖",  # double vertical line
    "•",  # bullet
    "‣",  # triangular bullet
    "‹",  # single left guillemet
    "›",  # single right guillemet
)
# fmt: on

SENTENCE_START = re.compile(r"\s+[\(\[\{<'\"]+\w")
SENTENCE_END = re.compile(r"\w[\.,!\?\)\]\}>'\"]+\s+")
DISJUNCTIVE_PUNCTUATION = re.compile(
    r"\s+(?:" + "|".join(re.escape(char) for char in DISJUNCTIVE_CHARS) + r")+\s"
)
WORD_BOUNDARY = re.compile(" ")
ANY_CHARACTER = re.compile(".", re.DOTALL)


# ---------------------------------------------------------------------------
# Canonical split types, in tie-breaking order
# ---------------------------------------------------------------------------

SPLIT_TYPES: tuple[SplitType, ...] = (
    SplitType(
        name="sentence_start",
        match=SENTENCE_START,
        cost=SplitCost.SENTENCE,
        side=SplitSide.BEFORE,
        description="Opening bracket or quote after whitespace",
    ),
    SplitType(
        name="sentence_end",
        match=SENTENCE_END,
        cost=SplitCost.SENTENCE,
        side=SplitSide.AFTER,
        description="Closing punctuation followed by whitespace",
    ),
    SplitType(
        name="disjunctive_punctuation",
        match=DISJUNCTIVE_PUNCTUATION,
        cost=SplitCost.PUNCTUATION,
        side=SplitSide.BEFORE,
        description="Separator punctuation surrounded by whitespace (' - ', ' | ')",
    ),
    SplitType(
        name="word_boundary",
        match=WORD_BOUNDARY,
        cost=SplitCost.WORD,
        side=SplitSide.BEFORE,
        description="Space between two words",
    ),
    SplitType(
        name="mid_word",
        match=ANY_CHARACTER,
        cost=SplitCost.MID_WORD,
        side=SplitSide.BEFORE,
        description="Any character; always matches",
    ),
)


def get_split_type(name: str) -> SplitType:
    """Return the canonical split type called ``name``."""
    found = next((t for t in SPLIT_TYPES if t.name == name), None)
    if found is None:
        raise KeyError(f"Unknown split type: {name}")
    return found


__all__ = [
    "DISJUNCTIVE_CHARS",
    "SPLIT_TYPES",
    "SplitCost",
    "SplitSide",
    "SplitType",
    "get_split_type",
]
