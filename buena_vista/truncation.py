"""Truncate a sequence of text segments at a single human-friendly point.

The segments are treated as one logical text. Segments are consumed in order
while they fit the remaining budget; the first one that does not is split at
the cheapest candidate found by ``candidates.best_candidate``, and every
segment after it is hidden in full. No later split point can beat the one
already chosen: any boundary further on is at least as far from the target
and no cheaper structurally than a segment transition.

Usage:
    truncate_text("badgers must win!", {"length": 10})
    # [("badgers must", " win!")]

    truncate_text(paragraphs, {"length": 200}, lambda visible, hidden: visible)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, TypeVar

from buena_vista.candidates import best_candidate
from buena_vista.config import TruncateOptions, coerce_options
from buena_vista.text_cleaning import prepare_segments

logger = logging.getLogger(__name__)

R = TypeVar("R")
SegmentConsumer = Callable[[str, str], R]


class Phase(Enum):
    """Where the truncator is in its single pass over the segments."""

    ACCUMULATING = "accumulating"  # budget not yet exhausted
    SPLITTING = "splitting"  # current segment exceeds the remaining budget
    PASSING_THROUGH = "passing_through"  # split decided; everything else hidden


@dataclass(frozen=True)
class TruncationState:
    """Budget and position threaded through one truncation call."""

    remaining: int
    first: bool = True
    phase: Phase = Phase.ACCUMULATING

    def classify(self, segment: str) -> Phase:
        """Return the phase in which ``segment`` is processed."""
        if self.phase is Phase.PASSING_THROUGH:
            return Phase.PASSING_THROUGH
        if len(segment) <= self.remaining or self.remaining == 0:
            return Phase.ACCUMULATING
        return Phase.SPLITTING


def _pair(visible: str, hidden: str) -> tuple[str, str]:
    return visible, hidden


def _as_segments(text: str | Sequence[str] | None) -> Sequence[str]:
    if text is None:
        return ()
    return (text,) if isinstance(text, str) else text


def _decide(
    segment: str,
    state: TruncationState,
    target_length: int,
    last: bool,
) -> tuple[tuple[str, str], TruncationState]:
    """Return the ``(visible, hidden)`` pair for ``segment`` and the next state."""
    phase = state.classify(segment)

    if phase is Phase.PASSING_THROUGH:
        return ("", segment), replace(state, first=False)

    if phase is Phase.ACCUMULATING and len(segment) <= state.remaining:
        return (segment, ""), replace(state, remaining=state.remaining - len(segment), first=False)

    if phase is Phase.ACCUMULATING:
        # Budget used up exactly by earlier segments.
        return ("", segment), TruncationState(0, first=False, phase=Phase.PASSING_THROUGH)

    candidate = best_candidate(
        segment, state.remaining, target_length, first=state.first, last=last
    )
    logger.debug(
        "split %d-char segment at %d (%s, cost=%.2f)",
        len(segment),
        len(candidate.before),
        candidate.label,
        candidate.cost,
    )
    return candidate.as_pair(), TruncationState(0, first=False, phase=Phase.PASSING_THROUGH)


def truncate_text(
    text: str | Sequence[str] | None,
    options: TruncateOptions | Mapping[str, Any],
    on_segment: SegmentConsumer[R] | None = None,
) -> list[R]:
    """Split ``text`` into visible and hidden parts, one pair per segment.

    ``text`` is a single string or a sequence of segments. ``on_segment`` is
    called with ``(visible, hidden)`` for every retained segment, in order,
    and its return values form the result; by default the pairs themselves
    are returned.

    Raises:
        ConfigurationError: ``options`` is missing ``length`` or holds an
            invalid value or an unknown key.
    """
    opts = coerce_options(options)
    consumer: Callable[[str, str], Any] = on_segment if on_segment is not None else _pair
    segments = prepare_segments(_as_segments(text), opts.whitespace)

    state = TruncationState(remaining=opts.length)
    results: list[R] = []
    for index, segment in enumerate(segments):
        (visible, hidden), state = _decide(
            segment, state, opts.length, last=index == len(segments) - 1
        )
        results.append(consumer(visible, hidden))
    return results


def truncation_pairs(
    text: str | Sequence[str] | None,
    options: TruncateOptions | Mapping[str, Any],
) -> list[tuple[str, str]]:
    """Return the ``(visible, hidden)`` pairs for ``text``."""
    return truncate_text(text, options, _pair)


__all__ = [
    "Phase",
    "SegmentConsumer",
    "TruncationState",
    "truncate_text",
    "truncation_pairs",
]
