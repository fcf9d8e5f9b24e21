"""Score candidate split points for a single segment.

Every split type proposes up to two cuts: the last boundary that fits the
remaining budget and the first one past it. The best split is often just
beyond the raw limit (a full stop two characters late beats a mid-word cut
two characters early), so both are scored with the same cost function and
the cheapest wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from buena_vista.boundaries import Cut, locate
from buena_vista.errors import InvariantViolation
from buena_vista.patterns import SPLIT_TYPES, SplitType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitCandidate:
    """A scored proposal for where to split one segment."""

    before: str
    after: str
    cost: float
    label: str

    def as_pair(self) -> tuple[str, str]:
        return self.before, self.after


def split_cost(structural: float, budget: int, visible: int, target_length: int) -> float:
    """Return ``structural`` plus the distance from ``budget`` in percent of the target."""

    return structural + 100 * abs(budget - visible) / target_length


def _candidate(
    split_type: SplitType, cut: Cut, budget: int, target_length: int, label: str
) -> SplitCandidate:
    return SplitCandidate(
        before=cut.before,
        after=cut.after,
        cost=split_cost(split_type.cost, budget, len(cut.before), target_length),
        label=label,
    )


def evaluate(
    split_type: SplitType,
    text: str,
    budget: int,
    target_length: int,
    *,
    first: bool,
    last: bool,
) -> list[SplitCandidate]:
    """Return zero, one or two scored candidates for ``split_type``.

    ``first`` marks the first segment of the call, where an empty visible part
    is useless. ``last`` marks the final segment; only when another segment
    follows does the end of ``text`` count as a boundary of its own.
    """
    search = locate(split_type, text, budget)
    within = (
        []
        if first and not search.within.before
        else [_candidate(split_type, search.within, budget, target_length, split_type.name)]
    )
    beyond_cut = search.beyond if search.beyond is not None else (None if last else Cut(text, ""))
    beyond = (
        []
        if beyond_cut is None
        else [_candidate(split_type, beyond_cut, budget, target_length, f"{split_type.name}+next")]
    )
    return within + beyond


def rank_candidates(candidates: Iterable[SplitCandidate]) -> list[SplitCandidate]:
    """Sort ``candidates`` by cost; ``sorted`` is stable so enumeration order breaks ties."""

    return sorted(candidates, key=lambda c: c.cost)


def best_candidate(
    text: str,
    budget: int,
    target_length: int,
    *,
    first: bool,
    last: bool,
    split_types: Sequence[SplitType] = SPLIT_TYPES,
) -> SplitCandidate:
    """Pool the candidates of every split type and return the cheapest."""

    ranked = rank_candidates(
        candidate
        for split_type in split_types
        for candidate in evaluate(split_type, text, budget, target_length, first=first, last=last)
    )
    if not ranked:
        raise InvariantViolation(f"no split candidate for {len(text)} chars at budget {budget}")
    logger.debug(
        "split candidates (budget=%d): %s",
        budget,
        ", ".join(f"{c.label}@{len(c.before)}={c.cost:.2f}" for c in ranked),
    )
    return ranked[0]


__all__ = ["SplitCandidate", "best_candidate", "evaluate", "rank_candidates", "split_cost"]
