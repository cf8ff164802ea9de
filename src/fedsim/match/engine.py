from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from fedsim.contracts import Appearance, Performer, RandomSource
from fedsim.core import gameplay_random, integrity_error, weighted_choice

logger = logging.getLogger(__name__)


def performance_weight(performer: Performer) -> float:
    # A zero-point performer still keeps a sliver of a chance.
    points = performer.points or 1
    return (
        points
        + 0.5 * performer.morale
        + 0.3 * performer.stamina
        + 0.2 * (performer.popularity + performer.charisma)
    )


class MatchEngine:
    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._random_source = random_source or gameplay_random()

    def select_winner(self, appearances: Sequence[Appearance]) -> str | None:
        eligible = [a for a in appearances if a.performer is not None and not a.manager]
        if not eligible:
            return None
        chosen = weighted_choice(eligible, lambda a: performance_weight(a.performer), self._random_source)
        return chosen.performer_id

    def simulate(self, appearances: Sequence[Appearance]) -> list[Appearance]:
        """Resolve winner and loser flags by group; inputs are left untouched."""
        if not appearances:
            raise integrity_error("match", "EMPTY_MATCH", "cannot simulate a match with no appearances")

        group_ids = list(dict.fromkeys(a.group_id for a in appearances))
        if len(group_ids) < 2:
            return [replace(a) for a in appearances]

        winner_id = self.select_winner(appearances)
        if winner_id is None:
            raise integrity_error(
                "match",
                "NO_ELIGIBLE_COMPETITOR",
                "match has no non-manager appearance with a joined performer",
                performer_ids=[a.performer_id for a in appearances],
                group_ids=group_ids,
            )
        winning_group = next(a.group_id for a in appearances if a.performer_id == winner_id)
        logger.debug("match decided: winner=%s group=%s", winner_id, winning_group)
        return [
            replace(a, winner=a.group_id == winning_group, loser=a.group_id != winning_group)
            for a in appearances
        ]


def select_winner(appearances: Sequence[Appearance], random_source: RandomSource | None = None) -> str | None:
    return MatchEngine(random_source).select_winner(appearances)


def simulate_match(appearances: Sequence[Appearance], random_source: RandomSource | None = None) -> list[Appearance]:
    return MatchEngine(random_source).simulate(appearances)
