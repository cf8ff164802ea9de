from __future__ import annotations

import logging
from typing import Iterable, Sequence

from fedsim.contracts import Appearance, AppearanceConstraints, Performer, RandomizationConfig, RandomSource
from fedsim.core import gameplay_random, pick_option, uniform_choice

logger = logging.getLogger(__name__)


class PoolGenerator:
    """Selects and groups performers for one segment.

    Insufficient candidates never raise; the generator returns an empty list
    and callers check for it.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._random_source = random_source or gameplay_random()

    def generate(
        self,
        roster: Iterable[Performer],
        constraints: AppearanceConstraints | None = None,
    ) -> list[Appearance]:
        constraints = constraints or AppearanceConstraints()
        config = constraints.config
        config.validate()

        available = self._eligible(roster, constraints)
        if len(available) < 2:
            logger.debug("not enough participants: %s eligible", len(available))
            return []

        count = min(int(pick_option(config.participant_count, self._random_source)), len(available))

        preferred_gender = pick_option(config.gender, self._random_source)
        same_gender = [p for p in available if p.gender == preferred_gender]
        if len(same_gender) >= count:
            available = same_gender

        team_mode = bool(pick_option(config.team_mode, self._random_source))
        used: set[str] = set()
        if team_mode and len(available) >= config.min_team_candidates:
            selected = self._pick_teams(available, count, config, used)
        else:
            selected = self._pick_individuals(available, count, used)

        logger.debug(
            "generated pool: count=%s gender=%s team_mode=%s picked=%s",
            count,
            preferred_gender,
            team_mode,
            [p.performer_id for p, _ in selected],
        )
        return [
            Appearance(
                performer_id=performer.performer_id,
                group_id=group_id,
                manager=False,
                cost=performer.cost,
                winner=False,
                loser=False,
                performer=performer,
            )
            for performer, group_id in selected
        ]

    def _eligible(self, roster: Iterable[Performer], constraints: AppearanceConstraints) -> list[Performer]:
        excluded = set(constraints.exclude)
        return [
            p
            for p in roster
            if p.active and p.points >= constraints.min_points and p.performer_id not in excluded
        ]

    def _pick_individuals(
        self, available: Sequence[Performer], count: int, used: set[str]
    ) -> list[tuple[Performer, int]]:
        selected: list[tuple[Performer, int]] = []
        for index in range(count):
            picked = self._pick_unused(available, used)
            if picked is None:
                break
            selected.append((picked, index + 1))
        return selected

    def _pick_teams(
        self,
        available: Sequence[Performer],
        count: int,
        config: RandomizationConfig,
        used: set[str],
    ) -> list[tuple[Performer, int]]:
        # An exhausted pool leaves the later team short.
        team_size = count // 2
        selected: list[tuple[Performer, int]] = []
        for team in range(config.team_count):
            for _ in range(team_size):
                picked = self._pick_unused(available, used)
                if picked is None:
                    break
                selected.append((picked, team + 1))
        return selected

    def _pick_unused(self, available: Sequence[Performer], used: set[str]) -> Performer | None:
        candidates = [p for p in available if p.performer_id not in used]
        if not candidates:
            return None
        picked = uniform_choice(candidates, self._random_source)
        used.add(picked.performer_id)
        return picked


def generate_appearances(
    roster: Iterable[Performer],
    constraints: AppearanceConstraints | None = None,
    random_source: RandomSource | None = None,
) -> list[Appearance]:
    return PoolGenerator(random_source).generate(roster, constraints)
