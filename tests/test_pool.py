from __future__ import annotations

from collections import Counter

import pytest

from fedsim.booking import generate_appearances
from fedsim.contracts import AppearanceConstraints, Gender, RandomizationConfig, WeightedOptions
from fedsim.core import seeded_random
from tests.helpers import SequenceRandom, make_performer

# Scripted draws, in the generator's order: participant count, gender, team mode, picks.
COUNT_2 = 0.0
COUNT_3 = 0.8
COUNT_4 = 0.95
MALE = 0.0
FEMALE = 0.9
TEAMS = 0.0
SINGLES = 0.99


def _roster(n: int, **kwargs):
    return [make_performer(f"P{i}", **kwargs) for i in range(1, n + 1)]


def test_below_min_points_roster_is_empty():
    roster = _roster(3, points=30)
    assert generate_appearances(roster, AppearanceConstraints(min_points=40), seeded_random(1)) == []


def test_filters_inactive_low_and_excluded_before_sizing():
    roster = [
        make_performer("P1"),
        make_performer("P2", active=False),
        make_performer("P3", points=39),
        make_performer("P4"),
    ]
    rng = SequenceRandom([0.0])
    result = generate_appearances(roster, AppearanceConstraints(exclude=("P4",)), rng)
    assert result == []
    assert rng.draws == 0


def test_min_points_is_inclusive():
    roster = _roster(2, points=40)
    result = generate_appearances(roster, AppearanceConstraints(min_points=40), SequenceRandom([0.0]))
    assert {a.performer_id for a in result} == {"P1", "P2"}


def test_individual_mode_gives_each_performer_its_own_group():
    roster = _roster(3)
    rng = SequenceRandom([COUNT_2, MALE, SINGLES, 0.0, 0.0])
    result = generate_appearances(roster, random_source=rng)

    assert [a.performer_id for a in result] == ["P1", "P2"]
    assert [a.group_id for a in result] == [1, 2]
    for appearance in result:
        assert appearance.manager is False
        assert appearance.winner is False and appearance.loser is False
        assert appearance.cost == 1000
        assert appearance.performer is not None


def test_team_mode_forms_two_teams():
    roster = _roster(4)
    rng = SequenceRandom([COUNT_4, MALE, TEAMS, 0.0, 0.0, 0.0, 0.0])
    result = generate_appearances(roster, random_source=rng)

    groups = Counter(a.group_id for a in result)
    assert groups == {1: 2, 2: 2}
    assert [a.performer_id for a in result if a.group_id == 1] == ["P1", "P2"]


def test_team_mode_with_two_participants_is_one_on_one():
    roster = _roster(5)
    rng = SequenceRandom([COUNT_2, MALE, TEAMS, 0.0, 0.0])
    result = generate_appearances(roster, random_source=rng)
    assert sorted(a.group_id for a in result) == [1, 2]


def test_team_mode_needs_four_candidates():
    roster = _roster(3)
    rng = SequenceRandom([COUNT_4, MALE, TEAMS, 0.0, 0.0, 0.0])
    result = generate_appearances(roster, random_source=rng)
    assert len(result) == 3
    assert sorted(a.group_id for a in result) == [1, 2, 3]


def test_exhausted_pool_leaves_last_team_short():
    config = RandomizationConfig(team_count=3)
    roster = _roster(5)
    rng = SequenceRandom([COUNT_4, MALE, TEAMS, 0.0])
    result = generate_appearances(roster, AppearanceConstraints(config=config), rng)

    groups = Counter(a.group_id for a in result)
    assert groups == {1: 2, 2: 2, 3: 1}


def test_count_is_clamped_to_available():
    roster = _roster(2)
    rng = SequenceRandom([COUNT_4, MALE, SINGLES, 0.0])
    assert len(generate_appearances(roster, random_source=rng)) == 2


def test_gender_preference_applies_when_pool_is_big_enough():
    roster = [
        make_performer("M1"),
        make_performer("M2"),
        make_performer("F1", gender=Gender.FEMALE),
        make_performer("F2", gender=Gender.FEMALE),
    ]
    rng = SequenceRandom([COUNT_2, FEMALE, SINGLES, 0.0])
    result = generate_appearances(roster, random_source=rng)
    assert {a.performer_id for a in result} == {"F1", "F2"}


def test_gender_preference_falls_back_to_full_pool():
    roster = [
        make_performer("M1"),
        make_performer("F1", gender=Gender.FEMALE),
        make_performer("F2", gender=Gender.FEMALE),
    ]
    rng = SequenceRandom([COUNT_3, MALE, SINGLES, 0.0])
    result = generate_appearances(roster, random_source=rng)
    assert {a.performer_id for a in result} == {"M1", "F1", "F2"}


def test_cost_is_snapshot_of_performer():
    roster = [make_performer("P1", cost=2500), make_performer("P2", cost=700)]
    result = generate_appearances(roster, random_source=SequenceRandom([0.0]))
    assert {a.performer_id: a.cost for a in result} == {"P1": 2500, "P2": 700}


def test_duplicate_roster_entries_are_used_once():
    roster = [make_performer("P1"), make_performer("P1"), make_performer("P2")]
    rng = SequenceRandom([COUNT_3, MALE, SINGLES, 0.0])
    result = generate_appearances(roster, random_source=rng)
    ids = [a.performer_id for a in result]
    assert len(ids) == len(set(ids)) == 2


def test_invalid_config_raises():
    bad = RandomizationConfig(participant_count=WeightedOptions(options=(2, 3), weights=(1.0,)))
    with pytest.raises(ValueError):
        generate_appearances(_roster(4), AppearanceConstraints(config=bad), seeded_random(1))


@pytest.mark.parametrize("seed", range(40))
def test_generated_pools_are_well_formed(seed):
    roster = _roster(6) + [make_performer(f"F{i}", gender=Gender.FEMALE) for i in range(4)]
    result = generate_appearances(roster, random_source=seeded_random(seed))

    ids = [a.performer_id for a in result]
    assert len(ids) == len(set(ids))
    assert 2 <= len(result) <= 4
    groups = Counter(a.group_id for a in result)
    assert len(groups) >= 2
    assert all(count >= 1 for count in groups.values())


def test_same_seed_same_pool():
    roster = _roster(8)
    first = generate_appearances(roster, random_source=seeded_random(21))
    second = generate_appearances(roster, random_source=seeded_random(21))
    assert [(a.performer_id, a.group_id) for a in first] == [(a.performer_id, a.group_id) for a in second]
