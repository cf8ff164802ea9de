from __future__ import annotations

import pytest

from fedsim.contracts import Appearance
from fedsim.core import EngineIntegrityError, seeded_random
from fedsim.match import performance_weight, select_winner, simulate_match
from tests.helpers import SequenceRandom, appear, main_event_pair, make_performer


def test_performance_weight_formula():
    a, _ = main_event_pair()
    assert performance_weight(a) == pytest.approx(95 + 35 + 24 + 31)


def test_zero_points_weighs_as_one():
    p = make_performer("Z", points=0, morale=0, stamina=0, popularity=0, charisma=0)
    assert performance_weight(p) == 1


def test_single_group_is_no_contest():
    a, b = main_event_pair()
    appearances = [appear(a, 1), appear(b, 1)]
    result = simulate_match(appearances, SequenceRandom([0.5]))

    assert all(not x.winner and not x.loser for x in result)
    assert all(r is not o for r, o in zip(result, appearances))


def test_main_event_has_one_winner_and_one_loser():
    a, b = main_event_pair()
    result = simulate_match([appear(a, 1), appear(b, 2)], seeded_random(3))

    assert sum(x.winner for x in result) == 1
    assert sum(x.loser for x in result) == 1
    assert all(x.winner != x.loser for x in result)


def test_roulette_threshold_picks_by_cumulative_weight():
    a, b = main_event_pair()
    appearances = [appear(a, 1), appear(b, 2)]

    assert select_winner(appearances, SequenceRandom([0.0])) == "A"
    assert select_winner(appearances, SequenceRandom([0.99])) == "B"


def test_team_members_share_the_result():
    p1, p2, p3, p4 = (make_performer(f"P{i}") for i in range(1, 5))
    appearances = [appear(p1, 1), appear(p2, 1), appear(p3, 2), appear(p4, 2)]
    result = simulate_match(appearances, SequenceRandom([0.99]))

    assert [x.winner for x in result] == [False, False, True, True]
    assert [x.loser for x in result] == [True, True, False, False]


def test_managers_follow_their_group_but_never_win_the_draw():
    boss = make_performer("M", points=100, morale=100, stamina=100, popularity=100, charisma=100)
    p1, p2 = make_performer("P1"), make_performer("P2")
    appearances = [appear(boss, 1, manager=True), appear(p1, 1), appear(p2, 2)]

    assert select_winner(appearances, SequenceRandom([0.0])) == "P1"
    result = simulate_match(appearances, SequenceRandom([0.0]))
    assert [x.winner for x in result] == [True, True, False]

    result = simulate_match(appearances, SequenceRandom([0.99]))
    assert [x.loser for x in result] == [True, True, False]


def test_inputs_are_not_mutated():
    a, b = main_event_pair()
    appearances = [appear(a, 1), appear(b, 2)]
    simulate_match(appearances, seeded_random(1))
    assert all(not x.winner and not x.loser for x in appearances)


def test_empty_match_is_a_contract_violation():
    with pytest.raises(EngineIntegrityError) as exc:
        simulate_match([], seeded_random(1))
    assert exc.value.error_code == "EMPTY_MATCH"


def test_multi_group_match_without_competitors_raises():
    appearances = [
        Appearance(performer_id="X", group_id=1),
        Appearance(performer_id="Y", group_id=2),
    ]
    with pytest.raises(EngineIntegrityError) as exc:
        simulate_match(appearances, seeded_random(1))
    assert exc.value.artifact.state_snapshot["group_ids"] == [1, 2]


@pytest.mark.parametrize("seed", range(25))
def test_winners_are_exactly_one_group(seed):
    performers = [make_performer(f"P{i}", points=40 + 10 * i) for i in range(4)]
    appearances = [appear(p, i % 3 + 1) for i, p in enumerate(performers)]
    result = simulate_match(appearances, seeded_random(seed))

    winning_groups = {x.group_id for x in result if x.winner}
    assert len(winning_groups) == 1
    for x in result:
        assert x.winner == (x.group_id in winning_groups)
        assert x.loser == (x.group_id not in winning_groups)
