from __future__ import annotations

from typing import Sequence

from fedsim.contracts import Alignment, Appearance, Gender, Performer


class SequenceRandom:
    """Scripted random source: replays ``values`` in order, cycling at the end."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self._index = 0
        self.draws = 0

    def rand(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.draws += 1
        return value

    def spawn(self, substream_id: str) -> "SequenceRandom":
        return self


def make_performer(
    performer_id: str,
    *,
    name: str | None = None,
    points: float = 60,
    popularity: float = 50,
    morale: float = 50,
    stamina: float = 50,
    charisma: float = 50,
    damage: float = 0,
    alignment: Alignment = Alignment.NEUTRAL,
    gender: Gender = Gender.MALE,
    active: bool = True,
    cost: float = 1000,
    wins: int = 0,
    losses: int = 0,
    streak: int = 0,
    brand_ids: tuple[str, ...] = (),
) -> Performer:
    return Performer(
        performer_id=performer_id,
        name=name or f"Performer {performer_id}",
        points=points,
        popularity=popularity,
        morale=morale,
        stamina=stamina,
        charisma=charisma,
        damage=damage,
        alignment=alignment,
        gender=gender,
        wins=wins,
        losses=losses,
        streak=streak,
        active=active,
        cost=cost,
        brand_ids=brand_ids,
    )


def appear(performer: Performer, group_id: int, *, manager: bool = False) -> Appearance:
    return Appearance(
        performer_id=performer.performer_id,
        group_id=group_id,
        manager=manager,
        cost=performer.cost,
        performer=performer,
    )


def main_event_pair() -> tuple[Performer, Performer]:
    a = make_performer(
        "A", points=95, morale=70, stamina=80, popularity=80, charisma=75, alignment=Alignment.FACE
    )
    b = make_performer(
        "B", points=90, morale=65, stamina=75, popularity=75, charisma=70, alignment=Alignment.HEEL
    )
    return a, b
