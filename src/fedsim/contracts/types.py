from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence


class Alignment(str, Enum):
    FACE = "FACE"
    HEEL = "HEEL"
    NEUTRAL = "NEUTRAL"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class SegmentType(str, Enum):
    DEFAULT = "DEFAULT"
    MAIN_EVENT = "MAIN_EVENT"
    OPENING = "OPENING"
    MID_CARD = "MID_CARD"
    SQUASH = "SQUASH"
    PROMO = "PROMO"
    BACKSTAGE = "BACKSTAGE"


class RandomSource(Protocol):
    def rand(self) -> float: ...

    def spawn(self, substream_id: str) -> RandomSource: ...


@dataclass(frozen=True, slots=True)
class Performer:
    performer_id: str
    name: str
    points: float
    popularity: float
    morale: float
    stamina: float
    charisma: float
    damage: float
    alignment: Alignment
    gender: Gender
    wins: int
    losses: int
    streak: int
    active: bool
    cost: float
    brand_ids: tuple[str, ...] = ()


@dataclass(slots=True)
class Appearance:
    performer_id: str
    group_id: int
    manager: bool = False
    cost: float = 0
    winner: bool = False
    loser: bool = False
    performer: Performer | None = None


@dataclass(frozen=True, slots=True)
class WeightedOptions:
    options: tuple[Any, ...]
    weights: tuple[float, ...]

    def validate(self, name: str) -> None:
        if not self.options:
            raise ValueError(f"{name} options must not be empty")
        if len(self.options) != len(self.weights):
            raise ValueError(
                f"{name} has {len(self.options)} options but {len(self.weights)} weights"
            )
        if any(w < 0 for w in self.weights):
            raise ValueError(f"{name} weights must be non-negative")


@dataclass(frozen=True, slots=True)
class RandomizationConfig:
    participant_count: WeightedOptions = WeightedOptions(options=(2, 3, 4), weights=(0.7, 0.2, 0.1))
    gender: WeightedOptions = WeightedOptions(options=(Gender.MALE, Gender.FEMALE), weights=(0.75, 0.25))
    team_mode: WeightedOptions = WeightedOptions(options=(True, False), weights=(0.3, 0.7))
    team_count: int = 2
    min_team_candidates: int = 4

    def validate(self) -> None:
        self.participant_count.validate("participant_count")
        self.gender.validate("gender")
        self.team_mode.validate("team_mode")
        if any(int(c) < 1 for c in self.participant_count.options):
            raise ValueError("participant_count options must be positive")
        if self.team_count < 2:
            raise ValueError("team_count must be at least 2")


@dataclass(frozen=True, slots=True)
class AppearanceConstraints:
    min_points: float = 40
    exclude: tuple[str, ...] = ()
    config: RandomizationConfig = field(default_factory=RandomizationConfig)


@dataclass(slots=True)
class SegmentRating:
    score: float
    history: list[dict[str, float | int | bool]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RevenueBreakdown:
    attendance_income: float
    merch_income: int
    total_revenue: float


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    code: str
    severity: str
    field_path: str
    entity_id: str
    message: str


class ValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        message = "; ".join(f"{i.code}:{i.entity_id}:{i.message}" for i in issues)
        super().__init__(message)
        self.issues = issues


@dataclass(frozen=True, slots=True)
class ForensicArtifact:
    artifact_id: str
    timestamp: datetime
    engine_scope: str
    error_code: str
    message: str
    state_snapshot: Mapping[str, Any]
    context: Mapping[str, Any]
    identifiers: Mapping[str, str]
    causal_fragment: Sequence[str]
