from __future__ import annotations

from dataclasses import dataclass, field

from fedsim.contracts import Appearance, Performer, RevenueBreakdown, SegmentType

DEFAULT_SEGMENT_DURATION = 15


@dataclass(slots=True)
class Segment:
    segment_id: str
    name: str
    segment_type: SegmentType = SegmentType.DEFAULT
    duration: int = 0
    appearances: list[Appearance] = field(default_factory=list)
    rating: float = 0
    complete: bool = False


@dataclass(slots=True)
class Production:
    production_id: str
    name: str
    brand_ids: tuple[str, ...] = ()
    segments: list[Segment] = field(default_factory=list)
    complete: bool = False


@dataclass(frozen=True, slots=True)
class BookingOptions:
    min_points: float = 30
    max_segments: int = 5
    create_segments: bool = False
    recent_exclusion: int = 4


@dataclass(frozen=True, slots=True)
class FinancialPolicy:
    base_attendance: int = 5000
    ticket_price: float = 50
    merch_multiplier: float = 15
    tv_multiplier: float = 3.5


@dataclass(slots=True)
class BookedSegment:
    segment_id: str
    name: str
    segment_type: SegmentType
    duration: int
    performer_names: list[str]


@dataclass(slots=True)
class BookingResult:
    production: Production
    booked: list[BookedSegment]
    performers_used: int
    min_points: float


@dataclass(slots=True)
class SegmentResult:
    segment_id: str
    name: str
    rating: float
    duration: int
    cost: float
    competitors: list[str]
    winners: list[str]
    history: list[dict[str, float | int | bool]] = field(default_factory=list)


@dataclass(slots=True)
class ProductionResult:
    production: Production
    segment_results: list[SegmentResult]
    updated_performers: dict[str, Performer]
    average_rating: int
    attendance: int
    viewers: int
    revenue: RevenueBreakdown
    wrestlers_cost: float

    @property
    def profit(self) -> float:
        return self.revenue.total_revenue - self.wrestlers_cost
