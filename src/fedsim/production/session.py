from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Iterable, Sequence

from fedsim.booking import PoolGenerator, generate_segment_name, randomize_segment_duration
from fedsim.contracts import Appearance, AppearanceConstraints, Performer, RandomSource, SegmentType
from fedsim.core import gameplay_random, make_id
from fedsim.match import (
    MatchEngine,
    calculate_attendance,
    calculate_revenue,
    calculate_segment_rating,
    calculate_viewership,
)
from fedsim.production.models import (
    DEFAULT_SEGMENT_DURATION,
    BookedSegment,
    BookingOptions,
    BookingResult,
    FinancialPolicy,
    Production,
    ProductionResult,
    Segment,
    SegmentResult,
)

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def create_production(name: str, brand_ids: Iterable[str] = ()) -> Production:
    production = Production(production_id=make_id("prod"), name=name, brand_ids=tuple(brand_ids))
    logger.info("created production %s (%s) brands=%s", production.name, production.production_id, production.brand_ids)
    return production


def apply_match_result(performer: Performer, appearance: Appearance) -> Performer:
    """Career record after one decided appearance; undecided appearances change nothing."""
    if not (appearance.winner or appearance.loser):
        return performer
    won = appearance.winner
    return replace(
        performer,
        wins=performer.wins + (1 if won else 0),
        losses=performer.losses + (0 if won else 1),
        streak=performer.streak + 1 if won else 0,
        morale=_clamp(performer.morale + (5 if won else -2)),
        popularity=_clamp(performer.popularity + (2 if won else -1)),
    )


def boost_performer(performer: Performer) -> Performer:
    return replace(
        performer,
        morale=_clamp(performer.morale + 5),
        popularity=_clamp(performer.popularity + 5),
        charisma=_clamp(performer.charisma + 3),
        stamina=_clamp(performer.stamina + 3),
        points=_clamp(performer.points + 2),
        damage=_clamp(performer.damage - 2),
    )


def penalize_performer(performer: Performer) -> Performer:
    return replace(
        performer,
        morale=_clamp(performer.morale - 3),
        popularity=_clamp(performer.popularity - 3),
        stamina=_clamp(performer.stamina - 3),
        points=_clamp(performer.points - 2),
        damage=_clamp(performer.damage + 5),
    )


class ProductionEngine:
    """Books and simulates whole shows on top of the pool generator and match engine.

    The production passed in is updated in place; performer records are never
    touched and come back as updated copies for the caller to persist.
    """

    def __init__(self, random_source: RandomSource | None = None, policy: FinancialPolicy | None = None) -> None:
        self._random_source = random_source or gameplay_random()
        self._policy = policy or FinancialPolicy()

    def book(
        self,
        production: Production,
        roster: Sequence[Performer],
        options: BookingOptions | None = None,
    ) -> BookingResult:
        options = options or BookingOptions()
        active = [p for p in roster if p.active]
        if len(active) < 2:
            raise ValueError("not enough active performers to book a production (minimum 2 required)")

        if not production.segments and options.create_segments:
            count = min(options.max_segments, len(active) // 2)
            production.segments = [
                Segment(
                    segment_id=make_id("seg"),
                    name=f"Segment {i + 1}",
                    segment_type=SegmentType.MAIN_EVENT if i == count - 1 else SegmentType.DEFAULT,
                )
                for i in range(count)
            ]
        if not production.segments:
            raise ValueError("production has no segments; pass create_segments=True to create them")

        used: list[str] = []
        booked: list[BookedSegment] = []
        for index, segment in enumerate(production.segments):
            fresh = [p for p in active if p.points >= options.min_points and p.performer_id not in used]
            pool = fresh if len(fresh) >= 2 else active
            recent = tuple(used[-options.recent_exclusion:]) if options.recent_exclusion > 0 else ()

            stream = self._random_source.spawn(f"book:{index}")
            appearances = PoolGenerator(stream).generate(
                pool,
                AppearanceConstraints(min_points=options.min_points, exclude=recent),
            )
            if not appearances:
                logger.warning("no suitable performers found for segment %s", segment.name)
                continue

            names = [a.performer.name for a in appearances if a.performer is not None]
            segment.appearances = appearances
            segment.name = generate_segment_name(names)
            segment.duration = randomize_segment_duration(segment.segment_type, stream)
            segment.rating = 0
            segment.complete = False
            used.extend(a.performer_id for a in appearances)
            booked.append(
                BookedSegment(
                    segment_id=segment.segment_id,
                    name=segment.name,
                    segment_type=segment.segment_type,
                    duration=segment.duration,
                    performer_names=names,
                )
            )
            logger.info("booked segment %s (%s min)", segment.name, segment.duration)

        logger.info(
            "booked production %s: %s segments, %s appearances",
            production.name,
            len(booked),
            len(used),
        )
        return BookingResult(
            production=production,
            booked=booked,
            performers_used=len(used),
            min_points=options.min_points,
        )

    def add_random_segment(
        self,
        production: Production,
        roster: Sequence[Performer],
        segment_type: SegmentType = SegmentType.DEFAULT,
        min_points: float = 40,
    ) -> Segment:
        active = [p for p in roster if p.active]
        segment_id = make_id("seg")
        stream = self._random_source.spawn(f"book:{len(production.segments)}")
        appearances = PoolGenerator(stream).generate(active, AppearanceConstraints(min_points=min_points))
        if not appearances:
            raise ValueError("no suitable performers found for a random segment")

        segment = Segment(
            segment_id=segment_id,
            name=generate_segment_name([a.performer.name for a in appearances if a.performer is not None]),
            segment_type=segment_type,
            duration=randomize_segment_duration(segment_type, stream),
            appearances=appearances,
        )
        production.segments.append(segment)
        logger.info("created random segment %s for %s", segment.name, production.name)
        return segment

    def simulate(self, production: Production, roster: Sequence[Performer]) -> ProductionResult:
        if production.complete:
            raise ValueError(f'production "{production.name}" is already complete')

        performers = {p.performer_id: p for p in roster}
        results: list[SegmentResult] = []
        staged: list[tuple[Segment, list[Appearance]]] = []
        wrestlers_cost = 0.0

        # Nothing is written to the production until every segment has been decided.
        for index, segment in enumerate(production.segments):
            if segment.complete:
                continue
            joined = [replace(a, performer=performers.get(a.performer_id, a.performer)) for a in segment.appearances]
            cost = sum(a.cost for a in joined)
            wrestlers_cost += cost

            rating = calculate_segment_rating(joined)
            engine = MatchEngine(self._random_source.spawn(f"match:{index}"))
            decided = engine.simulate(joined) if joined else []
            for appearance in decided:
                current = performers.get(appearance.performer_id)
                if current is not None:
                    performers[appearance.performer_id] = apply_match_result(current, appearance)

            staged.append((segment, decided))
            result = SegmentResult(
                segment_id=segment.segment_id,
                name=segment.name,
                rating=_round_half_up(rating.score),
                duration=segment.duration or DEFAULT_SEGMENT_DURATION,
                cost=cost,
                competitors=[a.performer.name if a.performer else "Unknown" for a in joined],
                winners=[a.performer.name for a in decided if a.winner and a.performer is not None],
                history=rating.history,
            )
            results.append(result)
            logger.info(
                "simulated segment %s: rating=%s cost=%s winner=%s",
                result.name,
                result.rating,
                result.cost,
                ", ".join(result.winners) or "no winner",
            )

        for (segment, decided), result in zip(staged, results):
            segment.appearances = decided
            segment.rating = result.rating
            segment.duration = result.duration
            segment.complete = True

        # Includes segments completed on an earlier pass.
        total_rating = sum(s.rating for s in production.segments)
        average_rating = _round_half_up(total_rating / len(production.segments)) if production.segments else 0

        participant_ids = dict.fromkeys(a.performer_id for s in production.segments for a in s.appearances)
        participants = [performers[pid] for pid in participant_ids if pid in performers]
        attendance = calculate_attendance(participants, self._policy.base_attendance)
        revenue = calculate_revenue(attendance, self._policy.ticket_price, self._policy.merch_multiplier)
        viewers = calculate_viewership(attendance, self._policy.tv_multiplier)

        production.complete = True
        updated = {pid: p for pid, p in performers.items() if pid in participant_ids}
        outcome = ProductionResult(
            production=production,
            segment_results=results,
            updated_performers=updated,
            average_rating=average_rating,
            attendance=attendance,
            viewers=viewers,
            revenue=revenue,
            wrestlers_cost=wrestlers_cost,
        )
        logger.info(
            "production %s complete: segments=%s rating=%s attendance=%s revenue=%s profit=%s",
            production.name,
            len(production.segments),
            average_rating,
            attendance,
            revenue.total_revenue,
            outcome.profit,
        )
        return outcome


def book_production(
    production: Production,
    roster: Sequence[Performer],
    options: BookingOptions | None = None,
    random_source: RandomSource | None = None,
) -> BookingResult:
    return ProductionEngine(random_source).book(production, roster, options)


def create_random_segment(
    production: Production,
    roster: Sequence[Performer],
    segment_type: SegmentType = SegmentType.DEFAULT,
    min_points: float = 40,
    random_source: RandomSource | None = None,
) -> Segment:
    return ProductionEngine(random_source).add_random_segment(production, roster, segment_type, min_points)


def simulate_production(
    production: Production,
    roster: Sequence[Performer],
    policy: FinancialPolicy | None = None,
    random_source: RandomSource | None = None,
) -> ProductionResult:
    return ProductionEngine(random_source, policy).simulate(production, roster)


def production_report(result: ProductionResult) -> dict[str, Any]:
    production = result.production
    return {
        "production": {
            "id": production.production_id,
            "name": production.name,
            "brands": list(production.brand_ids),
            "complete": production.complete,
        },
        "segments": [
            {
                "id": s.segment_id,
                "name": s.name,
                "type": s.segment_type.value,
                "duration": s.duration,
                "rating": s.rating,
                "complete": s.complete,
            }
            for s in production.segments
        ],
        "financial": {
            "wrestlers_cost": result.wrestlers_cost,
            "attendance_income": result.revenue.attendance_income,
            "merch_income": result.revenue.merch_income,
            "total_revenue": result.revenue.total_revenue,
            "profit": result.profit,
        },
        "audience": {
            "attendance": result.attendance,
            "viewers": result.viewers,
            "average_rating": result.average_rating,
        },
    }
