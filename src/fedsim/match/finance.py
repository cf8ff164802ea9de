from __future__ import annotations

import math
from statistics import fmean
from typing import Sequence

from fedsim.contracts import Performer, RevenueBreakdown

STAR_POINTS = 90


def calculate_attendance(roster: Sequence[Performer], base_attendance: int = 5000) -> int:
    """Project a crowd from star count, average popularity and average points.

    Not clamped: a weak enough roster can push the points multiplier, and so
    the result, below zero.
    """
    if not roster:
        return base_attendance

    stars = sum(1 for p in roster if p.points >= STAR_POINTS)
    star_multiplier = 1 + 0.3 * stars
    popularity_multiplier = 1 + fmean(p.popularity for p in roster) / 100
    points_multiplier = 1 + (fmean(p.points for p in roster) - 50) / 100
    return math.floor(base_attendance * star_multiplier * popularity_multiplier * points_multiplier)


def calculate_revenue(attendance: int, ticket_price: float = 50, merch_multiplier: float = 15) -> RevenueBreakdown:
    attendance_income = attendance * ticket_price
    merch_income = math.floor(attendance * merch_multiplier)
    return RevenueBreakdown(
        attendance_income=attendance_income,
        merch_income=merch_income,
        total_revenue=attendance_income + merch_income,
    )


def calculate_viewership(attendance: int, tv_multiplier: float = 3.5) -> int:
    return math.floor(attendance * tv_multiplier)
