from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Sequence

from fedsim.contracts import Alignment, Gender, Performer
from fedsim.production import ProductionResult

logger = logging.getLogger(__name__)

DEFAULT_BRAND_BALANCE = 1_000_000


@dataclass(frozen=True, slots=True)
class Brand:
    brand_id: str
    name: str
    balance: float = DEFAULT_BRAND_BALANCE


@dataclass(frozen=True, slots=True)
class BrandRosterStats:
    total_performers: int
    by_alignment: dict[Alignment, int]
    by_gender: dict[Gender, int]
    average_points: int
    total_cost: float


@dataclass(frozen=True, slots=True)
class BrandFinancials:
    current_balance: float
    recent_shows: int
    total_revenue: float
    total_costs: float
    net_profit: float
    average_per_show: int


def adjust_brand_balance(brand: Brand, amount: float) -> Brand:
    updated = replace(brand, balance=brand.balance + amount)
    logger.info(
        "%s brand %s: %s -> %s",
        "credit" if amount > 0 else "debit",
        brand.name,
        brand.balance,
        updated.balance,
    )
    return updated


def brand_roster(brand: Brand, roster: Sequence[Performer]) -> list[Performer]:
    return [p for p in roster if p.active and brand.brand_id in p.brand_ids]


def brand_roster_stats(brand: Brand, roster: Sequence[Performer]) -> BrandRosterStats:
    members = brand_roster(brand, roster)
    average = sum(p.points for p in members) / len(members) if members else 0
    return BrandRosterStats(
        total_performers=len(members),
        by_alignment={a: sum(1 for p in members if p.alignment == a) for a in Alignment},
        by_gender={g: sum(1 for p in members if p.gender == g) for g in Gender},
        average_points=math.floor(average + 0.5),
        total_cost=sum(p.cost for p in members),
    )


def brand_financials(brand: Brand, results: Sequence[ProductionResult], limit: int = 10) -> BrandFinancials:
    """Totals over the brand's most recent productions; ``results`` is oldest first."""
    shows = [r for r in results if brand.brand_id in r.production.brand_ids][-limit:] if limit > 0 else []
    revenue = sum(r.revenue.total_revenue for r in shows)
    costs = sum(r.wrestlers_cost for r in shows)
    net = revenue - costs
    return BrandFinancials(
        current_balance=brand.balance,
        recent_shows=len(shows),
        total_revenue=revenue,
        total_costs=costs,
        net_profit=net,
        average_per_show=math.floor(net / len(shows) + 0.5) if shows else 0,
    )


def settle_production(brands: Sequence[Brand], result: ProductionResult) -> list[Brand]:
    """Split a production's profit evenly across the brands that ran it."""
    participating = set(result.production.brand_ids)
    sharing = [b for b in brands if b.brand_id in participating]
    if not sharing:
        return list(brands)
    share = result.profit / len(sharing)
    return [adjust_brand_balance(b, share) if b.brand_id in participating else b for b in brands]
