from __future__ import annotations

import argparse
import logging
from pathlib import Path

from fedsim.core import gameplay_random, seeded_random
from fedsim.org import settle_production
from fedsim.production import BookingOptions, ProductionEngine, create_production
from fedsim.roster import demo_brands, demo_roster, load_roster_file


def main() -> None:
    parser = argparse.ArgumentParser(description="Fed Simulator: book and simulate one wrestling show")
    parser.add_argument("--roster", type=Path, default=None, help="JSON roster file (demo roster when omitted)")
    parser.add_argument("--name", default="Demo Show", help="production name")
    parser.add_argument("--seed", type=int, default=None, help="seed for deterministic dev/testing runs")
    parser.add_argument("--segments", type=int, default=5, help="maximum segments to create")
    parser.add_argument("--min-points", type=float, default=30, help="minimum performer points to book")
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    roster = load_roster_file(args.roster) if args.roster else demo_roster()
    brands = demo_brands() if args.roster is None else []
    random_source = seeded_random(args.seed) if args.seed is not None else gameplay_random()
    engine = ProductionEngine(random_source)

    production = create_production(args.name, brand_ids=[b.brand_id for b in brands])
    engine.book(
        production,
        roster,
        BookingOptions(min_points=args.min_points, max_segments=args.segments, create_segments=True),
    )
    result = engine.simulate(production, roster)

    print(f"{production.name}:")
    for seg in result.segment_results:
        winners = ", ".join(seg.winners) or "no winner"
        print(f"- {seg.name} [{seg.duration} min] rating={seg.rating} winner={winners}")
    print(f"Average rating: {result.average_rating}")
    print(f"Attendance: {result.attendance}  Viewers: {result.viewers}")
    print(f"Revenue: {result.revenue.total_revenue}  Costs: {result.wrestlers_cost}  Profit: {result.profit}")

    for brand in settle_production(brands, result):
        print(f"- {brand.name}: balance {brand.balance:.0f}")


if __name__ == "__main__":
    main()
