from .models import (
    BookedSegment,
    BookingOptions,
    BookingResult,
    FinancialPolicy,
    Production,
    ProductionResult,
    Segment,
    SegmentResult,
)
from .session import (
    ProductionEngine,
    apply_match_result,
    book_production,
    boost_performer,
    create_production,
    create_random_segment,
    penalize_performer,
    production_report,
    simulate_production,
)

__all__ = [
    "BookedSegment",
    "BookingOptions",
    "BookingResult",
    "FinancialPolicy",
    "Production",
    "ProductionEngine",
    "ProductionResult",
    "Segment",
    "SegmentResult",
    "apply_match_result",
    "book_production",
    "boost_performer",
    "create_production",
    "create_random_segment",
    "penalize_performer",
    "production_report",
    "simulate_production",
]
