from .engine import MatchEngine, performance_weight, select_winner, simulate_match
from .finance import calculate_attendance, calculate_revenue, calculate_viewership
from .rating import calculate_segment_rating

__all__ = [
    "MatchEngine",
    "calculate_attendance",
    "calculate_revenue",
    "calculate_segment_rating",
    "calculate_viewership",
    "performance_weight",
    "select_winner",
    "simulate_match",
]
