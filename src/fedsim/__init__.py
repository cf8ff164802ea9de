from fedsim.booking import generate_appearances, generate_segment_name, randomize_segment_duration
from fedsim.contracts import Alignment, Appearance, AppearanceConstraints, Gender, Performer, RandomizationConfig
from fedsim.core import EngineIntegrityError, gameplay_random, seeded_random
from fedsim.match import (
    calculate_attendance,
    calculate_revenue,
    calculate_segment_rating,
    calculate_viewership,
    simulate_match,
)

__all__ = [
    "Alignment",
    "Appearance",
    "AppearanceConstraints",
    "EngineIntegrityError",
    "Gender",
    "Performer",
    "RandomizationConfig",
    "calculate_attendance",
    "calculate_revenue",
    "calculate_segment_rating",
    "calculate_viewership",
    "gameplay_random",
    "generate_appearances",
    "generate_segment_name",
    "randomize_segment_duration",
    "seeded_random",
    "simulate_match",
]
