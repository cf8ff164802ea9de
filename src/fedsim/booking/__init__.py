from .naming import DURATION_RANGES, generate_segment_name, randomize_segment_duration
from .pool import PoolGenerator, generate_appearances

__all__ = [
    "DURATION_RANGES",
    "PoolGenerator",
    "generate_appearances",
    "generate_segment_name",
    "randomize_segment_duration",
]
