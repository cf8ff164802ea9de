from __future__ import annotations

from typing import Sequence

from fedsim.contracts import RandomSource, SegmentType
from fedsim.core import gameplay_random

DURATION_RANGES: dict[SegmentType, tuple[int, int]] = {
    SegmentType.DEFAULT: (10, 20),
    SegmentType.MAIN_EVENT: (20, 30),
    SegmentType.OPENING: (15, 25),
    SegmentType.MID_CARD: (12, 18),
    SegmentType.SQUASH: (5, 10),
    SegmentType.PROMO: (3, 8),
    SegmentType.BACKSTAGE: (2, 5),
}


def generate_segment_name(names: Sequence[str]) -> str:
    if not names:
        return "Untitled Segment"
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} vs {names[1]}"
    if len(names) == 3:
        return "Triple Threat: " + " vs ".join(names)
    if len(names) == 4:
        return "Fatal Four-Way: " + " vs ".join(names)
    return f"{len(names)}-Way Match: {names[0]} vs {names[1]} and {len(names) - 2} others"


def randomize_segment_duration(
    segment_type: SegmentType | str = SegmentType.DEFAULT,
    random_source: RandomSource | None = None,
) -> int:
    """Segment length in minutes, uniform over the inclusive range for its type."""
    random_source = random_source or gameplay_random()
    try:
        low, high = DURATION_RANGES[SegmentType(segment_type)]
    except ValueError:
        low, high = DURATION_RANGES[SegmentType.DEFAULT]
    return int(random_source.rand() * (high - low + 1)) + low
