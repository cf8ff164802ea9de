from .types import (
    Alignment,
    Appearance,
    AppearanceConstraints,
    ForensicArtifact,
    Gender,
    Performer,
    RandomizationConfig,
    RandomSource,
    RevenueBreakdown,
    SegmentRating,
    SegmentType,
    ValidationError,
    ValidationIssue,
    WeightedOptions,
)

__all__ = [
    "Alignment",
    "Appearance",
    "AppearanceConstraints",
    "ForensicArtifact",
    "Gender",
    "Performer",
    "RandomSource",
    "RandomizationConfig",
    "RevenueBreakdown",
    "SegmentRating",
    "SegmentType",
    "ValidationError",
    "ValidationIssue",
    "WeightedOptions",
]
