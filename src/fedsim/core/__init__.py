from .errors import EngineIntegrityError, build_forensic_artifact, integrity_error
from .ids import make_id
from .randomness import (
    PythonRandomSource,
    gameplay_random,
    pick_option,
    seeded_random,
    uniform_choice,
    weighted_choice,
)

__all__ = [
    "EngineIntegrityError",
    "PythonRandomSource",
    "build_forensic_artifact",
    "gameplay_random",
    "integrity_error",
    "make_id",
    "pick_option",
    "seeded_random",
    "uniform_choice",
    "weighted_choice",
]
