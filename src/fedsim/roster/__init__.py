from .demo import demo_brands, demo_roster
from .records import PerformerRecord, load_roster, load_roster_file

__all__ = [
    "PerformerRecord",
    "demo_brands",
    "demo_roster",
    "load_roster",
    "load_roster_file",
]
