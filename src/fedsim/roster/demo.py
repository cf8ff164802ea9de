from __future__ import annotations

from fedsim.contracts import Performer
from fedsim.org import Brand
from fedsim.roster.records import load_roster

DEMO_BRANDS = [
    Brand(brand_id="B1", name="Monday Mayhem"),
    Brand(brand_id="B2", name="Friday Fury", balance=750_000),
]

_DEMO_PAYLOADS = [
    {"id": "W1", "name": "Rex Steele", "points": 92, "popularity": 88, "morale": 75, "stamina": 80,
     "charisma": 85, "alignment": "FACE", "gender": "MALE", "cost": 12_000, "brandIds": ["B1"]},
    {"id": "W2", "name": "Vince Venom", "points": 88, "popularity": 80, "morale": 60, "stamina": 70,
     "charisma": 90, "alignment": "HEEL", "gender": "MALE", "cost": 10_000, "brandIds": ["B1"]},
    {"id": "W3", "name": "Lola Blaze", "points": 85, "popularity": 82, "morale": 70, "stamina": 75,
     "charisma": 78, "alignment": "FACE", "gender": "FEMALE", "cost": 9_000, "brandIds": ["B2"]},
    {"id": "W4", "name": "Nina Nightshade", "points": 78, "popularity": 70, "morale": 55, "stamina": 72,
     "charisma": 74, "alignment": "HEEL", "gender": "FEMALE", "cost": 7_500, "brandIds": ["B2"]},
    {"id": "W5", "name": "Big Tony Bricks", "points": 70, "popularity": 60, "morale": 50, "stamina": 65,
     "charisma": 55, "alignment": "NEUTRAL", "gender": "MALE", "cost": 5_000, "brandIds": ["B1"]},
    {"id": "W6", "name": "Kid Comet", "points": 65, "popularity": 55, "morale": 80, "stamina": 90,
     "charisma": 60, "alignment": "FACE", "gender": "MALE", "cost": 4_000, "brandIds": ["B2"]},
    {"id": "W7", "name": "Doctor Dread", "points": 58, "popularity": 45, "morale": 40, "stamina": 60,
     "charisma": 65, "alignment": "HEEL", "gender": "MALE", "cost": 3_500, "brandIds": ["B1"]},
    {"id": "W8", "name": "Jenny Jabs", "points": 45, "popularity": 35, "morale": 65, "stamina": 70,
     "charisma": 40, "alignment": "NEUTRAL", "gender": "FEMALE", "cost": 2_000, "brandIds": ["B2"]},
]


def demo_roster() -> list[Performer]:
    return load_roster(_DEMO_PAYLOADS)


def demo_brands() -> list[Brand]:
    return list(DEMO_BRANDS)
