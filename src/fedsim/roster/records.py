"""Boundary records for performer payloads entering the engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import pydantic
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict

from fedsim.contracts import Alignment, Gender, Performer, ValidationError, ValidationIssue


class PerformerRecord(BaseModel):
    """External performer payload; every attribute the engine reads is defaulted here."""

    performer_id: str = Field(..., alias="id", min_length=1)
    name: str = "Unknown"
    points: float = 0
    popularity: float = 0
    morale: float = 0
    stamina: float = 0
    charisma: float = 0
    damage: float = 0
    alignment: Alignment = Alignment.NEUTRAL
    gender: Gender = Gender.MALE
    wins: int = 0
    losses: int = 0
    streak: int = 0
    active: bool = True
    cost: float = Field(0, ge=0)
    brand_ids: list[str] = Field(default_factory=list, alias="brandIds")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("performer_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator(
        "name",
        "points",
        "popularity",
        "morale",
        "stamina",
        "charisma",
        "damage",
        "alignment",
        "gender",
        "wins",
        "losses",
        "streak",
        "active",
        "cost",
        "brand_ids",
        mode="before",
    )
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @field_validator("brand_ids", mode="before")
    @classmethod
    def _stringify_brand_ids(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return value

    @field_validator("alignment", "gender", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def to_performer(self) -> Performer:
        return Performer(
            performer_id=self.performer_id,
            name=self.name,
            points=self.points,
            popularity=self.popularity,
            morale=self.morale,
            stamina=self.stamina,
            charisma=self.charisma,
            damage=self.damage,
            alignment=self.alignment,
            gender=self.gender,
            wins=self.wins,
            losses=self.losses,
            streak=self.streak,
            active=self.active,
            cost=self.cost,
            brand_ids=tuple(self.brand_ids),
        )


def load_roster(payloads: Iterable[Mapping[str, Any]]) -> list[Performer]:
    performers: list[Performer] = []
    issues: list[ValidationIssue] = []
    seen: set[str] = set()
    for index, payload in enumerate(payloads):
        try:
            record = PerformerRecord.model_validate(payload)
        except pydantic.ValidationError as exc:
            for err in exc.errors():
                issues.append(
                    ValidationIssue(
                        code="INVALID_PERFORMER",
                        severity="blocking",
                        field_path=f"roster[{index}]." + ".".join(str(p) for p in err["loc"]),
                        entity_id=str(payload.get("id", index)) if isinstance(payload, Mapping) else str(index),
                        message=err["msg"],
                    )
                )
            continue
        if record.performer_id in seen:
            issues.append(
                ValidationIssue(
                    code="DUPLICATE_PERFORMER",
                    severity="blocking",
                    field_path=f"roster[{index}].id",
                    entity_id=record.performer_id,
                    message="performer id appears more than once",
                )
            )
            continue
        seen.add(record.performer_id)
        performers.append(record.to_performer())
    if issues:
        raise ValidationError(issues)
    return performers


def load_roster_file(path: Path) -> list[Performer]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, Mapping):
        data = data.get("performers", data.get("wrestlers", []))
    if not isinstance(data, list):
        raise ValidationError(
            [
                ValidationIssue(
                    code="INVALID_ROSTER_FILE",
                    severity="blocking",
                    field_path="$",
                    entity_id=str(path),
                    message="roster file must hold a list of performers",
                )
            ]
        )
    return load_roster(data)
