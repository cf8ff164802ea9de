"""Segment quality scoring.

The score is a flat sum of independent threshold rules over the joined
performers, normalised by 100 and floored at zero. A segment with fewer than
two appearances (a solo promo, say) scores zero.
"""

from __future__ import annotations

from statistics import fmean
from typing import Sequence

from fedsim.contracts import Alignment, Appearance, Performer, SegmentRating


def _attr(performer: Performer | None, name: str) -> float:
    if performer is None:
        return 0.0
    return getattr(performer, name)


def _points_rules(performers: list[Performer | None], diag: dict) -> int:
    values = [_attr(p, "points") for p in performers]
    diag["avg_points"] = fmean(values)
    diag["has_high_points"] = any(v >= 50 for v in values)
    diag["has_zero_points"] = any(v == 0 for v in values)
    diag["has_low_points"] = any(v <= 20 for v in values)
    diag["stars"] = sum(1 for v in values if v >= 90)

    score = 0
    if diag["has_high_points"]:
        score += 50
    if diag["avg_points"] > 50:
        score += 50
    if diag["has_zero_points"]:
        score -= 50
    if diag["has_low_points"]:
        score -= 20
    score += 100 * diag["stars"]
    return score


def _morale_rules(performers: list[Performer | None], diag: dict) -> int:
    values = [_attr(p, "morale") for p in performers]
    diag["avg_morale"] = fmean(values)
    diag["has_high_morale"] = any(v >= 50 for v in values)
    diag["all_high_morale"] = all(v >= 60 for v in values)
    diag["has_zero_morale"] = any(v == 0 for v in values)
    diag["has_low_morale"] = any(v <= 20 for v in values)

    score = 0
    if diag["has_high_morale"]:
        score += 50
    if diag["all_high_morale"]:
        score += 20
    if diag["has_zero_morale"]:
        score -= 5
    if diag["has_low_morale"]:
        score -= 30
    if diag["avg_morale"] > 50:
        score += 50
    return score


def _popularity_rules(performers: list[Performer | None], diag: dict) -> int:
    values = [_attr(p, "popularity") for p in performers]
    avg = fmean(values)
    diag["avg_popularity"] = avg
    diag["has_low_popularity"] = any(v <= 5 for v in values)
    diag["has_middling_popularity"] = any(v <= 30 for v in values)
    diag["all_high_popularity"] = all(v >= 80 for v in values)
    diag["super_high_popularity"] = any(v >= 90 for v in values)

    score = 0
    if diag["has_low_popularity"]:
        score -= 50
    if diag["has_middling_popularity"]:
        score -= 50
    if diag["all_high_popularity"]:
        score += 40
    if diag["super_high_popularity"]:
        score += 70
    for threshold, bonus in ((50, 50), (80, 20), (90, 10), (95, 100)):
        if avg > threshold:
            score += bonus
    return score


def _alignment_rules(performers: list[Performer | None], diag: dict) -> int:
    alignments = [p.alignment if p is not None else None for p in performers]
    has_heel = Alignment.HEEL in alignments
    has_face = Alignment.FACE in alignments
    has_neutral = Alignment.NEUTRAL in alignments
    diag["has_heel"] = has_heel
    diag["has_face"] = has_face
    diag["has_neutral"] = has_neutral
    diag["all_same_alignment"] = all(a == alignments[0] for a in alignments)

    score = 0
    if (has_heel and has_face) or (has_heel and has_neutral) or (has_face and has_neutral):
        score += 50
    if diag["all_same_alignment"]:
        score -= 200
    if has_heel or has_face:
        score += 50
    return score


def _charisma_rules(performers: list[Performer | None], diag: dict) -> int:
    values = [_attr(p, "charisma") for p in performers]
    diag["avg_charisma"] = fmean(values)
    diag["has_high_charisma"] = any(v >= 70 for v in values)
    diag["has_zero_charisma"] = any(v == 0 for v in values)
    diag["has_low_charisma"] = any(v <= 20 for v in values)

    score = 0
    if diag["has_high_charisma"]:
        score += 50
    if diag["avg_charisma"] > 50:
        score += 50
    if diag["has_zero_charisma"]:
        score -= 50
    if diag["has_low_charisma"]:
        score -= 50
    return score


RULES = (_points_rules, _morale_rules, _popularity_rules, _alignment_rules, _charisma_rules)


def calculate_segment_rating(appearances: Sequence[Appearance]) -> SegmentRating:
    if len(appearances) < 2:
        return SegmentRating(score=0, history=[])

    performers = [a.performer for a in appearances]
    diag: dict[str, float | int | bool] = {}
    raw = sum(rule(performers, diag) for rule in RULES)
    final = max(0, raw / 100)
    diag["raw_score"] = raw
    diag["final_score"] = final
    return SegmentRating(score=final, history=[diag])
