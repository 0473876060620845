"""Detail, color, history and property generators."""

from __future__ import annotations

from app.domain.oracles.tables import COLORS, DETAILS, HISTORY, PROPERTIES, face
from app.models.results.details import DetailFollowUpResult, DetailResult, DualPropertyResult, PropertyResult
from app.modules.dice.roller import RollSource, Skew, parse_skew

FOLLOW_UP_DETAILS = {"History", "Property"}


def _skewed_detail(source: RollSource, detail_type: str, table: list[str], skew: Skew | str) -> DetailResult:
    skew = parse_skew(skew)
    roll, all_rolls = source.roll_skewed(10, skew)
    return DetailResult(detail_type=detail_type, roll=roll, all_rolls=all_rolls, skew=skew, result=face(table, roll))


def roll_color(source: RollSource) -> DetailResult:
    return _skewed_detail(source, "Color", COLORS, Skew.NONE)


def roll_property(source: RollSource) -> PropertyResult:
    property_roll = source.roll_die(10)
    intensity_roll = source.roll_die(6)
    return PropertyResult(
        property_roll=property_roll,
        property_name=face(PROPERTIES, property_roll),
        intensity_roll=intensity_roll,
    )


def roll_two_properties(source: RollSource) -> DualPropertyResult:
    return DualPropertyResult(first=roll_property(source), second=roll_property(source))


def roll_detail(source: RollSource, skew: Skew | str = Skew.NONE) -> DetailResult:
    return _skewed_detail(source, "Detail", DETAILS, skew)


def roll_history(source: RollSource, skew: Skew | str = Skew.NONE) -> DetailResult:
    return _skewed_detail(source, "History", HISTORY, skew)


def roll_detail_with_follow_up(source: RollSource, skew: Skew | str = Skew.NONE) -> DetailFollowUpResult:
    """Roll a detail; History and Property results roll their follow-up table."""
    detail = roll_detail(source, skew)
    if detail.result not in FOLLOW_UP_DETAILS:
        return DetailFollowUpResult(detail=detail)
    if detail.result == "History":
        return DetailFollowUpResult(detail=detail, history=roll_history(source))
    return DetailFollowUpResult(detail=detail, follow_up_property=roll_property(source))
