"""Settlement generators."""

from __future__ import annotations

from app.domain.oracles.details import roll_property
from app.domain.oracles.npc import generate_simple_profile
from app.domain.oracles.tables import COLORS, SETTLEMENT_PREFIXES, SETTLEMENT_SUFFIXES, face, require_choice
from app.models.results.settlement import (
    CompleteSettlementResult,
    EstablishmentCountResult,
    EstablishmentNameResult,
    FullSettlementResult,
    MultiEstablishmentResult,
    SettlementDetailResult,
    SettlementNameResult,
    SettlementPropertiesResult,
    SimpleNpcResult,
)
from app.modules.dice.roller import RollSource, Skew

SETTLEMENT_TYPES = ["village", "city"]

# villages roll a d6, cities the full d10
ESTABLISHMENTS = [
    "Tavern", "General Store", "Smithy", "Temple", "Stable",
    "Artisan", "Guard House", "Market", "Guild Hall", "Noble Estate",
]
ARTISAN = "Artisan"
ARTISANS = [
    "Baker", "Carpenter", "Cobbler", "Jeweler", "Potter",
    "Tailor", "Tanner", "Weaver", "Alchemist", "Scribe",
]
NEWS = [
    "A caravan is overdue", "Bandits on the road", "A festival approaches", "Strange lights at night",
    "A noble has died", "Prices are rising", "A stranger asks questions", "Wolves near the farms",
    "The well has run dry", "A hero is expected",
]
ESTABLISHMENT_OBJECTS = [
    "Anchor", "Boar", "Crown", "Dragon", "Eagle",
    "Flagon", "Griffin", "Hammer", "Lantern", "Stag",
]


def generate_name(source: RollSource) -> SettlementNameResult:
    prefix_roll, suffix_roll = source.roll_dice(2, 10)
    name = face(SETTLEMENT_PREFIXES, prefix_roll) + face(SETTLEMENT_SUFFIXES, suffix_roll)
    return SettlementNameResult(prefix_roll=prefix_roll, suffix_roll=suffix_roll, name=name)


def roll_artisan(source: RollSource) -> SettlementDetailResult:
    roll = source.roll_die(10)
    return SettlementDetailResult(detail_type="Artisan", roll=roll, result=face(ARTISANS, roll))


def roll_establishment(source: RollSource, is_village: bool = False) -> SettlementDetailResult:
    """d6 in a village, d10 in a city; an Artisan rolls which trade."""
    sides = 6 if is_village else 10
    roll = source.roll_die(sides)
    result = face(ESTABLISHMENTS, roll)
    artisan_roll = artisan = None
    if result == ARTISAN:
        artisan_roll = source.roll_die(10)
        artisan = face(ARTISANS, artisan_roll)
    return SettlementDetailResult(
        detail_type="Establishment",
        roll=roll,
        die_size=sides,
        result=result,
        artisan_roll=artisan_roll,
        artisan=artisan,
    )


def roll_news(source: RollSource) -> SettlementDetailResult:
    roll = source.roll_die(10)
    return SettlementDetailResult(detail_type="News", roll=roll, result=face(NEWS, roll))


def roll_establishment_count(source: RollSource, settlement_type: str = "village") -> EstablishmentCountResult:
    """2d6: villages keep the lower die, cities the higher."""
    require_choice("settlement_type", settlement_type, SETTLEMENT_TYPES)
    rolls = source.roll_dice(2, 6)
    count = min(rolls) if settlement_type == "village" else max(rolls)
    return EstablishmentCountResult(settlement_type=settlement_type, rolls=rolls, count=count)


def generate_establishments(source: RollSource, settlement_type: str = "village") -> MultiEstablishmentResult:
    count = roll_establishment_count(source, settlement_type)
    is_village = settlement_type == "village"
    establishments = [roll_establishment(source, is_village) for _ in range(count.count)]
    return MultiEstablishmentResult(settlement_type=settlement_type, count=count, establishments=establishments)


def generate_full(source: RollSource) -> FullSettlementResult:
    return FullSettlementResult(
        name=generate_name(source),
        establishment=roll_establishment(source),
        news=roll_news(source),
    )


def generate_properties(source: RollSource) -> SettlementPropertiesResult:
    return SettlementPropertiesResult(first=roll_property(source), second=roll_property(source))


def _complete(source: RollSource, settlement_type: str) -> CompleteSettlementResult:
    return CompleteSettlementResult(
        settlement_type=settlement_type,
        name=generate_name(source),
        properties=generate_properties(source),
        establishments=generate_establishments(source, settlement_type),
        news=roll_news(source),
    )


def generate_village(source: RollSource) -> CompleteSettlementResult:
    return _complete(source, "village")


def generate_city(source: RollSource) -> CompleteSettlementResult:
    return _complete(source, "city")


def generate_establishment_name(source: RollSource) -> EstablishmentNameResult:
    """``The <first word of a color> <object>``."""
    color_roll, object_roll = source.roll_dice(2, 10)
    color = face(COLORS, color_roll).split()[0]
    return EstablishmentNameResult(
        color_roll=color_roll,
        object_roll=object_roll,
        name=f"The {color} {face(ESTABLISHMENT_OBJECTS, object_roll)}",
    )


def generate_simple_npc(source: RollSource, need_skew: Skew | str = Skew.NONE) -> SimpleNpcResult:
    return SimpleNpcResult(name=generate_name(source), profile=generate_simple_profile(source, need_skew))
