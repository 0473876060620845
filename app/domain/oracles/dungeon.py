"""Dungeon crawl generators."""

from __future__ import annotations

from app.domain.oracles.tables import face, require_choice
from app.models.results.dungeon import (
    DungeonAreaResult,
    DungeonDetailResult,
    DungeonEncounterResult,
    DungeonMonsterResult,
    DungeonNameResult,
    DungeonTrapResult,
    FullDungeonAreaResult,
    TrapProcedureResult,
    TwoPassAreaResult,
)
from app.modules.dice.roller import RollSource, Skew, parse_skew

NAME_PLACES = [
    "Halls", "Tomb", "Caverns", "Vaults", "Crypt",
    "Temple", "Labyrinth", "Mines", "Fortress", "Sanctum",
]
NAME_ADJECTIVES = [
    "Forgotten", "Burning", "Silent", "Crimson", "Drowned",
    "Hollow", "Shattered", "Eternal", "Frozen", "Whispering",
]
NAME_NOUNS = [
    "King", "Serpent", "Moon", "Oath", "Flame",
    "Witch", "Titan", "Star", "Blade", "Abyss",
]

AREAS = [
    "Dead end", "Small chamber", "Corridor", "Junction", "Stairs down",
    "Large hall", "Cavern", "Shrine", "Vault", "Throne room",
]
PASSAGES = [
    "Narrow crawlway", "Straight corridor", "Winding tunnel", "Collapsed passage", "Door",
    "Secret door", "Bridge", "Flooded passage", "Spiral stair", "Grand archway",
]
CONDITIONS = [
    "Collapsing", "Flooded", "Dark", "Cramped", "Dusty",
    "Clean", "Lit", "Warm", "Ornate", "Pristine",
]
# d6 readers never meet a hazard
ENCOUNTER_TYPES = [
    "Nothing", "Nothing", "Monster", "Monster", "Trap",
    "Feature", "Monster", "Trap", "Feature", "Natural Hazard",
]
MONSTER_DESCRIPTIONS = [
    "Slimy", "Armored", "Spectral", "Hulking", "Swarming",
    "Winged", "Eyeless", "Burning", "Crystalline", "Shapeshifting",
]
MONSTER_ABILITIES = [
    "poison", "regeneration", "invisibility", "paralysis", "mimicry",
    "acid", "fire breath", "mind control", "petrification", "teleportation",
]
TRAP_ACTIONS = [
    "Falling", "Crushing", "Piercing", "Slicing", "Burning",
    "Freezing", "Poisoning", "Trapping", "Alarming", "Summoning",
]
TRAP_SUBJECTS = [
    "spikes", "blades", "darts", "gas", "flames",
    "water", "a net", "a cage", "bells", "guardians",
]
FEATURES = [
    "Statue", "Altar", "Fountain", "Mural", "Library",
    "Pool", "Well", "Forge", "Garden", "Portal",
]
HAZARDS = [
    "Loose rubble", "Bad air", "Sinkhole", "Slick floor", "Rising water",
    "Cave-in", "Mold spores", "Steam vent", "Pitfall", "Magma",
]
LINGERING_HAZARDS = [
    "Choking dust", "Freezing cold", "Toxic fumes", "Total darkness", "Deafening noise",
    "Blistering heat", "Flooding", "Tremors", "Magical static", "Creeping mold",
]
# d10 face -> trap DC; a higher face is easier
TRAP_DCS = [18, 17, 16, 15, 14, 13, 12, 11, 10, 9]

DIE_SIZES = ["d6", "d10"]


def _sides(die: str) -> int:
    require_choice("die", die, DIE_SIZES)
    return int(die[1:])


def _detail(
    source: RollSource,
    detail_type: str,
    table: list[str],
    die: str = "d10",
    skew: Skew | str = Skew.NONE,
) -> DungeonDetailResult:
    skew = parse_skew(skew)
    roll, all_rolls = source.roll_skewed(_sides(die), skew)
    return DungeonDetailResult(
        label=f"{detail_type} ({die}{skew.symbol})",
        detail_type=detail_type,
        roll=roll,
        all_rolls=all_rolls,
        skew=skew,
        result=face(table, roll),
    )


def _area(source: RollSource, skew: Skew, is_entering: bool) -> DungeonAreaResult:
    chosen = source.roll_with_advantage(10) if skew is Skew.ADVANTAGE else source.roll_with_disadvantage(10)
    return DungeonAreaResult(
        is_entering=is_entering, rolls=chosen.faces, roll=chosen.chosen, skew=skew, area=face(AREAS, chosen.chosen)
    )


def generate_name(source: RollSource) -> DungeonNameResult:
    rolls = source.roll_dice(3, 10)
    place, adjective, noun = (face(t, r) for t, r in zip((NAME_PLACES, NAME_ADJECTIVES, NAME_NOUNS), rolls))
    return DungeonNameResult(rolls=rolls, name=f"{place} of the {adjective} {noun}")


def generate_next_area(source: RollSource, is_entering: bool = True) -> DungeonAreaResult:
    """Entering rolls at disadvantage, exploring at advantage; doubles change phase."""
    return _area(source, Skew.DISADVANTAGE if is_entering else Skew.ADVANTAGE, is_entering)


def generate_passage(source: RollSource, die: str = "d10", skew: Skew | str = Skew.NONE) -> DungeonDetailResult:
    return _detail(source, "Passage", PASSAGES, die, skew)


def generate_condition(source: RollSource, die: str = "d10", skew: Skew | str = Skew.NONE) -> DungeonDetailResult:
    return _detail(source, "Condition", CONDITIONS, die, skew)


def generate_full_area(
    source: RollSource,
    is_entering: bool = True,
    condition_die: str = "d10",
    condition_skew: Skew | str = Skew.NONE,
) -> FullDungeonAreaResult:
    area = generate_next_area(source, is_entering)
    return FullDungeonAreaResult(area=area, condition=generate_condition(source, condition_die, condition_skew))


def roll_encounter_type(source: RollSource, die: str = "d10", skew: Skew | str = Skew.NONE) -> DungeonDetailResult:
    return _detail(source, "Encounter", ENCOUNTER_TYPES, die, skew)


def roll_monster_description(source: RollSource) -> DungeonMonsterResult:
    rolls = source.roll_dice(2, 10)
    return DungeonMonsterResult(
        rolls=rolls,
        description=face(MONSTER_DESCRIPTIONS, rolls[0]),
        ability=face(MONSTER_ABILITIES, rolls[1]),
    )


def roll_trap(source: RollSource) -> DungeonTrapResult:
    rolls = source.roll_dice(2, 10)
    return DungeonTrapResult(rolls=rolls, action=face(TRAP_ACTIONS, rolls[0]), subject=face(TRAP_SUBJECTS, rolls[1]))


def roll_trap_procedure(
    source: RollSource,
    is_searching: bool = False,
    skew: Skew | str = Skew.NONE,
) -> TrapProcedureResult:
    """Trap DC; searching characters avoid on a pass, others only locate it."""
    skew = parse_skew(skew)
    roll, all_rolls = source.roll_skewed(10, skew)
    return TrapProcedureResult(is_searching=is_searching, rolls=all_rolls, roll=roll, skew=skew, dc=face(TRAP_DCS, roll))


def roll_feature(source: RollSource) -> DungeonDetailResult:
    return _detail(source, "Feature", FEATURES)


def roll_natural_hazard(source: RollSource, is_lingering: bool = False) -> DungeonDetailResult:
    if is_lingering:
        return _detail(source, "Lingering Hazard", LINGERING_HAZARDS)
    return _detail(source, "Natural Hazard", HAZARDS)


def roll_full_encounter(
    source: RollSource,
    die: str = "d10",
    skew: Skew | str = Skew.NONE,
    is_lingering: bool = False,
) -> DungeonEncounterResult:
    """Roll an encounter type and the monster, trap, feature or hazard it calls for."""
    encounter_type = roll_encounter_type(source, die, skew)
    kind = encounter_type.result
    if kind == "Monster":
        return DungeonEncounterResult(encounter_type=encounter_type, monster=roll_monster_description(source))
    if kind == "Trap":
        return DungeonEncounterResult(encounter_type=encounter_type, trap=roll_trap(source))
    if kind == "Feature":
        return DungeonEncounterResult(encounter_type=encounter_type, feature=roll_feature(source))
    if kind == "Natural Hazard":
        return DungeonEncounterResult(
            encounter_type=encounter_type, feature=roll_natural_hazard(source, is_lingering)
        )
    return DungeonEncounterResult(encounter_type=encounter_type)


def generate_two_pass_area(
    source: RollSource,
    had_first_doubles: bool = False,
    condition_die: str = "d10",
    condition_skew: Skew | str = Skew.NONE,
) -> TwoPassAreaResult:
    """Advantage until the first doubles, disadvantage after; the second doubles ends the dungeon.

    The condition is rolled every time.
    """
    skew = Skew.DISADVANTAGE if had_first_doubles else Skew.ADVANTAGE
    area = _area(source, skew, is_entering=False)
    condition = generate_condition(source, condition_die, condition_skew)
    return TwoPassAreaResult(had_first_doubles=had_first_doubles, area=area, condition=condition)
