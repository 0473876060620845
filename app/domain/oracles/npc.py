"""NPC behaviour and profile generators."""

from __future__ import annotations

from app.domain.oracles.details import roll_color, roll_history, roll_two_properties
from app.domain.oracles.tables import EVENTS, OBJECTS, PERSONS, face, require_choice
from app.domain.oracles.world import generate_name as generate_person_name
from app.models.results.npc import (
    ComplexNpcResult,
    DualPersonalityResult,
    MotiveFollowUpResult,
    NpcActionResult,
    NpcProfileResult,
    SimpleNpcProfileResult,
)
from app.models.results.oracle import TableEntryResult
from app.modules.dice.roller import RollSource, Skew, parse_skew

# passive NPCs read only the first six rows (d6)
ACTIONS = [
    "Ignores", "Observes", "Waits", "Talks", "Helps",
    "Hides", "Acts on motive", "Demands", "Threatens", "Acts dramatically",
]
COMBAT_ACTIONS = [
    "Hold", "Guard", "Reposition", "Aid ally", "Disengage",
    "Feint", "Attack", "Press attack", "Special ability", "All-out assault",
]
PERSONALITIES = [
    "Cautious", "Curious", "Greedy", "Honest", "Loyal",
    "Proud", "Reckless", "Secretive", "Stubborn", "Kind",
]
NEEDS = [
    "Survival", "Safety", "Shelter", "Wealth", "Companionship",
    "Respect", "Knowledge", "Power", "Redemption", "Legacy",
]
MOTIVES = [
    "Revenge", "Duty", "Love", "Fear", "History",
    "Greed", "Faith", "Freedom", "Focus", "Curiosity",
]
NPC_FOCUS = [
    "Monster", "Event", "Environment", "Person", "Location",
    "Object", "Ally", "Enemy", "Faction", "Rumor",
]
MONSTERS = [
    "Beast", "Dragon", "Fiend", "Giant", "Golem",
    "Hag", "Ooze", "Spirit", "Troll", "Undead",
]
ENVIRONMENTS = [
    "Cave", "Coast", "Desert", "Forest", "Hills",
    "Marsh", "Mountains", "Plains", "River", "Ruins",
]

FOCUS_EXPANSIONS: dict[str, tuple[str, list[str]]] = {
    "Monster": ("monster", MONSTERS),
    "Event": ("event", EVENTS),
    "Environment": ("environment", ENVIRONMENTS),
    "Person": ("person", PERSONS),
    "Object": ("object", OBJECTS),
}

DISPOSITIONS = ["passive", "active"]
CONTEXTS = ["passive", "neutral", "active"]
COMBAT_FOCUSES = ["passive", "active"]
OBJECTIVES = ["offensive", "defensive"]

_CONTEXT_SKEW = {"passive": Skew.DISADVANTAGE, "neutral": Skew.NONE, "active": Skew.ADVANTAGE}


def _column(source: RollSource, column: str, table: list[str], sides: int = 10, skew: Skew = Skew.NONE) -> NpcActionResult:
    roll, all_rolls = source.roll_skewed(sides, skew)
    return NpcActionResult(
        column=column, roll=roll, all_rolls=all_rolls, die_size=sides, skew=skew, result=face(table, roll)
    )


def roll_action(source: RollSource, disposition: str = "active", context: str = "neutral") -> NpcActionResult:
    """Passive NPCs roll a d6; an active context skews up, a passive one down."""
    require_choice("disposition", disposition, DISPOSITIONS)
    require_choice("context", context, CONTEXTS)
    sides = 6 if disposition == "passive" else 10
    return _column(source, "Action", ACTIONS, sides, _CONTEXT_SKEW[context])


def roll_combat_action(source: RollSource, focus: str = "active", objective: str = "offensive") -> NpcActionResult:
    require_choice("focus", focus, COMBAT_FOCUSES)
    require_choice("objective", objective, OBJECTIVES)
    sides = 6 if focus == "passive" else 10
    skew = Skew.ADVANTAGE if objective == "offensive" else Skew.DISADVANTAGE
    return _column(source, "Combat", COMBAT_ACTIONS, sides, skew)


def roll_personality(source: RollSource) -> NpcActionResult:
    return _column(source, "Personality", PERSONALITIES)


def roll_need(source: RollSource, skew: Skew | str = Skew.NONE) -> NpcActionResult:
    return _column(source, "Need", NEEDS, skew=parse_skew(skew))


def roll_motive(source: RollSource) -> NpcActionResult:
    return _column(source, "Motive", MOTIVES)


def _expand_motive(source: RollSource, motive: NpcActionResult) -> MotiveFollowUpResult | None:
    if motive.result == "History":
        return MotiveFollowUpResult(motive=motive, history=roll_history(source))
    if motive.result != "Focus":
        return None

    focus = _column(source, "Focus", NPC_FOCUS)
    if focus.result == "Location":
        # settlement generators build on NPC profiles, so import here
        from app.domain.oracles.settlement import generate_name as generate_settlement_name

        return MotiveFollowUpResult(motive=motive, focus=focus, location=generate_settlement_name(source))
    if focus.result in FOCUS_EXPANSIONS:
        table, entries = FOCUS_EXPANSIONS[focus.result]
        roll = source.roll_die(10)
        expansion = TableEntryResult(table=table, roll=roll, entry=face(entries, roll))
        return MotiveFollowUpResult(motive=motive, focus=focus, expansion=expansion)
    return MotiveFollowUpResult(motive=motive, focus=focus)


def roll_motive_with_follow_up(source: RollSource) -> MotiveFollowUpResult:
    """Roll a motive; History and Focus motives are expanded."""
    motive = roll_motive(source)
    return _expand_motive(source, motive) or MotiveFollowUpResult(motive=motive)


def roll_dual_personality(source: RollSource) -> DualPersonalityResult:
    return DualPersonalityResult(primary=roll_personality(source), secondary=roll_personality(source))


def generate_simple_profile(source: RollSource, need_skew: Skew | str = Skew.NONE) -> SimpleNpcProfileResult:
    return SimpleNpcProfileResult(
        personality=roll_personality(source),
        need=roll_need(source, need_skew),
        motive=roll_motive(source),
    )


def generate_profile(
    source: RollSource,
    need_skew: Skew | str = Skew.NONE,
    dual_personality: bool = True,
) -> NpcProfileResult:
    personality = roll_dual_personality(source) if dual_personality else roll_personality(source)
    need = roll_need(source, need_skew)
    motive = roll_motive(source)
    expansion = _expand_motive(source, motive)
    return NpcProfileResult(
        personality=personality,
        need=need,
        motive=motive,
        motive_expansion=expansion,
        color=roll_color(source),
        properties=roll_two_properties(source),
    )


def generate_complex_npc(
    source: RollSource,
    need_skew: Skew | str = Skew.ADVANTAGE,
    include_name: bool = True,
    dual_personality: bool = True,
) -> ComplexNpcResult:
    name = generate_person_name(source) if include_name else None
    return ComplexNpcResult(name=name, profile=generate_profile(source, need_skew, dual_personality))
