"""Generator dispatcher: the single entry point for every oracle invocation."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from enum import Enum
from typing import Any

from app.domain.oracles import (
    challenge,
    conversation,
    details,
    dice,
    dungeon,
    exploration,
    immersion,
    ironsworn,
    monster,
    npc,
    oracle,
    scene,
    settlement,
    treasure,
    wilderness,
    world,
)
from app.models.results import RollResult
from app.modules.dice.roller import RollSource

Generator = Callable[..., RollResult]


class UnknownGeneratorError(LookupError):
    pass


class InvalidParametersError(ValueError):
    pass


CATALOG: dict[str, dict[str, Generator]] = {
    "dice": {
        "roll_dice": dice.roll_dice,
        "roll_fate": dice.roll_fate,
    },
    "oracle": {
        "fate_check": oracle.fate_check,
        "oracle_check": oracle.oracle_check,
        "expectation_check": oracle.expectation_check,
        "roll_scale": oracle.roll_scale,
        "scale_value": oracle.scale_value,
        "discover_meaning": oracle.discover_meaning,
        "pay_the_price": oracle.pay_the_price,
        "interrupt_plot_point": oracle.interrupt_plot_point,
        "random_event": oracle.random_event,
        "generate_idea": oracle.generate_idea,
        "random_event_focus": oracle.random_event_focus,
        "roll_table": oracle.roll_table,
    },
    "scene": {
        "next_scene": scene.next_scene,
        "scene_focus": scene.scene_focus,
        "next_scene_with_follow_up": scene.next_scene_with_follow_up,
        "scene_check": scene.scene_check,
    },
    "details": {
        "roll_color": details.roll_color,
        "roll_property": details.roll_property,
        "roll_two_properties": details.roll_two_properties,
        "roll_detail": details.roll_detail,
        "roll_history": details.roll_history,
        "roll_detail_with_follow_up": details.roll_detail_with_follow_up,
    },
    "npc": {
        "roll_action": npc.roll_action,
        "roll_personality": npc.roll_personality,
        "roll_need": npc.roll_need,
        "roll_motive": npc.roll_motive,
        "roll_motive_with_follow_up": npc.roll_motive_with_follow_up,
        "roll_combat_action": npc.roll_combat_action,
        "generate_profile": npc.generate_profile,
        "generate_simple_profile": npc.generate_simple_profile,
        "roll_dual_personality": npc.roll_dual_personality,
        "generate_complex_npc": npc.generate_complex_npc,
    },
    "challenge": {
        "roll_full_challenge": challenge.roll_full_challenge,
        "roll_dc": challenge.roll_dc,
        "roll_quick_dc": challenge.roll_quick_dc,
        "roll_balanced_dc": challenge.roll_balanced_dc,
        "roll_physical_challenge": challenge.roll_physical_challenge,
        "roll_mental_challenge": challenge.roll_mental_challenge,
        "roll_any_challenge": challenge.roll_any_challenge,
        "roll_percentage_chance": challenge.roll_percentage_chance,
    },
    "immersion": {
        "sensory_detail": immersion.sensory_detail,
        "emotional_atmosphere": immersion.emotional_atmosphere,
        "full_immersion": immersion.full_immersion,
    },
    "conversation": {
        "roll_information": conversation.roll_information,
        "roll_companion_response": conversation.roll_companion_response,
        "roll_dialog_topic": conversation.roll_dialog_topic,
        "dialog": conversation.dialog,
    },
    "world": {
        "roll_location": world.roll_location,
        "abstract_icon": world.abstract_icon,
        "generate_name": world.generate_name,
        "generate_quest": world.generate_quest,
    },
    "treasure": {
        "generate_object": treasure.generate_object,
        "generate_full_item": treasure.generate_full_item,
    },
    "monster": {
        "roll_encounter": monster.roll_encounter,
        "roll_tracks": monster.roll_tracks,
        "generate_full_encounter": monster.generate_full_encounter,
    },
    "wilderness": {
        "initialize_random": wilderness.initialize_random,
        "initialize_at": wilderness.initialize_at,
        "transition": wilderness.transition,
        "roll_encounter": wilderness.roll_encounter,
        "roll_weather": wilderness.roll_weather,
        "roll_natural_hazard": wilderness.roll_natural_hazard,
        "roll_feature": wilderness.roll_feature,
        "roll_monster_level": wilderness.roll_monster_level,
    },
    "settlement": {
        "generate_name": settlement.generate_name,
        "roll_establishment": settlement.roll_establishment,
        "roll_artisan": settlement.roll_artisan,
        "roll_news": settlement.roll_news,
        "roll_establishment_count": settlement.roll_establishment_count,
        "generate_establishments": settlement.generate_establishments,
        "generate_full": settlement.generate_full,
        "generate_village": settlement.generate_village,
        "generate_city": settlement.generate_city,
        "generate_establishment_name": settlement.generate_establishment_name,
        "generate_properties": settlement.generate_properties,
        "generate_simple_npc": settlement.generate_simple_npc,
    },
    "dungeon": {
        "generate_name": dungeon.generate_name,
        "generate_next_area": dungeon.generate_next_area,
        "generate_passage": dungeon.generate_passage,
        "generate_condition": dungeon.generate_condition,
        "generate_full_area": dungeon.generate_full_area,
        "roll_encounter_type": dungeon.roll_encounter_type,
        "roll_monster_description": dungeon.roll_monster_description,
        "roll_trap": dungeon.roll_trap,
        "roll_trap_procedure": dungeon.roll_trap_procedure,
        "roll_feature": dungeon.roll_feature,
        "roll_natural_hazard": dungeon.roll_natural_hazard,
        "roll_full_encounter": dungeon.roll_full_encounter,
        "generate_two_pass_area": dungeon.generate_two_pass_area,
    },
    "exploration": {
        "roll_weather": exploration.roll_weather,
        "check_wilderness_encounter": exploration.check_wilderness_encounter,
        "check_dungeon_encounter": exploration.check_dungeon_encounter,
    },
    "ironsworn": {
        "action_roll": ironsworn.action_roll,
        "progress_roll": ironsworn.progress_roll,
        "oracle_roll": ironsworn.oracle_roll,
        "yes_no": ironsworn.yes_no,
        "cursed_oracle": ironsworn.cursed_oracle,
        "momentum_burn": ironsworn.momentum_burn,
    },
}


def resolve(generator: str, operation: str) -> Generator:
    try:
        return CATALOG[generator][operation]
    except KeyError:
        raise UnknownGeneratorError(f"Unknown generator operation: {generator}.{operation}") from None


def invoke(
    source: RollSource,
    generator: str,
    operation: str,
    params: dict[str, Any] | None = None,
) -> RollResult:
    """Run one generator operation against ``source``.

    Raises:
        UnknownGeneratorError: No such generator or operation.
        InvalidParametersError: Unknown parameter names or rejected values.
    """
    fn = resolve(generator, operation)
    params = params or {}
    try:
        bound = inspect.signature(fn).bind(source, **params)
    except TypeError as exc:
        raise InvalidParametersError(f"{generator}.{operation}: {exc}") from exc

    try:
        return fn(*bound.args, **bound.kwargs)
    except InvalidParametersError:
        raise
    except (TypeError, ValueError) as exc:
        raise InvalidParametersError(f"{generator}.{operation}: {exc}") from exc


def _describe_default(value: Any) -> Any:
    if value is inspect.Parameter.empty:
        return None
    if isinstance(value, Enum):
        return value.value
    return value


def describe_catalog() -> dict[str, dict[str, list[dict[str, Any]]]]:
    """Generators, their operations and each operation's parameters."""
    described: dict[str, dict[str, list[dict[str, Any]]]] = {}
    for generator, operations in CATALOG.items():
        described[generator] = {}
        for operation, fn in operations.items():
            parameters = list(inspect.signature(fn).parameters.values())[1:]
            described[generator][operation] = [
                {
                    "name": p.name,
                    "default": _describe_default(p.default),
                    "required": p.default is inspect.Parameter.empty,
                }
                for p in parameters
            ]
    return described
