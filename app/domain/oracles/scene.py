"""Scene framing generators."""

from __future__ import annotations

from app.domain.composition import is_doubles, trigger
from app.domain.oracles.oracle import generate_idea, interrupt_plot_point, random_event, roll_table
from app.domain.oracles.tables import clamp, face, ranged, require_choice
from app.models.results.scene import (
    NextSceneFollowUpResult,
    NextSceneResult,
    SceneCheckOutcome,
    SceneCheckResult,
    SceneFocusResult,
    SceneType,
)
from app.modules.dice.roller import RollSource

SCENE_TYPES = {
    (1, 1): SceneType.NORMAL,
    (1, 0): SceneType.NORMAL,
    (1, -1): SceneType.NORMAL,
    (0, 1): SceneType.ALTER_ADD,
    (0, 0): SceneType.NORMAL,
    (0, -1): SceneType.ALTER_REMOVE,
    (-1, 1): SceneType.INTERRUPT_FAVORABLE,
    (-1, 0): SceneType.ALTER_REMOVE,
    (-1, -1): SceneType.INTERRUPT_UNFAVORABLE,
}

SCENE_FOCUS = [
    "Action", "Character", "Conflict", "Danger", "Discovery",
    "Emotion", "Environment", "Mystery", "Reward", "Social",
]

ALTER_FOLLOW_UPS = ["focus", "idea"]

CHAOS_MODIFIERS = {
    "Controlled": -2,
    "Stable": -1,
    "Normal": 0,
    "Unstable": 1,
    "Chaotic": 2,
}

SCENE_CHECK_OUTCOMES = [
    (2, 2, SceneCheckOutcome.DRAMATIC_TWIST),
    (3, 4, SceneCheckOutcome.COMPLICATION),
    (5, 5, SceneCheckOutcome.DELAY),
    (6, 8, SceneCheckOutcome.EXPECTED),
    (9, 9, SceneCheckOutcome.ADVANTAGE),
    (10, 11, SceneCheckOutcome.OPPORTUNITY),
    (12, 12, SceneCheckOutcome.REVELATION),
]


def next_scene(source: RollSource) -> NextSceneResult:
    fate_dice = source.roll_fate_dice(2)
    return NextSceneResult(fate_dice=fate_dice, scene_type=SCENE_TYPES[(fate_dice[0], fate_dice[1])])


def scene_focus(source: RollSource) -> SceneFocusResult:
    roll = source.roll_die(10)
    return SceneFocusResult(roll=roll, focus=face(SCENE_FOCUS, roll))


def next_scene_with_follow_up(source: RollSource, alter_follow_up: str = "focus") -> NextSceneFollowUpResult:
    """Next scene with its follow-up rolled in.

    Altered scenes get a focus (or a modifier + idea); interrupts get a
    plot point.
    """
    require_choice("alter_follow_up", alter_follow_up, ALTER_FOLLOW_UPS)
    scene = next_scene(source)
    if scene.scene_type.is_alter:
        if alter_follow_up == "focus":
            return NextSceneFollowUpResult(scene=scene, focus=scene_focus(source))
        return NextSceneFollowUpResult(
            scene=scene,
            modifier=roll_table(source, "modifier"),
            idea=generate_idea(source, "Idea"),
        )
    if scene.scene_type.is_interrupt:
        return NextSceneFollowUpResult(scene=scene, plot_point=interrupt_plot_point(source))
    return NextSceneFollowUpResult(scene=scene)


def scene_check(source: RollSource, chaos_level: str = "Normal") -> SceneCheckResult:
    """2d6 + chaos modifier (clamped to 2..12); doubles trigger an interrupt event."""
    require_choice("chaos_level", chaos_level, list(CHAOS_MODIFIERS))
    modifier = CHAOS_MODIFIERS[chaos_level]
    rolls = source.roll_dice(2, 6)
    modified = clamp(sum(rolls) + modifier, 2, 12)
    interrupt = trigger(is_doubles(rolls), lambda: random_event(source))
    return SceneCheckResult(
        chaos_level=chaos_level,
        rolls=rolls,
        modifier=modifier,
        modified_total=modified,
        outcome=ranged(SCENE_CHECK_OUTCOMES, modified),
        interrupt_event=interrupt,
    )
