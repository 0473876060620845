"""Conversation and dialog generators."""

from __future__ import annotations

from app.domain.oracles.tables import banded, face, require_range
from app.models.results.conversation import (
    CompanionResponseResult,
    DialogResult,
    DialogTopicResult,
    InformationResult,
)
from app.modules.dice.roller import RollSource, Skew, parse_skew

# d100 tables, read in bands of ten
INFO_TYPES = [
    "Rumor", "Warning", "Request", "Secret", "Lie",
    "History", "Direction", "Offer", "Threat", "Prophecy",
]
INFO_TOPICS = [
    "a local leader", "a hidden place", "a rival faction", "a lost item", "a monster",
    "the weather", "a stranger", "an old debt", "a celebration", "the road ahead",
]
# low faces are hostile, high faces supportive
COMPANION_RESPONSES = [
    "Refuses outright", "Argues against it", "Hesitates", "Asks for something in return", "Goes along reluctantly",
    "Agrees", "Agrees and adds an idea", "Takes the lead", "Offers a better plan", "Fully commits",
]
DIALOG_TOPICS = [
    "Family", "Work", "Danger", "Money", "Love",
    "Politics", "Faith", "Travel", "The past", "The future",
]

# 5x5 dialog grid; rows 0-1 speak in the past tense
DIALOG_GRID = [
    ["Fact", "Denial", "Query", "Denial", "Action"],
    ["Want", "Query", "Need", "Query", "Fact"],
    ["Action", "Need", "Fact", "Action", "Denial"],
    ["Need", "Query", "Denial", "Query", "Want"],
    ["Query", "Support", "Query", "Support", "Need"],
]
# d10: 1-2 up, 3-5 left, 6-8 right, 9-0 down
DIRECTIONS = ["Up"] * 2 + ["Left"] * 3 + ["Right"] * 3 + ["Down"] * 2
DIRECTION_STEPS = {"Up": (-1, 0), "Down": (1, 0), "Left": (0, -1), "Right": (0, 1)}
# d10: 1-4 Neutral, 5-6 Defensive, 7-8 Aggressive, 9-0 Helpful
TONES = ["Neutral"] * 4 + ["Defensive"] * 2 + ["Aggressive"] * 2 + ["Helpful"] * 2
# d10: 1-3 Them, 4-6 Me, 7-8 You, 9-0 Us
SUBJECTS = ["Them"] * 3 + ["Me"] * 3 + ["You"] * 2 + ["Us"] * 2


def roll_information(source: RollSource) -> InformationResult:
    type_roll, topic_roll = source.roll_dice(2, 100)
    return InformationResult(
        type_roll=type_roll,
        topic_roll=topic_roll,
        info_type=banded(INFO_TYPES, type_roll),
        topic=banded(INFO_TOPICS, topic_roll),
    )


def roll_companion_response(source: RollSource, skew: Skew | str = Skew.NONE) -> CompanionResponseResult:
    skew = parse_skew(skew)
    roll, all_rolls = source.roll_skewed(100, skew)
    return CompanionResponseResult(
        roll=roll, all_rolls=all_rolls, skew=skew, response=banded(COMPANION_RESPONSES, roll)
    )


def roll_dialog_topic(source: RollSource) -> DialogTopicResult:
    roll = source.roll_die(100)
    return DialogTopicResult(roll=roll, topic=banded(DIALOG_TOPICS, roll))


def dialog(source: RollSource, row: int = 2, column: int = 2) -> DialogResult:
    """Take one step on the dialog grid from ``(row, column)``.

    Moves wrap around the edges. Doubles on the direction and tone dice end
    the conversation in place.
    """
    require_range("row", row, 0, 4)
    require_range("column", column, 0, 4)
    direction_roll = source.roll_die(10)
    tone_roll = source.roll_die(10)
    subject_roll = source.roll_die(10)
    direction = face(DIRECTIONS, direction_roll)

    new_row, new_column = row, column
    if direction_roll != tone_roll:
        d_row, d_column = DIRECTION_STEPS[direction]
        new_row, new_column = (row + d_row) % 5, (column + d_column) % 5

    return DialogResult(
        start_row=row,
        start_column=column,
        direction_roll=direction_roll,
        tone_roll=tone_roll,
        subject_roll=subject_roll,
        direction=direction,
        tone=face(TONES, tone_roll),
        subject=face(SUBJECTS, subject_roll),
        row=new_row,
        column=new_column,
        fragment=DIALOG_GRID[new_row][new_column],
    )
