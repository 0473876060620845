"""Yes/no oracles, meaning tables and random events."""

from __future__ import annotations

from app.domain.composition import trigger
from app.domain.oracles.tables import (
    CATEGORY_TABLES,
    IDEA_CATEGORIES,
    MODIFIERS,
    RANDOM_EVENT_FOCUS,
    WORD_TABLES,
    face,
    ranged,
    require_choice,
)
from app.models.results.oracle import (
    CheckOutcome,
    DiscoverMeaningResult,
    ExpectationCheckResult,
    ExpectationOutcome,
    FateCheckResult,
    FateCheckTrigger,
    IdeaResult,
    InterruptPlotPointResult,
    OracleCheckResult,
    PayThePriceResult,
    RandomEventFocusResult,
    RandomEventResult,
    ScaledValueResult,
    ScaleResult,
    TableEntryResult,
)
from app.modules.dice.roller import RollSource

FATE_CHECK_LIKELIHOODS = ["Unlikely", "Even Odds", "Likely"]

ORACLE_LIKELIHOOD_MODIFIERS = {
    "Very Unlikely": -2,
    "Unlikely": -1,
    "Even Odds": 0,
    "Likely": 1,
    "Very Likely": 2,
}

# modified 2d6 total -> outcome
ORACLE_OUTCOMES = [
    (-99, 2, CheckOutcome.NO_AND),
    (3, 5, CheckOutcome.NO),
    (6, 6, CheckOutcome.NO_BUT),
    (7, 7, CheckOutcome.YES_BUT),
    (8, 11, CheckOutcome.YES),
    (12, 99, CheckOutcome.YES_AND),
]

# (first, second) fate faces -> expectation outcome
EXPECTATION_OUTCOMES = {
    (1, 1): ExpectationOutcome.EXPECTED_INTENSIFIED,
    (1, 0): ExpectationOutcome.EXPECTED,
    (1, -1): ExpectationOutcome.NEXT_MOST_EXPECTED,
    (-1, 1): ExpectationOutcome.NEXT_MOST_EXPECTED,
    (0, 1): ExpectationOutcome.FAVORABLE,
    (0, 0): ExpectationOutcome.MODIFIED_IDEA,
    (0, -1): ExpectationOutcome.UNFAVORABLE,
    (-1, 0): ExpectationOutcome.OPPOSITE,
    (-1, -1): ExpectationOutcome.OPPOSITE_INTENSIFIED,
}

# scale value (2dF + 1d6, -1..8) -> (label, multiplier)
SCALE_TABLE = {
    -1: ("-100%", 0.0),
    0: ("-75%", 0.25),
    1: ("-50%", 0.5),
    2: ("-25%", 0.75),
    3: ("-10%", 0.9),
    4: ("+10%", 1.1),
    5: ("+25%", 1.25),
    6: ("+50%", 1.5),
    7: ("+100%", 2.0),
    8: ("+200%", 3.0),
}

MEANING_DESCRIPTORS = [
    "Abandoned", "Ancient", "Bitter", "Broken", "Cautious", "Corrupt", "Desperate",
    "Faithful", "Fragile", "Hidden", "Hostile", "Hungry", "Lost", "Mighty",
    "Peaceful", "Proud", "Restless", "Sacred", "Strange", "Wild",
]
MEANING_SUBJECTS = [
    "Alliance", "Ambition", "Betrayal", "Bond", "Burden", "Debt", "Dream",
    "Enemy", "Faith", "Fear", "Gift", "Honor", "Journey", "Knowledge",
    "Legacy", "Memory", "Power", "Refuge", "Truth", "Wealth",
]

PAY_THE_PRICE = [
    "A trusted ally turns against you",
    "Something valuable is lost or destroyed",
    "You are separated from your companions",
    "An old enemy returns",
    "The situation becomes more dangerous",
    "You are delayed at a critical moment",
    "You must make a hard sacrifice",
    "A new threat emerges",
    "Your action has an unintended consequence",
    "Roll twice; both results occur",
]
MAJOR_TWISTS = [
    "The enemy was an ally all along",
    "The goal was never what it seemed",
    "A dead character returns",
    "The patron is the true villain",
    "Two threads turn out to be one",
    "The reward is cursed",
    "The hero is the prophecy's villain",
    "A hidden power awakens",
    "The world itself is changing",
    "Everything was a test",
]

PLOT_POINT_CATEGORIES = [
    "Action", "Action", "Tension", "Tension", "Mystery",
    "Mystery", "Social", "Social", "Personal", "Personal",
]
PLOT_POINT_EVENTS = {
    "Action": [
        "Chase", "Duel", "Ambush", "Rescue", "Escape",
        "Siege", "Sabotage", "Raid", "Standoff", "Skirmish",
    ],
    "Tension": [
        "Deadline", "Betrayal", "Threat", "Shortage", "Suspicion",
        "Trap", "Ultimatum", "Pursuit", "Rivalry", "Storm",
    ],
    "Mystery": [
        "Clue", "Disappearance", "Secret", "Omen", "Cipher",
        "Impostor", "Rumor", "Relic", "Vision", "Witness",
    ],
    "Social": [
        "Bargain", "Feast", "Quarrel", "Request", "Alliance",
        "Insult", "Trial", "Wedding", "Visitor", "Debt",
    ],
    "Personal": [
        "Doubt", "Oath", "Temptation", "Wound", "Memory",
        "Rival", "Loss", "Reunion", "Calling", "Choice",
    ],
}


def _fate_check_outcome(likelihood: str, primary: int, secondary: int) -> CheckOutcome:
    pair = {primary, secondary}
    if likelihood == "Even Odds":
        if primary == 1:
            return {1: CheckOutcome.YES_AND, -1: CheckOutcome.YES_BUT, 0: CheckOutcome.YES_BECAUSE}[secondary]
        if primary == -1:
            return {-1: CheckOutcome.NO_AND, 1: CheckOutcome.NO_BUT, 0: CheckOutcome.NO_BECAUSE}[secondary]
        return {1: CheckOutcome.FAVORABLE, -1: CheckOutcome.UNFAVORABLE, 0: CheckOutcome.YES_BUT}[secondary]

    if pair == {1}:
        return CheckOutcome.YES_AND
    if pair == {-1}:
        return CheckOutcome.NO_AND
    if pair == {1, -1}:
        return CheckOutcome.YES_BUT if likelihood == "Likely" else CheckOutcome.NO_BUT
    if pair == {0}:
        return CheckOutcome.YES if likelihood == "Likely" else CheckOutcome.NO
    return CheckOutcome.YES if 1 in pair else CheckOutcome.NO


def fate_check(
    source: RollSource,
    likelihood: str = "Even Odds",
    primary_on_left: bool | None = None,
) -> FateCheckResult:
    """Ask a yes/no question with 2dF, a d6 intensity and (unless given) a d2 for the primary side.

    The first fate die is always read as primary. The side only matters on
    double blanks: on the left they trigger a random event, on the right
    they flag an invalid assumption.
    """
    require_choice("likelihood", likelihood, FATE_CHECK_LIKELIHOODS)
    fate_dice = source.roll_fate_dice(2)
    intensity = source.roll_die(6)
    if primary_on_left is None:
        primary_on_left = source.roll_die(2) == 1

    outcome = _fate_check_outcome(likelihood, fate_dice[0], fate_dice[1])

    special = None
    if fate_dice[0] == 0 and fate_dice[1] == 0:
        special = FateCheckTrigger.RANDOM_EVENT if primary_on_left else FateCheckTrigger.INVALID_ASSUMPTION

    event = trigger(special is FateCheckTrigger.RANDOM_EVENT, lambda: random_event(source))
    return FateCheckResult(
        likelihood=likelihood,
        fate_dice=fate_dice,
        intensity=intensity,
        primary_on_left=primary_on_left,
        outcome=outcome,
        special_trigger=special,
        random_event=event,
    )


def oracle_check(source: RollSource, likelihood: str = "Even Odds") -> OracleCheckResult:
    """2d6 plus the likelihood modifier. The dice never depend on the likelihood."""
    require_choice("likelihood", likelihood, list(ORACLE_LIKELIHOOD_MODIFIERS))
    modifier = ORACLE_LIKELIHOOD_MODIFIERS[likelihood]
    rolls = source.roll_dice(2, 6)
    return OracleCheckResult(
        likelihood=likelihood,
        rolls=rolls,
        modifier=modifier,
        outcome=ranged(ORACLE_OUTCOMES, sum(rolls) + modifier),
    )


def expectation_check(source: RollSource) -> ExpectationCheckResult:
    fate_dice = source.roll_fate_dice(2)
    outcome = EXPECTATION_OUTCOMES[(fate_dice[0], fate_dice[1])]
    meaning = trigger(outcome is ExpectationOutcome.MODIFIED_IDEA, lambda: discover_meaning(source))
    return ExpectationCheckResult(fate_dice=fate_dice, outcome=outcome, meaning=meaning)


def roll_scale(source: RollSource) -> ScaleResult:
    fate_dice = source.roll_fate_dice(2)
    intensity_roll = source.roll_die(6)
    value = sum(fate_dice) + intensity_roll
    modifier_label, multiplier = SCALE_TABLE[value]
    return ScaleResult(
        fate_dice=fate_dice,
        intensity_roll=intensity_roll,
        scale_value=value,
        modifier_label=modifier_label,
        multiplier=multiplier,
    )


def scale_value(source: RollSource, base_value: float = 100) -> ScaledValueResult:
    if isinstance(base_value, bool) or not isinstance(base_value, (int, float)):
        raise ValueError(f"base_value must be a number, got {base_value!r}")
    return ScaledValueResult(base_value=base_value, scale=roll_scale(source))


def discover_meaning(source: RollSource) -> DiscoverMeaningResult:
    first, second = source.roll_dice(2, 20)
    return DiscoverMeaningResult(
        first_roll=first,
        second_roll=second,
        first_word=face(MEANING_DESCRIPTORS, first),
        second_word=face(MEANING_SUBJECTS, second),
    )


def pay_the_price(source: RollSource, major_twist: bool = False) -> PayThePriceResult:
    roll = source.roll_die(10)
    table = MAJOR_TWISTS if major_twist else PAY_THE_PRICE
    return PayThePriceResult(roll=roll, result=face(table, roll), is_major_twist=major_twist)


def interrupt_plot_point(source: RollSource) -> InterruptPlotPointResult:
    category_roll = source.roll_die(10)
    event_roll = source.roll_die(10)
    plot_category = face(PLOT_POINT_CATEGORIES, category_roll)
    return InterruptPlotPointResult(
        category_roll=category_roll,
        event_roll=event_roll,
        plot_category=plot_category,
        event=face(PLOT_POINT_EVENTS[plot_category], event_roll),
    )


def generate_idea(source: RollSource, category: str | None = None) -> IdeaResult:
    """Roll an idea word; without a category the d10 category die picks one."""
    if category is None:
        category = face(IDEA_CATEGORIES, source.roll_die(10))
    require_choice("category", category, list(CATEGORY_TABLES))
    roll = source.roll_die(10)
    return IdeaResult(idea_category=category, roll=roll, word=face(CATEGORY_TABLES[category], roll))


def random_event_focus(source: RollSource) -> RandomEventFocusResult:
    roll = source.roll_die(10)
    return RandomEventFocusResult(roll=roll, focus=face(RANDOM_EVENT_FOCUS, roll))


def random_event(source: RollSource) -> RandomEventResult:
    """Focus, modifier and idea; a hidden d10 picks the idea category."""
    focus_roll = source.roll_die(10)
    modifier_roll = source.roll_die(10)
    category_roll = source.roll_die(10)
    idea = generate_idea(source, face(IDEA_CATEGORIES, category_roll))
    return RandomEventResult(
        focus_roll=focus_roll,
        focus=face(RANDOM_EVENT_FOCUS, focus_roll),
        modifier_roll=modifier_roll,
        modifier=face(MODIFIERS, modifier_roll),
        category_roll=category_roll,
        idea=idea,
    )


def roll_table(source: RollSource, table: str = "idea") -> TableEntryResult:
    require_choice("table", table, list(WORD_TABLES))
    roll = source.roll_die(10)
    return TableEntryResult(table=table, roll=roll, entry=face(WORD_TABLES[table], roll))
