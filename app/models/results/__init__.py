"""Roll result entities, one module per generator family."""

from app.models.results.base import RollCategory, RollResult
from app.models.results.challenge import (
    ChallengeSkillResult,
    DcResult,
    FullChallengeResult,
    PercentageChanceResult,
    QuickDcResult,
)
from app.models.results.conversation import (
    CompanionResponseResult,
    DialogResult,
    DialogTopicResult,
    InformationResult,
)
from app.models.results.details import (
    DetailFollowUpResult,
    DetailResult,
    DualPropertyResult,
    PropertyResult,
)
from app.models.results.dice import DiceRollResult, FateRollResult
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
from app.models.results.exploration import EncounterResult, WeatherResult
from app.models.results.immersion import (
    EmotionalAtmosphereResult,
    FullImmersionResult,
    SensoryDetailResult,
)
from app.models.results.ironsworn import (
    IronswornActionResult,
    IronswornCursedOracleResult,
    IronswornMomentumBurnResult,
    IronswornOracleResult,
    IronswornProgressResult,
    IronswornYesNoResult,
)
from app.models.results.monster import (
    FullMonsterEncounterResult,
    MonsterEncounterResult,
    MonsterTracksResult,
)
from app.models.results.npc import (
    ComplexNpcResult,
    DualPersonalityResult,
    MotiveFollowUpResult,
    NpcActionResult,
    NpcProfileResult,
    SimpleNpcProfileResult,
)
from app.models.results.oracle import (
    DiscoverMeaningResult,
    ExpectationCheckResult,
    FateCheckResult,
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
from app.models.results.scene import (
    NextSceneFollowUpResult,
    NextSceneResult,
    SceneCheckResult,
    SceneFocusResult,
)
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
from app.models.results.treasure import ItemCreationResult, ObjectTreasureResult
from app.models.results.wilderness import (
    MonsterLevelResult,
    WildernessAreaResult,
    WildernessDetailResult,
    WildernessEncounterResult,
    WildernessWeatherResult,
)
from app.models.results.world import (
    AbstractIconResult,
    LocationResult,
    NameResult,
    QuestResult,
)

# Every result type the registry knows how to restore.
RESULT_TYPES: tuple[type[RollResult], ...] = (
    RollResult,
    # dice
    DiceRollResult,
    FateRollResult,
    # oracle
    FateCheckResult,
    OracleCheckResult,
    ExpectationCheckResult,
    ScaleResult,
    ScaledValueResult,
    DiscoverMeaningResult,
    PayThePriceResult,
    InterruptPlotPointResult,
    RandomEventResult,
    IdeaResult,
    RandomEventFocusResult,
    TableEntryResult,
    # scene
    NextSceneResult,
    SceneFocusResult,
    NextSceneFollowUpResult,
    SceneCheckResult,
    # details
    DetailResult,
    PropertyResult,
    DualPropertyResult,
    DetailFollowUpResult,
    # npc
    NpcActionResult,
    MotiveFollowUpResult,
    NpcProfileResult,
    SimpleNpcProfileResult,
    DualPersonalityResult,
    ComplexNpcResult,
    # challenge
    FullChallengeResult,
    DcResult,
    QuickDcResult,
    ChallengeSkillResult,
    PercentageChanceResult,
    # immersion
    SensoryDetailResult,
    EmotionalAtmosphereResult,
    FullImmersionResult,
    # conversation
    InformationResult,
    CompanionResponseResult,
    DialogTopicResult,
    DialogResult,
    # world
    LocationResult,
    AbstractIconResult,
    NameResult,
    QuestResult,
    # treasure
    ObjectTreasureResult,
    ItemCreationResult,
    # monster
    MonsterEncounterResult,
    MonsterTracksResult,
    FullMonsterEncounterResult,
    # wilderness
    WildernessAreaResult,
    WildernessEncounterResult,
    WildernessWeatherResult,
    WildernessDetailResult,
    MonsterLevelResult,
    # settlement
    SettlementNameResult,
    SettlementDetailResult,
    EstablishmentCountResult,
    EstablishmentNameResult,
    MultiEstablishmentResult,
    FullSettlementResult,
    CompleteSettlementResult,
    SettlementPropertiesResult,
    SimpleNpcResult,
    # dungeon
    DungeonNameResult,
    DungeonDetailResult,
    DungeonAreaResult,
    FullDungeonAreaResult,
    DungeonMonsterResult,
    DungeonTrapResult,
    DungeonEncounterResult,
    TwoPassAreaResult,
    TrapProcedureResult,
    # exploration
    WeatherResult,
    EncounterResult,
    # ironsworn
    IronswornActionResult,
    IronswornProgressResult,
    IronswornOracleResult,
    IronswornYesNoResult,
    IronswornCursedOracleResult,
    IronswornMomentumBurnResult,
)

__all__ = [cls.__name__ for cls in RESULT_TYPES] + ["RESULT_TYPES", "RollCategory"]
