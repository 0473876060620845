"""Settlement results."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import model_validator

from app.models.results.base import RollCategory, RollResult, combined_dice, joined_interpretation
from app.models.results.details import PropertyResult
from app.models.results.npc import SimpleNpcProfileResult


class SettlementNameResult(RollResult):
    kind: Literal["settlement_name"] = "settlement_name"
    label: str = "Settlement Name"
    prefix_roll: int
    suffix_roll: int
    name: str

    dice_fields: ClassVar[tuple[str, ...]] = ("prefix_roll", "suffix_roll")

    def derive_dice(self) -> list[int]:
        return [self.prefix_roll, self.suffix_roll]

    def derive_interpretation(self) -> str:
        return self.name


class SettlementDetailResult(RollResult):
    """Establishment, artisan or news roll; an Artisan establishment carries its sub-roll."""

    kind: Literal["settlement_detail"] = "settlement_detail"
    detail_type: str
    roll: int
    die_size: int = 10
    result: str
    artisan_roll: int | None = None
    artisan: str | None = None

    dice_fields: ClassVar[tuple[str, ...]] = ("roll", "artisan_roll")

    def derive_dice(self) -> list[int]:
        return [self.roll] + ([self.artisan_roll] if self.artisan_roll is not None else [])

    def derive_interpretation(self) -> str:
        if self.artisan:
            return f"{self.result} ({self.artisan})"
        return self.result

    def derive_label(self) -> str:
        return self.detail_type


class EstablishmentCountResult(RollResult):
    """2d6; villages keep the lower die, cities the higher."""

    kind: Literal["establishment_count"] = "establishment_count"
    label: str = "Establishment Count"
    settlement_type: str
    rolls: tuple[int, ...]
    count: int

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "count"

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.count

    def derive_interpretation(self) -> str:
        return f"{self.count} establishments"


class EstablishmentNameResult(RollResult):
    kind: Literal["establishment_name"] = "establishment_name"
    label: str = "Establishment Name"
    color_roll: int
    object_roll: int
    name: str

    dice_fields: ClassVar[tuple[str, ...]] = ("color_roll", "object_roll")

    def derive_dice(self) -> list[int]:
        return [self.color_roll, self.object_roll]

    def derive_interpretation(self) -> str:
        return self.name


class MultiEstablishmentResult(RollResult):
    kind: Literal["multi_establishment"] = "multi_establishment"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Establishments"
    settlement_type: str
    count: EstablishmentCountResult
    establishments: tuple[SettlementDetailResult, ...] = ()

    def derive_dice(self) -> list[int]:
        return combined_dice(self.count, *self.establishments)

    def derive_interpretation(self) -> str:
        return joined_interpretation(*self.establishments, separator=", ")


class SettlementPropertiesResult(RollResult):
    kind: Literal["settlement_properties"] = "settlement_properties"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Settlement Properties"
    first: PropertyResult
    second: PropertyResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.first, self.second)

    def derive_interpretation(self) -> str:
        return joined_interpretation(self.first, self.second, separator=" & ")


class FullSettlementResult(RollResult):
    kind: Literal["full_settlement"] = "full_settlement"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Settlement"
    name: SettlementNameResult
    establishment: SettlementDetailResult
    news: SettlementDetailResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.name, self.establishment, self.news)

    def derive_interpretation(self) -> str:
        return f"{self.name.name}: {self.establishment.interpretation}; news: {self.news.result}"


class CompleteSettlementResult(RollResult):
    kind: Literal["complete_settlement"] = "complete_settlement"
    category: RollCategory = RollCategory.COMPOSITE
    settlement_type: str
    name: SettlementNameResult
    properties: SettlementPropertiesResult
    establishments: MultiEstablishmentResult
    news: SettlementDetailResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.name, self.properties, self.establishments, self.news)

    def derive_interpretation(self) -> str:
        return (
            f"{self.name.name} ({self.properties.interpretation}): "
            f"{self.establishments.interpretation}; news: {self.news.result}"
        )

    def derive_label(self) -> str:
        return self.settlement_type.title()


class SimpleNpcResult(RollResult):
    """A named townsfolk NPC.

    Only the name and profile text are stored; a restored result has no
    child results and takes its dice from the stored document.
    """

    kind: Literal["simple_npc"] = "simple_npc"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "NPC"
    name: SettlementNameResult | None = None
    profile: SimpleNpcProfileResult | None = None
    name_text: str = ""
    profile_text: str = ""

    derived_on_decode: ClassVar[tuple[str, ...]] = ("label", "interpretation")
    transient_fields: ClassVar[frozenset[str]] = frozenset({"name", "profile"})

    @model_validator(mode="before")
    @classmethod
    def fill_texts(cls, data: Any) -> Any:
        if isinstance(data, dict):
            name, profile = data.get("name"), data.get("profile")
            if isinstance(name, RollResult) and not data.get("name_text"):
                data = {**data, "name_text": name.interpretation or ""}
            if isinstance(profile, RollResult) and not data.get("profile_text"):
                data = {**data, "profile_text": profile.interpretation or ""}
        return data

    def derive_dice(self) -> list[int]:
        return combined_dice(self.name, self.profile)

    def derive_interpretation(self) -> str:
        return f"{self.name_text}: {self.profile_text}"

    def derive_label(self) -> str:
        return f"NPC {self.name_text}".strip()
