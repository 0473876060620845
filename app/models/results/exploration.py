"""2d6 exploration tables: weather and encounters."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollResult


class WeatherResult(RollResult):
    kind: Literal["weather"] = "weather"
    season: str
    climate: str
    rolls: tuple[int, ...]
    modifier: int = 0
    weather: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    @property
    def adjusted_total(self) -> int:
        return max(2, min(12, self.raw_total + self.modifier))

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        return f"{self.weather.replace('_', ' ').title()} ({self.adjusted_total})"

    def derive_label(self) -> str:
        return f"Weather ({self.season}, {self.climate})"


class EncounterResult(RollResult):
    """2d6 minus danger; distance and disposition rolls are kept apart from the dice."""

    kind: Literal["encounter"] = "encounter"
    location_type: str = "Wilderness"
    danger_level: int = 0
    rolls: tuple[int, ...]
    outcome: str
    distance_rolls: tuple[int, ...] = ()
    distance: str | None = None
    disposition_rolls: tuple[int, ...] = ()
    disposition: str | None = None

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    @property
    def adjusted_total(self) -> int:
        return max(2, min(12, self.raw_total - self.danger_level))

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        parts = [self.outcome.replace("_", " ").title()]
        if self.distance:
            parts.append(f"at {self.distance} range")
        if self.disposition:
            parts.append(f"({self.disposition})")
        return " ".join(parts)

    def derive_label(self) -> str:
        return f"{self.location_type} Encounter"
