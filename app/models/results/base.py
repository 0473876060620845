"""Base roll result entity and its document encoding."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, get_origin

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from app.domain.registry import ResultRegistry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RollCategory(str, Enum):
    """How the dice values of a result are read."""

    STANDARD = "standard"  # numeric die faces
    FATE = "fate"  # faces -1 / 0 / +1
    COMPOSITE = "composite"  # dice gathered from embedded results


# Document key -> model attribute for the fields every result carries.
BASE_KEYS: dict[str, str] = {
    "kind": "kind",
    "category": "category",
    "label": "label",
    "diceValues": "dice_values",
    "rawTotal": "raw_total",
    "interpretation": "interpretation",
    "createdAt": "created_at",
}
_BASE_ATTRS = frozenset(BASE_KEYS.values())


def fate_symbol(value: int) -> str:
    return {-1: "-", 0: "0", 1: "+"}.get(value, "?")


def fate_symbols(values: Sequence[int]) -> str:
    return " ".join(fate_symbol(v) for v in values)


def base_fields(document: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the base fields out of a document, renamed to model attributes."""
    return {attr: document[key] for key, attr in BASE_KEYS.items() if key in document}


def is_document(value: Any) -> bool:
    return isinstance(value, Mapping) and "kind" in value and "extra" in value


# --- Embedding helpers ---


def combined_dice(*parts: RollResult | None) -> list[int]:
    """Concatenate the dice of embedded results, skipping absent ones."""
    dice: list[int] = []
    for part in parts:
        if part is not None:
            dice.extend(part.dice_values)
    return dice


def combined_total(*parts: RollResult | None) -> int:
    return sum(part.raw_total for part in parts if part is not None)


def joined_interpretation(*parts: RollResult | str | None, separator: str = "; ") -> str:
    texts = []
    for part in parts:
        if part is None:
            continue
        text = part if isinstance(part, str) else part.interpretation
        if text:
            texts.append(text)
    return separator.join(texts)


def is_doubles(dice: Sequence[int]) -> bool:
    return len(dice) >= 2 and dice[0] == dice[1]


# --- Document values ---


def _encode_value(value: Any) -> Any:
    if isinstance(value, RollResult):
        return value.encode()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [_encode_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode_value(v) for k, v in value.items()}
    return value


def _decode_value(value: Any, registry: ResultRegistry) -> Any:
    if is_document(value):
        return registry.decode(value)
    if isinstance(value, list):
        return [_decode_value(v, registry) for v in value]
    return value


def _is_run(annotation: Any) -> bool:
    return get_origin(annotation) in (list, tuple)


def _dice_width(value: Any) -> int | None:
    if value is None:
        return 0
    if isinstance(value, RollResult):
        return len(value.dice_values)
    if isinstance(value, (list, tuple)):
        return len(value)
    if isinstance(value, int):
        return 1
    return None


class RollResult(BaseModel):
    """One generator invocation's outcome.

    This is also the generic entity that unknown documents degrade to.
    Variants pin ``kind`` to a literal tag, declare their own fields, and
    override the ``derive_*`` hooks; the hooks fill ``dice_values``,
    ``raw_total``, ``interpretation`` and ``label`` at construction unless
    a value was passed explicitly (as it is on decode).

    Results are frozen; dice are held as tuples.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = "roll"
    category: RollCategory = RollCategory.STANDARD
    label: str = ""
    dice_values: tuple[int, ...] = ()
    raw_total: int = 0
    interpretation: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)

    # Fields recomputed from primary fields on decode instead of restored.
    derived_on_decode: ClassVar[tuple[str, ...]] = ()
    # Fields left out of the encoded document.
    transient_fields: ClassVar[frozenset[str]] = frozenset()

    # Decode defaults for primary fields missing from ``extra``:
    # primary fields whose dice make up ``diceValues``, in order. Each is a
    # single die, a run of dice or an embedded result; at most one run may
    # be missing.
    dice_fields: ClassVar[tuple[str, ...]] = ()
    # primary field equal to ``rawTotal``.
    total_field: ClassVar[str | None] = None
    # run holding every face rolled for one kept value (two under a skew).
    faces_field: ClassVar[str | None] = None

    @model_validator(mode="after")
    def fill_derived_fields(self) -> RollResult:
        explicit = set(self.model_fields_set)
        if "dice_values" not in explicit:
            object.__setattr__(self, "dice_values", tuple(self.derive_dice()))
        if "raw_total" not in explicit:
            object.__setattr__(self, "raw_total", self.derive_total())
        if "interpretation" not in explicit:
            object.__setattr__(self, "interpretation", self.derive_interpretation())
        if "label" not in explicit:
            object.__setattr__(self, "label", self.derive_label())
        return self

    # --- Derivation hooks ---

    def derive_dice(self) -> list[int]:
        return list(self.dice_values)

    def derive_total(self) -> int:
        return sum(self.dice_values)

    def derive_interpretation(self) -> str | None:
        return self.interpretation

    def derive_label(self) -> str:
        return self.label

    # --- Document form ---

    def encode_extra(self) -> dict[str, Any]:
        return {
            name: _encode_value(getattr(self, name))
            for name in type(self).model_fields
            if name not in _BASE_ATTRS and name not in self.transient_fields
        }

    def encode(self) -> dict[str, Any]:
        """Encode to the persisted history document shape."""
        return {
            "kind": self.kind,
            "category": self.category.value,
            "label": self.label,
            "diceValues": list(self.dice_values),
            "rawTotal": self.raw_total,
            "interpretation": self.interpretation,
            "createdAt": self.created_at.isoformat(),
            "extra": self.encode_extra(),
        }

    @classmethod
    def decode(cls, document: Mapping[str, Any], registry: ResultRegistry) -> RollResult:
        """Rebuild this variant from a document.

        Embedded documents are decoded through ``registry`` first and
        missing primary fields get their decode defaults. Raises
        ``pydantic.ValidationError`` (a ``ValueError``) when a required
        field is still missing or malformed; the registry recovers from that.
        """
        extra = document.get("extra") or {}
        if not isinstance(extra, Mapping):
            raise TypeError(f"extra must be an object, got {type(extra).__name__}")
        fields = {
            name: _decode_value(value, registry)
            for name, value in extra.items()
            if name in cls.model_fields and name not in _BASE_ATTRS
        }
        cls.recover_fields(fields, document)
        fields.update(base_fields(document))
        for name in cls.derived_on_decode:
            fields.pop(name, None)
        return cls.model_validate(fields)

    @classmethod
    def recover_fields(cls, fields: dict[str, Any], document: Mapping[str, Any]) -> None:
        """Fill primary fields missing from ``fields`` out of the base fields."""
        dice = document.get("diceValues")
        if isinstance(dice, list) and all(isinstance(v, int) for v in dice):
            if cls.dice_fields:
                cls._recover_dice_fields(fields, dice)
            if cls.faces_field and cls.faces_field not in fields:
                fields[cls.faces_field] = list(dice)
        if cls.total_field and cls.total_field not in fields and "rawTotal" in document:
            fields[cls.total_field] = document["rawTotal"]

    @classmethod
    def _recover_dice_fields(cls, fields: dict[str, Any], dice: list[int]) -> None:
        widths: dict[str, int | None] = {}
        missing: list[str] = []
        for name in cls.dice_fields:
            info = cls.model_fields[name]
            if name in fields:
                widths[name] = _dice_width(fields[name])
                if widths[name] is None:
                    return
            elif _is_run(info.annotation):
                widths[name] = None
                missing.append(name)
            elif info.annotation is int:
                widths[name] = 1
                missing.append(name)
            elif not info.is_required():
                widths[name] = _dice_width(info.get_default(call_default_factory=True))
                if widths[name] is None:
                    return
            else:
                # an embedded result cannot be rebuilt from bare dice
                return

        unknown = [name for name, width in widths.items() if width is None]
        known = sum(width for width in widths.values() if width is not None)
        if len(unknown) > 1 or known > len(dice):
            return
        if unknown:
            if known == len(dice):
                return
            widths[unknown[0]] = len(dice) - known
        elif known != len(dice):
            return

        position = 0
        for name, width in widths.items():
            if name in missing:
                part = dice[position:position + width]
                fields[name] = part if _is_run(cls.model_fields[name].annotation) else part[0]
            position += width

    def __str__(self) -> str:
        return f"{self.label or self.kind}: {self.interpretation or self.raw_total}"
