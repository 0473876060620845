"""Result registry: maps a result ``kind`` to the logic that restores it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from app.models.results import RESULT_TYPES, RollResult
from app.models.results.base import base_fields

logger = logging.getLogger("oracle-core.registry")

Decoder = Callable[[Mapping[str, Any], "ResultRegistry"], RollResult]


class RegistryError(RuntimeError):
    """Base class for registry lifecycle errors."""


class DuplicateKindError(RegistryError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Result kind already registered: {kind}")
        self.kind = kind


class RegistryFrozenError(RegistryError):
    pass


class RegistryNotReadyError(RegistryError):
    pass


class ResultRegistry:
    """``kind`` -> decoder lookup with a register-then-freeze lifecycle.

    Registering the same kind twice raises ``DuplicateKindError``; nothing
    is ever overwritten. ``decode`` is only available once the registry is
    frozen and never raises for bad input: unknown kinds and malformed
    documents come back as a generic ``RollResult``.
    """

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def kinds(self) -> list[str]:
        return sorted(self._decoders)

    def __contains__(self, kind: object) -> bool:
        return kind in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)

    def register(self, kind: str, decoder: Decoder) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {kind!r}: registry is frozen")
        if kind in self._decoders:
            raise DuplicateKindError(kind)
        self._decoders[kind] = decoder

    def register_type(self, result_type: type[RollResult]) -> None:
        """Register a result class under the default of its ``kind`` field."""
        kind = result_type.model_fields["kind"].default
        self.register(kind, result_type.decode)

    def freeze(self) -> None:
        self._frozen = True

    def decode(self, document: Mapping[str, Any]) -> RollResult:
        """Restore a result from its document form."""
        if not self._frozen:
            raise RegistryNotReadyError("Registry must be frozen before decoding")

        kind = document.get("kind") if isinstance(document, Mapping) else None
        decoder = self._decoders.get(kind) if isinstance(kind, str) else None
        if decoder is None:
            logger.info("Unknown result kind %r, restoring as generic roll", kind)
            return self._generic(document)

        try:
            return decoder(document, self)
        except (LookupError, TypeError, ValueError):
            logger.warning("Could not decode %r document, restoring as generic roll", kind, exc_info=True)
            return self._generic(document)

    def _generic(self, document: Any) -> RollResult:
        if not isinstance(document, Mapping):
            return RollResult()
        fields = base_fields(document)
        try:
            return RollResult.model_validate(fields)
        except ValidationError:
            logger.warning("Malformed base fields in %r document", fields.get("kind"))
            kind = fields.get("kind")
            return RollResult(kind=kind if isinstance(kind, str) else "roll")


def build_registry() -> ResultRegistry:
    """Register every known result type and freeze."""
    registry = ResultRegistry()
    for result_type in RESULT_TYPES:
        registry.register_type(result_type)
    registry.freeze()
    return registry


registry = build_registry()
