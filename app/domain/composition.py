"""Rules for building one result out of others.

Embedding: a parent takes already-built results as values, concatenates
their dice in declaration order, sums their totals and joins their
interpretations. The embedding helpers live with the result models and
are re-exported here. Triggering: a generator inspects its own rolled dice
and only then calls a second generator; deciding never draws randomness.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from app.models.results.base import combined_dice, combined_total, is_doubles, joined_interpretation

__all__ = ["combined_dice", "combined_total", "is_doubles", "joined_interpretation", "trigger"]

T = TypeVar("T")


def trigger(condition: bool, generate: Callable[[], T]) -> T | None:
    """Run ``generate`` only when ``condition`` already holds."""
    if not condition:
        return None
    return generate()
