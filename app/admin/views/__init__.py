"""Admin model view configurations."""

from app.admin.views.history import HistoryRecordAdmin, RollSessionAdmin

__all__ = [
    "RollSessionAdmin",
    "HistoryRecordAdmin",
]
