"""Admin views for RollSession and HistoryRecord models."""

from sqladmin import ModelView

from app.models.db_models import HistoryRecord, RollSession


class RollSessionAdmin(ModelView, model=RollSession):
    name = "Session"
    name_plural = "Sessions"
    icon = "fa-solid fa-dice-d20"

    column_list = [
        RollSession.id,
        RollSession.name,
        RollSession.seed,
        RollSession.roll_count,
        RollSession.created_at,
    ]
    column_searchable_list = [RollSession.name, RollSession.id]
    column_sortable_list = [RollSession.name, RollSession.created_at, RollSession.roll_count]
    column_default_sort = ("created_at", True)

    # seed and roll_count drive replay; only the name is editable
    form_columns = ["name"]
    can_create = False

    can_export = True
    export_types = ["csv", "json"]


class HistoryRecordAdmin(ModelView, model=HistoryRecord):
    name = "History Record"
    name_plural = "History Records"
    icon = "fa-solid fa-scroll"

    column_list = [
        HistoryRecord.session,
        HistoryRecord.seq,
        HistoryRecord.kind,
        HistoryRecord.category,
        HistoryRecord.label,
        HistoryRecord.created_at,
    ]
    column_searchable_list = [HistoryRecord.kind, HistoryRecord.label, HistoryRecord.session_id]
    column_sortable_list = [HistoryRecord.seq, HistoryRecord.kind, HistoryRecord.created_at]
    column_default_sort = [("session_id", False), ("seq", False)]

    column_details_list = [
        HistoryRecord.id,
        HistoryRecord.session,
        HistoryRecord.seq,
        HistoryRecord.kind,
        HistoryRecord.category,
        HistoryRecord.label,
        HistoryRecord.document_json,
        HistoryRecord.created_at,
    ]

    can_create = False
    can_edit = False

    can_export = True
    export_types = ["csv", "json"]
