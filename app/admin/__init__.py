"""Admin dashboard: setup and configuration for sqladmin."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from sqladmin import Admin

from app.admin.auth import AdminAuth
from app.admin.views import HistoryRecordAdmin, RollSessionAdmin
from app.infra.config import settings
from app.infra.db import engine

logger = logging.getLogger("oracle-core")


def setup_admin(app: FastAPI) -> Admin | None:
    """Mount the sqladmin dashboard, or skip it when no admin password is configured."""
    if not settings.admin_password_hash:
        logger.info("ADMIN_PASSWORD_HASH not set, admin dashboard disabled")
        return None

    admin = Admin(
        app=app,
        engine=engine,
        authentication_backend=AdminAuth(secret_key=settings.admin_secret_key),
        base_url="/admin",
        title="Oracle-Core Admin",
    )
    admin.add_view(RollSessionAdmin)
    admin.add_view(HistoryRecordAdmin)
    return admin
