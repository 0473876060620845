"""Admin authentication backend for sqladmin."""

from __future__ import annotations

import bcrypt
from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from app.infra.config import settings


def hash_password(password: str) -> str:
    """Hash a password using bcrypt, for the ADMIN_PASSWORD_HASH setting."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # not a bcrypt hash
        return False


class AdminAuth(AuthenticationBackend):
    """Single shared admin password, remembered in the signed session cookie."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        password = str(form.get("password", ""))
        if not verify_password(password, settings.admin_password_hash):
            return False
        request.session["admin"] = True
        return True

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin"))
