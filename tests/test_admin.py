"""Tests for the admin dashboard setup and password check."""

from fastapi import FastAPI

from app.admin import setup_admin
from app.admin.auth import hash_password, verify_password
from app.infra.config import settings


def test_hash_and_verify():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_rejects_empty_and_garbage():
    assert not verify_password("", hash_password("x"))
    assert not verify_password("x", "")
    assert not verify_password("x", "not-a-bcrypt-hash")


def test_admin_disabled_without_password(monkeypatch):
    monkeypatch.setattr(settings, "admin_password_hash", "")
    assert setup_admin(FastAPI()) is None


def test_admin_mounted_with_password(monkeypatch):
    monkeypatch.setattr(settings, "admin_password_hash", hash_password("s3cret"))
    app = FastAPI()
    admin = setup_admin(app)
    assert admin is not None
    assert any(getattr(route, "path", None) == "/admin" for route in app.routes)
