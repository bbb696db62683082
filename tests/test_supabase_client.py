"""
Tests for the lazily created Supabase client.
"""
import pytest

from app import config
from app.infra.supabase import get_supabase_client, reset_supabase_client


@pytest.fixture(autouse=True)
def fresh_client():
    reset_supabase_client()
    yield
    reset_supabase_client()


def test_missing_credentials_raise(monkeypatch):
    monkeypatch.setattr(config, "SUPABASE_URL", None)
    monkeypatch.setattr(config, "SUPABASE_SERVICE_ROLE_KEY", None)

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        get_supabase_client()


def test_client_is_created_once(monkeypatch):
    created = []

    def fake_create_client(url, key):
        created.append((url, key))
        return object()

    monkeypatch.setattr(config, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(config, "SUPABASE_SERVICE_ROLE_KEY", "service-key")
    monkeypatch.setattr("app.infra.supabase.client.create_client", fake_create_client)

    first = get_supabase_client()
    assert get_supabase_client() is first
    assert created == [("https://example.supabase.co", "service-key")]
