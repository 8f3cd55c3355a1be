"""Tests for settings."""

import pytest

from hawkbewit.bewit import Algorithm
from hawkbewit.common.errors import CredentialsError
from hawkbewit.common.settings import Settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HAWKBEWIT_BEWIT_PARAM", raising=False)
        monkeypatch.delenv("HAWKBEWIT_DEFAULT_TTL_SECONDS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.bewit_param == "bewit"
        assert settings.default_ttl_seconds == 600

    def test_credentials_from_env(self, monkeypatch):
        monkeypatch.setenv("HAWKBEWIT_KEY_ID", "K1")
        monkeypatch.setenv("HAWKBEWIT_KEY", "secret")
        monkeypatch.setenv("HAWKBEWIT_ALGORITHM", "SHA1")

        creds = Settings(_env_file=None).credentials()

        assert creds.key_id == "K1"
        assert creds.key == "secret"
        assert creds.algorithm is Algorithm.SHA1

    def test_key_not_in_repr(self, settings):
        assert "4fDE242C" not in repr(settings)

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.delenv("HAWKBEWIT_KEY_ID", raising=False)
        monkeypatch.delenv("HAWKBEWIT_KEY", raising=False)

        with pytest.raises(CredentialsError):
            Settings(_env_file=None).credentials()

    def test_explicit_credentials_override(self, monkeypatch):
        """Arguments take precedence over configured values."""
        monkeypatch.setenv("HAWKBEWIT_KEY_ID", "K1")
        monkeypatch.setenv("HAWKBEWIT_KEY", "secret")

        creds = Settings(_env_file=None).credentials("K2", "other", "SHA1")

        assert creds.key_id == "K2"
        assert creds.key == "other"
        assert creds.algorithm is Algorithm.SHA1

    def test_key_without_key_id(self, monkeypatch):
        monkeypatch.delenv("HAWKBEWIT_KEY_ID", raising=False)
        monkeypatch.delenv("HAWKBEWIT_KEY", raising=False)

        with pytest.raises(CredentialsError):
            Settings(_env_file=None).credentials(key="secret")
