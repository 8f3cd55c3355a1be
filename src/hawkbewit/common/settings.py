"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from hawkbewit.bewit.types import Algorithm, HawkCredentials
from hawkbewit.common.errors import CredentialsError


class Settings(BaseSettings):
    """Settings for the CLI and HTTP integration, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HAWKBEWIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level name",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output",
    )

    # Credentials
    key_id: str | None = Field(
        default=None,
        description="Key identifier embedded in generated bewits",
    )
    key: SecretStr | None = Field(
        default=None,
        description="Shared secret for the key id",
    )
    algorithm: Literal["SHA1", "SHA256"] = Field(
        default="SHA256",
        description="HMAC algorithm",
    )

    # Bewits
    default_ttl_seconds: int = Field(
        default=600,
        description="Lifetime of generated bewits when no expiry is given",
    )
    bewit_param: str = Field(
        default="bewit",
        description="Query parameter carrying the bewit",
    )
    auth_exempt_paths: tuple[str, ...] = Field(
        default=("/health", "/metrics"),
        description="Paths exempt from bewit auth",
    )

    def credentials(
        self,
        key_id: str | None = None,
        key: str | None = None,
        algorithm: str | None = None,
    ) -> HawkCredentials:
        """
        Build credentials from the configured key id, key and algorithm.

        Explicit arguments take precedence over configured values.

        Raises:
            CredentialsError: If no key id or key is available
        """
        key_id = key_id or self.key_id
        if key is None and self.key is not None:
            key = self.key.get_secret_value()
        if not key_id or not key:
            raise CredentialsError("Both HAWKBEWIT_KEY_ID and HAWKBEWIT_KEY must be set")
        return HawkCredentials(
            key_id=key_id,
            key=key,
            algorithm=Algorithm(algorithm or self.algorithm),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
