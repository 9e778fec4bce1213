"""
Typed representation of the decrypted application config.

This module answers one question:
    "What does a fully loaded config look like?"

Responsibilities:
- Define the immutable config record
- Validate a decoded mapping against the expected schema
- Name the offending key when validation fails

This module does NOT:
- Read files
- Decrypt anything
- Choose between JSON and YAML
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from .errors import ConfigParseError


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ApplicationConfig:
    """Identity of the running service."""

    name: str
    environment: str
    port: int


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings for the primary database."""

    host: str
    port: int
    username: str
    password: str
    database: str


@dataclass(frozen=True)
class APIKeysConfig:
    """Credentials for third-party providers."""

    stripe_key: str
    sendgrid_key: str
    aws_access_key: str


@dataclass(frozen=True)
class AppConfig:
    """A fully loaded application config."""

    application: ApplicationConfig
    database: DatabaseConfig
    api_keys: APIKeysConfig

    # ------------------------------------------------------------------
    # Loading API
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Build a config record from a decoded document.

        Args:
            data: mapping produced by the JSON or YAML decoder

        Raises:
            ConfigParseError: if a group or field is missing or mistyped

        Returns:
            AppConfig
        """

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"expected a mapping at top level, got {type(data).__name__}"
            )

        return cls(
            application=cls._parse_application(_group(data, "application")),
            database=cls._parse_database(_group(data, "database")),
            api_keys=cls._parse_api_keys(_group(data, "api_keys")),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_application(data: Dict[str, Any]) -> ApplicationConfig:
        return ApplicationConfig(
            name=_text(data, "application", "name"),
            environment=_text(data, "application", "environment"),
            port=_integer(data, "application", "port"),
        )

    @staticmethod
    def _parse_database(data: Dict[str, Any]) -> DatabaseConfig:
        return DatabaseConfig(
            host=_text(data, "database", "host"),
            port=_integer(data, "database", "port"),
            username=_text(data, "database", "username"),
            password=_text(data, "database", "password"),
            database=_text(data, "database", "database"),
        )

    @staticmethod
    def _parse_api_keys(data: Dict[str, Any]) -> APIKeysConfig:
        return APIKeysConfig(
            stripe_key=_text(data, "api_keys", "stripe_key"),
            sendgrid_key=_text(data, "api_keys", "sendgrid_key"),
            aws_access_key=_text(data, "api_keys", "aws_access_key"),
        )


# ---------------------------------------------------------------------------
# Field accessors
# ---------------------------------------------------------------------------


def _group(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    if name not in data:
        raise ConfigParseError(f"missing required section '{name}'")

    value = data[name]
    if not isinstance(value, dict):
        raise ConfigParseError(
            f"section '{name}' must be a mapping, got {type(value).__name__}"
        )
    return value


def _field(data: Dict[str, Any], group: str, key: str) -> Any:
    if key not in data:
        raise ConfigParseError(f"missing required key '{group}.{key}'")
    return data[key]


def _text(data: Dict[str, Any], group: str, key: str) -> str:
    value = _field(data, group, key)
    # unquoted YAML scalars such as `password: 123456` or `name: 2024-01-01`
    if isinstance(value, (int, float, date)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ConfigParseError(
            f"'{group}.{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _integer(data: Dict[str, Any], group: str, key: str) -> int:
    value = _field(data, group, key)
    # bool is an int subclass; `port: true` is a typo, not a port
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigParseError(
            f"'{group}.{key}' must be an integer, got {type(value).__name__}"
        )
    return value
