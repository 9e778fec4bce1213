"""
Human-readable summaries of a loaded config.

Only non-sensitive fields are printed verbatim; anything listed as a
secret goes through mask_secret first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from .masking import mask_secret
from .model import AppConfig


@dataclass(frozen=True)
class SecretField:
    """A secret to show masked, with the label it is printed under."""

    label: str
    getter: Callable[[AppConfig], str]


DATABASE_PASSWORD = SecretField("Database Password", lambda cfg: cfg.database.password)
STRIPE_KEY = SecretField("Stripe API Key", lambda cfg: cfg.api_keys.stripe_key)
AWS_ACCESS_KEY = SecretField("AWS Access Key", lambda cfg: cfg.api_keys.aws_access_key)


def summary_lines(cfg: AppConfig, secrets: Sequence[SecretField]) -> List[str]:
    """Return the summary lines for ``cfg``, masking each requested secret."""
    lines = [
        f"  Application Name: {cfg.application.name}",
        f"  Environment: {cfg.application.environment}",
        f"  Port: {cfg.application.port}",
        f"  Database Host: {cfg.database.host}",
        f"  Database Username: {cfg.database.username}",
    ]
    for secret in secrets:
        lines.append(
            f"  {secret.label}: {mask_secret(secret.getter(cfg))} (loaded successfully)"
        )
    return lines
