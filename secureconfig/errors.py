"""
Error kinds raised while loading an encrypted config.

Each one points at a different operator action:
- ConfigNotFoundError: run the setup script that produces the file
- DecryptionError: check key access / the file's integrity
- ConfigParseError: fix the decrypted document
"""

from __future__ import annotations


class SecureConfigError(RuntimeError):
    """Base class for all config loading failures."""


class ConfigNotFoundError(SecureConfigError):
    """The encrypted config file does not exist."""


class DecryptionError(SecureConfigError):
    """The file could not be read or decrypted."""


class ConfigParseError(SecureConfigError):
    """The decrypted document is malformed or does not match the schema."""
