"""
Loading an encrypted config file into an AppConfig.

Three steps, each with its own failure kind:
1. the file must exist                -> ConfigNotFoundError
2. the decryptor must return bytes    -> DecryptionError
3. the plaintext must match the schema -> ConfigParseError

Nothing is returned unless all three succeed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from .config import SETUP_SCRIPT
from .decrypt import SopsDecryptor
from .errors import ConfigNotFoundError, ConfigParseError, DecryptionError
from .model import AppConfig
from .parser import parse_config


class Decryptor(Protocol):
    def decrypt(self, path: str | Path, fmt: str) -> bytes:
        ...


def ensure_exists(path: Path) -> None:
    """
    Raise unless ``path`` can be opened.

    Only a missing file is a ConfigNotFoundError; a directory or an
    unreadable file can never be decrypted, so it is a DecryptionError.
    """
    try:
        with path.open("rb"):
            pass
    except FileNotFoundError as e:
        raise ConfigNotFoundError(
            f"config file {path} not found - run {SETUP_SCRIPT} first"
        ) from e
    except OSError as e:
        raise DecryptionError(f"failed to decrypt {path}: {e}") from e


def load_config(
    path: str | Path,
    fmt: str,
    decryptor: Optional[Decryptor] = None,
) -> AppConfig:
    """
    Decrypt and parse a config file.

    Args:
        path: encrypted config file
        fmt: format tag, "json" or "yaml"
        decryptor: defaults to a SopsDecryptor

    Raises:
        ConfigNotFoundError: the file does not exist
        DecryptionError: the decryptor failed
        ConfigParseError: the plaintext is malformed

    Returns:
        AppConfig
    """

    path = Path(path)
    ensure_exists(path)

    decryptor = decryptor or SopsDecryptor()
    try:
        cleartext = decryptor.decrypt(path, fmt)
    except DecryptionError as e:
        raise DecryptionError(f"failed to decrypt {path}: {e}") from e
    except OSError as e:
        raise DecryptionError(f"failed to decrypt {path}: {e}") from e

    try:
        return parse_config(cleartext, fmt)
    except ConfigParseError as e:
        raise ConfigParseError(
            f"failed to parse {fmt.upper()} config: {e}"
        ) from e
