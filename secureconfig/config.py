"""
Global configuration and environment handling.

This module is responsible for:
- Defining global constants and defaults
- Reading the few environment overrides the tool honours

Nothing in this file should depend on:
- the filesystem
- the config record structure
- the sops subprocess
- CLI arguments
"""

from __future__ import annotations

import os
from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Tool versioning
# ---------------------------------------------------------------------------

TOOL_VERSION: Final[str] = "0.1.0"

# ---------------------------------------------------------------------------
# Formats and files
# ---------------------------------------------------------------------------

FORMAT_JSON: Final[str] = "json"
FORMAT_YAML: Final[str] = "yaml"
SUPPORTED_FORMATS: Final[Tuple[str, ...]] = (FORMAT_JSON, FORMAT_YAML)

DEFAULT_JSON_CONFIG: Final[str] = "config.enc.json"
DEFAULT_YAML_CONFIG: Final[str] = "config.enc.yaml"

# Script that produces the encrypted sample files
SETUP_SCRIPT: Final[str] = "create-sample-configs.sh"

# ---------------------------------------------------------------------------
# Masking
# ---------------------------------------------------------------------------

MASK: Final[str] = "****"
EMPTY_PLACEHOLDER: Final[str] = "[empty]"
MASK_VISIBLE_CHARS: Final[int] = 2

# ---------------------------------------------------------------------------
# Environment variable names
# ---------------------------------------------------------------------------

ENV_SOPS_BINARY: Final[str] = "SOPS_BINARY"
DEFAULT_SOPS_BINARY: Final[str] = "sops"

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_sops_binary() -> str:
    """
    Return the sops executable to invoke.

    Falls back to ``sops`` on PATH when the override is unset or blank.
    """

    return os.getenv(ENV_SOPS_BINARY, "").strip() or DEFAULT_SOPS_BINARY
