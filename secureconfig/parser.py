"""
Deserialization of decrypted plaintext into an AppConfig.

The decoders themselves are opaque: stdlib ``json`` for JSON and
PyYAML's safe loader for YAML. This module only picks one by format
tag and turns decoder failures into ConfigParseError.
"""

from __future__ import annotations

import json

import yaml

from .config import FORMAT_JSON, FORMAT_YAML
from .errors import ConfigParseError
from .model import AppConfig


def parse_config(data: bytes, fmt: str) -> AppConfig:
    """
    Decode plaintext bytes and build the config record.

    Raises:
        ConfigParseError: on syntax errors, schema mismatch or an
            unsupported format tag
    """

    if fmt == FORMAT_JSON:
        try:
            raw = json.loads(data)
        except (ValueError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"invalid JSON: {e}") from e
    elif fmt == FORMAT_YAML:
        try:
            raw = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"invalid YAML: {e}") from e
    else:
        raise ConfigParseError(f"unsupported format: {fmt}")

    return AppConfig.from_dict(raw)
