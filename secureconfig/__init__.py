"""
secureconfig

Loads SOPS-encrypted JSON/YAML application configs into a typed
record and prints them with secrets masked.
"""

__version__ = "0.1.0"

from .errors import (
    SecureConfigError,
    ConfigNotFoundError,
    DecryptionError,
    ConfigParseError,
)
from .model import AppConfig, ApplicationConfig, DatabaseConfig, APIKeysConfig
from .masking import mask_secret
from .decrypt import SopsDecryptor, decrypt_file
from .parser import parse_config
from .loader import load_config

__all__ = [
    "SecureConfigError",
    "ConfigNotFoundError",
    "DecryptionError",
    "ConfigParseError",
    "AppConfig",
    "ApplicationConfig",
    "DatabaseConfig",
    "APIKeysConfig",
    "mask_secret",
    "SopsDecryptor",
    "decrypt_file",
    "parse_config",
    "load_config",
]
