"""
Decryption of SOPS-encrypted files.

This module hands the file to the ``sops`` executable and returns the
plaintext it prints. Key lookup (age, PGP, cloud KMS), envelope
unwrapping and MAC verification all happen inside sops; nothing here
looks at the ciphertext.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional

from .config import SUPPORTED_FORMATS, get_sops_binary
from .errors import DecryptionError


class SopsDecryptor:
    """Decrypts files by running the sops executable."""

    def __init__(
        self,
        binary: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        self.binary = binary or get_sops_binary()
        # overrides on top of the inherited environment
        self.env = {**os.environ, **env} if env is not None else None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def command(self, path: str | Path, fmt: str) -> List[str]:
        """Return the sops invocation used to decrypt ``path``."""
        return [
            self.binary,
            "--decrypt",
            "--input-type", fmt,
            "--output-type", fmt,
            str(path),
        ]

    def decrypt(self, path: str | Path, fmt: str) -> bytes:
        """
        Decrypt a file and return its cleartext.

        Raises:
            DecryptionError: if the format is unsupported, sops is not
                installed, or sops exits non-zero
        """

        if fmt not in SUPPORTED_FORMATS:
            raise DecryptionError(f"unsupported format: {fmt}")

        try:
            result = subprocess.run(
                self.command(path, fmt),
                capture_output=True,
                check=False,
                env=self.env,
            )
        except FileNotFoundError as e:
            raise DecryptionError(
                f"sops executable not found: {self.binary}"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise DecryptionError(
                stderr or f"sops exited with status {result.returncode}"
            )

        return result.stdout


def decrypt_file(path: str | Path, fmt: str) -> bytes:
    """Decrypt ``path`` with the default sops binary."""
    return SopsDecryptor().decrypt(path, fmt)
