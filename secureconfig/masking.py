"""Display-safe rendering of secret values."""

from __future__ import annotations

from typing import Optional

from .config import EMPTY_PLACEHOLDER, MASK, MASK_VISIBLE_CHARS


def mask_secret(secret: Optional[str]) -> str:
    """
    Return a masked version of a secret for display purposes.

    Short secrets collapse to a fixed mask so their length is not revealed;
    longer ones keep two characters on each end so an operator can tell
    which secret was loaded.
    """

    if not secret:
        return EMPTY_PLACEHOLDER
    if len(secret) <= len(MASK):
        return MASK
    return secret[:MASK_VISIBLE_CHARS] + MASK + secret[-MASK_VISIBLE_CHARS:]
