from __future__ import annotations

from .caesar import auto_decrypt, brute_force, decrypt, encrypt, rot13
from .common import shift_char, shift_text

__all__ = [
    "auto_decrypt",
    "brute_force",
    "decrypt",
    "encrypt",
    "rot13",
    "shift_char",
    "shift_text",
]
