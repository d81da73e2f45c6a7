from __future__ import annotations

A_ORD = ord("A")
LOWER_A_ORD = ord("a")
ALPHABET_SIZE = 26


def normalize_shift(shift: int) -> int:
    """Fold any integer shift into 0..25 (-3 -> 23, 27 -> 1)."""
    # Python's % already returns a non-negative remainder for a positive modulus.
    return shift % ALPHABET_SIZE


def is_upper_az(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_lower_az(ch: str) -> bool:
    return "a" <= ch <= "z"


def shift_char(ch: str, shift: int) -> str:
    """Rotate one Latin letter by 'shift' (can be negative); anything else is returned as-is."""
    k = normalize_shift(shift)
    if is_upper_az(ch):
        return chr(A_ORD + (ord(ch) - A_ORD + k) % ALPHABET_SIZE)
    if is_lower_az(ch):
        return chr(LOWER_A_ORD + (ord(ch) - LOWER_A_ORD + k) % ALPHABET_SIZE)
    return ch


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    k = normalize_shift(shift)
    return "".join(shift_char(ch, k) for ch in text)
