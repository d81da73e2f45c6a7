from __future__ import annotations

from caesarapi.classical.common import ALPHABET_SIZE, shift_text
from caesarapi.core.results import AmbiguousResult, AutoDecryptResult, Candidate, ConfidentResult
from caesarapi.core.scoring import plaintext_score

ROT13_SHIFT = 13
DEFAULT_ENCODE_SHIFT = 3

# Minimum score lead the best candidate needs over the runner-up to be reported alone.
AMBIGUITY_THRESHOLD = 1.0
TOP_CANDIDATES = 3


def encrypt(text: str, shift: int) -> str:
    return shift_text(text, shift)


def decrypt(text: str, shift: int) -> str:
    # Decrypt means shift backwards
    return shift_text(text, -shift)


def rot13(text: str) -> str:
    return encrypt(text, ROT13_SHIFT)


def brute_force(text: str) -> dict[str, str]:
    """Every possible decryption, keyed "0".."25"; "0" is the input unchanged."""
    return {str(k): decrypt(text, k) for k in range(ALPHABET_SIZE)}


def rank_candidates(text: str) -> list[Candidate]:
    """Score all 26 decryptions and sort best-first; ties keep ascending shift order."""
    out: list[Candidate] = []
    for k in range(ALPHABET_SIZE):
        pt = decrypt(text, k)
        out.append(Candidate(shift=k, text=pt, score=plaintext_score(pt)))
    out.sort(key=lambda c: c.score, reverse=True)
    return out


def auto_decrypt(text: str) -> AutoDecryptResult:
    """
    Guess the shift of a Caesar ciphertext.

    Returns a ConfidentResult when the best candidate leads the runner-up by at least
    AMBIGUITY_THRESHOLD, otherwise an AmbiguousResult carrying the TOP_CANDIDATES best.
    """
    ranked = rank_candidates(text)
    best, second = ranked[0], ranked[1]

    if best.score - second.score < AMBIGUITY_THRESHOLD:
        return AmbiguousResult(
            decrypted=best.text,
            shift=best.shift,
            candidates=tuple(ranked[:TOP_CANDIDATES]),
        )
    return ConfidentResult(decrypted=best.text, shift=best.shift)
