from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Candidate:
    shift: int
    text: str

    # Higher is better
    score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "shift": self.shift,
            "text": self.text,
            "score": self.score,
        }


@dataclass(frozen=True)
class ConfidentResult:
    """The best decryption is clearly ahead of the runner-up."""

    decrypted: str
    shift: int

    @property
    def candidates(self) -> None:
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "decrypted": self.decrypted,
            "shift": self.shift,
        }


@dataclass(frozen=True)
class AmbiguousResult:
    """The top scores are too close to call; the leading candidates are reported alongside."""

    decrypted: str
    shift: int
    candidates: tuple[Candidate, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "decrypted": self.decrypted,
            "shift": self.shift,
            "candidates": [c.to_dict() for c in self.candidates],
        }


AutoDecryptResult = Union[ConfidentResult, AmbiguousResult]
