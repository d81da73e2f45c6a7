from .results import AmbiguousResult, AutoDecryptResult, Candidate, ConfidentResult
from .scoring import bigram_count, frequency_score, plaintext_score, word_score

__all__ = [
    "AmbiguousResult",
    "AutoDecryptResult",
    "Candidate",
    "ConfidentResult",
    "bigram_count",
    "frequency_score",
    "plaintext_score",
    "word_score",
]
