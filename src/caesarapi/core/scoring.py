from __future__ import annotations

from types import MappingProxyType

from .utils import bigrams, letters_only, split_words, strip_non_az

# ----------------------------
# English reference tables
# ----------------------------

# Relative letter frequencies, in percent.
ENGLISH_FREQ = MappingProxyType({
    "e": 12.70, "t": 9.06, "a": 8.17, "o": 7.51, "i": 6.97, "n": 6.75,
    "s": 6.33, "h": 6.09, "r": 5.99, "d": 4.25, "l": 4.03, "c": 2.78,
    "u": 2.76, "m": 2.41, "w": 2.36, "f": 2.23, "g": 2.02, "y": 1.97,
    "p": 1.93, "b": 1.29, "v": 0.98, "k": 0.77, "j": 0.15, "x": 0.15,
    "q": 0.10, "z": 0.07,
})

COMMON_BIGRAMS = frozenset({
    "th", "he", "in", "er", "an", "re", "nd", "on", "en", "at",
    "ed", "es", "or", "te", "is",
})

COMMON_WORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
})

# Per-hit points inside word_score(), then the weights applied when combining.
WORD_HIT_POINTS = 2
BIGRAM_WEIGHT = 0.5
WORD_WEIGHT = 2


# ----------------------------
# Heuristics
# ----------------------------

def frequency_score(text: str) -> float:
    """Mean English frequency (percent) of the letters in text; 0.0 when there are none."""
    letters = letters_only(text)
    if not letters:
        return 0.0
    return sum(ENGLISH_FREQ[ch] for ch in letters) / len(letters)


def bigram_count(text: str) -> int:
    """
    Count adjacent two-character windows of the lowercased text that are common bigrams.
    Windows run over the raw text, so "t h" never matches but "th" inside any token does.
    """
    return sum(1 for bg in bigrams(text.lower()) if bg in COMMON_BIGRAMS)


def word_score(text: str) -> int:
    """WORD_HIT_POINTS for each whitespace-separated token that is a common word."""
    hits = 0
    for token in split_words(text.lower()):
        if strip_non_az(token) in COMMON_WORDS:
            hits += 1
    return WORD_HIT_POINTS * hits


def plaintext_score(text: str) -> float:
    """Higher is more English-like. Whole-word hits dominate, bigrams and letter fit break ties."""
    return frequency_score(text) + BIGRAM_WEIGHT * bigram_count(text) + WORD_WEIGHT * word_score(text)
