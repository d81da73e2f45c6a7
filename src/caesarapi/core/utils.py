from __future__ import annotations

import re

_NOT_LOWER_AZ_RE = re.compile(r"[^a-z]+")
# Tab, LF, VT, FF, CR, space, NBSP, the Unicode space separators, LS, PS and BOM.
# Unlike re's \s, the separators \x1c-\x1f and NEL do not split words while BOM does.
_WHITESPACE_RE = re.compile("[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


def letters_only(s: str) -> str:
    """Lowercase and keep only a-z."""
    return _NOT_LOWER_AZ_RE.sub("", s.lower())


def strip_non_az(token: str) -> str:
    """Drop every character outside a-z without changing case first."""
    return _NOT_LOWER_AZ_RE.sub("", token)


def split_words(s: str) -> list[str]:
    """Split on runs of whitespace; leading/trailing whitespace yields empty tokens."""
    return _WHITESPACE_RE.split(s)


def bigrams(s: str):
    for i in range(len(s) - 1):
        yield s[i:i + 2]
