"""
Chirpy Backend — Chirp Validator
=================================

What:  Decides whether a chirp is acceptable and produces its cleaned form.
Who:   Called by POST /api/validate_chirp.
How:   Two rules, applied in order:
       1. Length: more than MAX_CHIRP_LENGTH characters → ChirpTooLongError.
       2. Masking: every space-delimited token whose lower-cased text
          contains a banned word is replaced wholesale by MASK.

Length is measured in Unicode code points (len(str)), so "é" and "🐦" each
count as one character. Counting UTF-8 bytes instead would reject
multi-byte chirps well below 140 visible characters.

Masking over-matches on purpose: "sharbertson" contains "sharbert" and is
masked entirely. Tokens are split on the literal space only, so runs of
spaces survive as empty tokens and the output keeps the input's spacing.
Punctuation is part of the token ("kerfuffle!" → "****").

The validator is pure and CPU-bound; it never awaits and holds no state.
"""

import logging
from typing import FrozenSet, Iterable

from chirpy.exceptions import ChirpTooLongError

logger = logging.getLogger(__name__)

MAX_CHIRP_LENGTH = 140

BANNED_WORDS: FrozenSet[str] = frozenset({"kerfuffle", "sharbert", "fornax"})

MASK = "****"


class ChirpValidator:
    """
    Stateless chirp validation.

    A single module-level instance is shared by all requests; an instance
    with a different word list or limit can be built for tests.
    """

    def __init__(
        self,
        banned_words: Iterable[str] = BANNED_WORDS,
        max_length: int = MAX_CHIRP_LENGTH,
    ):
        # Comparison is case-insensitive, so store the lower-cased form once
        self.banned_words = frozenset(word.lower() for word in banned_words)
        self.max_length = max_length

    def validate(self, body: str) -> str:
        """
        Validate a chirp body and return its cleaned text.

        Args:
            body: Arbitrary text, possibly empty.

        Returns:
            The cleaned body. Equal to `body` when nothing was masked.

        Raises:
            ChirpTooLongError: len(body) exceeds the maximum length.
        """
        if len(body) > self.max_length:
            logger.info("Rejected chirp: %d characters (max %d)", len(body), self.max_length)
            raise ChirpTooLongError(length=len(body), max_length=self.max_length)

        if not self.contains_profanity(body):
            return body
        return self.clean_body(body)

    def contains_profanity(self, body: str) -> bool:
        """Quick check: does any banned word occur anywhere in the body?"""
        lowered = body.lower()
        return any(word in lowered for word in self.banned_words)

    def clean_body(self, body: str) -> str:
        """Replace every token containing a banned word with MASK."""
        tokens = body.split(" ")
        cleaned = [MASK if self._is_banned(token) else token for token in tokens]
        return " ".join(cleaned)

    def _is_banned(self, token: str) -> bool:
        lowered = token.lower()
        return any(word in lowered for word in self.banned_words)


chirp_validator = ChirpValidator()
