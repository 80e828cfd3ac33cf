"""
Chirpy Backend — Chirp Validator Unit Tests
============================================

What:  Length rule and banned-word masking of ChirpValidator.
How:   Pure function tests; no HTTP, no database.

Test Strategy:
    ✅ Length boundary (140 accepted, 141 rejected, code points not bytes)
    ✅ Case-insensitive, substring, whole-token masking
    ✅ Spacing preserved (split on the literal space only)
    ✅ Cleaning is idempotent
"""

import pytest

from chirpy.exceptions import ChirpTooLongError
from chirpy.services.chirp_validator import MASK, MAX_CHIRP_LENGTH, ChirpValidator


class TestChirpLength:
    """Rule 1: more than 140 characters is rejected outright."""

    def setup_method(self):
        self.validator = ChirpValidator()

    def test_empty_body_is_accepted(self):
        assert self.validator.validate("") == ""

    def test_exactly_max_length_is_accepted(self):
        body = "a" * MAX_CHIRP_LENGTH
        assert self.validator.validate(body) == body

    def test_one_over_max_length_is_rejected(self):
        with pytest.raises(ChirpTooLongError, match="Chirp is too long") as exc_info:
            self.validator.validate("a" * (MAX_CHIRP_LENGTH + 1))
        assert exc_info.value.length == MAX_CHIRP_LENGTH + 1
        assert exc_info.value.status_code == 400

    def test_long_body_is_rejected_regardless_of_content(self):
        body = ("kerfuffle " * 20).strip()
        with pytest.raises(ChirpTooLongError):
            self.validator.validate(body)

    def test_length_counts_code_points_not_bytes(self):
        """140 birds are 560 UTF-8 bytes but only 140 characters."""
        body = "🐦" * MAX_CHIRP_LENGTH
        assert self.validator.validate(body) == body

    def test_multibyte_over_limit_is_rejected(self):
        with pytest.raises(ChirpTooLongError):
            self.validator.validate("é" * (MAX_CHIRP_LENGTH + 1))

    def test_custom_limit(self):
        validator = ChirpValidator(max_length=5)
        assert validator.validate("12345") == "12345"
        with pytest.raises(ChirpTooLongError):
            validator.validate("123456")


class TestChirpMasking:
    """Rule 2: tokens containing a banned word become ****."""

    def setup_method(self):
        self.validator = ChirpValidator()

    def test_clean_chirp_is_unchanged(self):
        assert self.validator.validate("hello world") == "hello world"

    def test_banned_word_is_masked(self):
        body = "This is a kerfuffle opinion I need to share."
        assert self.validator.validate(body) == "This is a **** opinion I need to share."

    def test_masking_is_case_insensitive(self):
        assert self.validator.validate("KERFUFFLE is bad") == "**** is bad"
        assert self.validator.validate("I hear Fornax is nice") == "I hear **** is nice"

    def test_substring_masks_whole_token(self):
        assert self.validator.validate("sharbertson here") == "**** here"

    def test_punctuation_stays_in_token(self):
        assert self.validator.validate("what a kerfuffle!") == "what a ****"

    def test_every_banned_word_is_masked(self):
        body = "kerfuffle and sharbert and fornax"
        assert self.validator.validate(body) == "**** and **** and ****"

    def test_consecutive_spaces_are_preserved(self):
        assert self.validator.validate("a  kerfuffle  b") == "a  ****  b"

    def test_other_whitespace_does_not_split_tokens(self):
        """Tab is not a delimiter, so 'x\\tfornax' is one token."""
        assert self.validator.validate("x\tfornax y") == "**** y"

    def test_leading_and_trailing_spaces_survive(self):
        assert self.validator.validate(" fornax ") == " **** "

    @pytest.mark.parametrize(
        "body",
        [
            "hello world",
            "KERFUFFLE is bad",
            "sharbertson here",
            "a  kerfuffle  b",
            "",
            "****",
        ],
    )
    def test_cleaning_is_idempotent(self, body):
        once = self.validator.validate(body)
        assert self.validator.validate(once) == once

    def test_mask_contains_no_banned_word(self):
        assert not self.validator.contains_profanity(MASK)

    def test_contains_profanity(self):
        assert self.validator.contains_profanity("a SharBert b")
        assert not self.validator.contains_profanity("a sharber b")

    def test_custom_word_list_is_case_folded(self):
        validator = ChirpValidator(banned_words={"Gizmo"})
        assert validator.validate("my gizmos") == "my ****"
        assert validator.validate("kerfuffle") == "kerfuffle"
