"""Declension engine exceptions."""
from languages.types import Gender


class UnsupportedWordError(ValueError):
    """No declension group accepts the (word, gender) pair."""

    def __init__(self, word: str, gender: Gender | None = None):
        self.word = word
        self.gender = gender
        detail = f" ({gender.value})" if gender else ""
        super().__init__(f"Cannot determine declension group for '{word}'{detail}")
