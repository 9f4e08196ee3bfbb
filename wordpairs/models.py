"""Data models for the word pair generator."""

import re
from typing import Any, Literal, Optional
from pydantic import BaseModel

Difficulty = Literal["easy", "medium", "hard"]
Mode = Literal["random", "category"]

DIFFICULTIES = ("easy", "medium", "hard")

EN_PATTERN = re.compile(r"^[a-z]+$")
RU_PATTERN = re.compile(r"^[а-яё]+$", re.IGNORECASE)


def _clean(value: Any) -> str:
    """Coerce an untrusted JSON value to a trimmed lowercase string."""
    if not value:
        return ""
    return str(value).strip().lower()


class WordPair(BaseModel):
    """One round of the guessing game: a category, a Russian word and its English translation."""

    category: str = ""
    ru: str = ""
    en: str = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "WordPair":
        """Build a pair from a decoded JSON value; absent fields become empty strings."""
        if not isinstance(raw, dict):
            return cls()
        return cls(
            category=_clean(raw.get("category")),
            ru=_clean(raw.get("ru")),
            en=_clean(raw.get("en")),
        )

    def is_well_formed(self) -> bool:
        """Non-empty fields, `en` a-z only and `ru` Cyrillic only.

        The category word count is left to the prompt and the validation
        round trip; a longer category does not make a pair malformed.
        """
        if not (self.category and self.ru and self.en):
            return False
        return bool(EN_PATTERN.match(self.en)) and bool(RU_PATTERN.match(self.ru))


class BatchRequestParams(BaseModel):
    """Parameters of one batch generation request."""

    mode: Mode
    category: Optional[str] = None
    count: int
    difficulty: Difficulty = "medium"

    @classmethod
    def build(cls, category: Optional[str], count: int, difficulty: str) -> "BatchRequestParams":
        category = (category or "").strip() or None
        return cls(
            mode="category" if category else "random",
            category=category,
            count=count,
            difficulty=difficulty,
        )
