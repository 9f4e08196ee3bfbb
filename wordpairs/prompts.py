"""Prompt templates for word pair generation and validation."""

import json
from typing import Any, Iterable, Optional

DIFFICULTY_RULES = {
    "easy": """
- Use common, everyday concrete nouns a beginner would know.
- en: 3-7 letters.
- Prefer words a learner meets in the first months of study.
""".strip(),
    "medium": """
- Use moderately common concrete nouns.
- en: 4-9 letters. Avoid very short words (2-3 letters).
- Avoid extremely common beginner words (cat, dog, apple, red, blue, car, house, water, sun, book).
""".strip(),
    "hard": """
- Use less common but real concrete nouns that an advanced learner would recognise.
- en: 6-12 letters.
- No archaic words, no technical jargon, no rare dialect words.
""".strip(),
}

COMMON_CATEGORIES = (
    "animals, food, colors, fruits, sports, countries, cities, family, "
    "body, school, weather, transport, clothes"
)

PROMPT_WORD = """
Return ONLY valid JSON. No markdown. No extra text.

Task:
Generate 1 vocabulary pair for a guessing game.

Mode: {mode}  // "random" or "category"
Category (if mode=category): {category}
Difficulty: {difficulty}

Difficulty rules:
{difficulty_rules}

Rules:
- category: English, 1-2 words max, lowercase, letters only (no hyphens if possible).
- ru: one Russian noun, lowercase, Cyrillic only, no spaces.
- en: one English word, lowercase a-z only, no spaces.
- Avoid proper nouns, slang, abbreviations.
- ru and en must be correct translations (same meaning).
- Use a concrete noun.

JSON format exactly:
{{
  "category": "....",
  "ru": "....",
  "en": "...."
}}
"""

PROMPT_WORD_BATCH = """
Return ONLY valid JSON. No markdown. No extra text.

Task:
Generate {count} vocabulary pairs for a guessing game.

Mode: {mode}  // "random" or "category"
Category (if mode=category): {category}
Difficulty: {difficulty}

Important:
- In random mode: choose ONE less-common category and use it for ALL items.
- Do NOT use common categories: {common_categories}.

Difficulty rules (for EVERY item):
{difficulty_rules}

Rules (for EVERY item):
- category: English, 1-2 words max, lowercase, letters only.
- ru: one Russian noun, lowercase, Cyrillic only, no spaces.
- en: one English word, lowercase a-z only, no spaces.
- Avoid proper nouns, slang, abbreviations.
- ru and en must be correct translations (same meaning).
- Use a concrete noun.
- All "en" must be unique within the array.

JSON format exactly (array):
[
  {{ "category": "....", "ru": "...", "en": "..." }}
]
"""

PROMPT_CATEGORY_VALIDATION = """
Return ONLY valid JSON. No markdown. No extra text.

Task:
You are checking vocabulary items for a guessing game.
Target category: {category}

For EACH item below answer true only if ALL of these hold:
- the item clearly belongs to the target category;
- ru and en are correct translations of each other (same meaning);
- the item is not overly generic and is not better placed in another category.
Otherwise answer false.

Items (JSON):
{items}

Return a JSON array of booleans with exactly {count} entries, in the same order as the items.
Example: [true, false, true]
"""


def _difficulty_rules(difficulty: Optional[str]) -> str:
    return DIFFICULTY_RULES.get(difficulty or "", DIFFICULTY_RULES["medium"])


def build_word_prompt(mode: str, category: Optional[str], difficulty: str = "medium") -> str:
    """Prompt for a single word pair."""
    return PROMPT_WORD.format(
        mode=mode,
        category=category or "",
        difficulty=difficulty or "",
        difficulty_rules=_difficulty_rules(difficulty),
    ).strip()


def build_word_batch_prompt(mode: str, category: Optional[str], count: int,
                            difficulty: str = "medium") -> str:
    """Prompt for an array of ``count`` word pairs sharing one category."""
    return PROMPT_WORD_BATCH.format(
        mode=mode,
        category=category or "",
        count=count,
        difficulty=difficulty or "",
        common_categories=COMMON_CATEGORIES,
        difficulty_rules=_difficulty_rules(difficulty),
    ).strip()


def _validation_item(item: Any) -> dict:
    if isinstance(item, dict):
        ru, en = item.get("ru"), item.get("en")
    else:
        ru, en = getattr(item, "ru", None), getattr(item, "en", None)
    return {
        "ru": str(ru or "").strip().lower(),
        "en": str(en or "").strip().lower(),
    }


def build_category_validation_prompt(category: Optional[str], items: Iterable[Any]) -> str:
    """Prompt asking for one boolean verdict per candidate, in order.

    ``items`` may be ``WordPair`` instances or plain dicts; only ``ru`` and
    ``en`` are sent to the model.
    """
    normalized = [_validation_item(item) for item in (items or [])]
    return PROMPT_CATEGORY_VALIDATION.format(
        category=category or "",
        items=json.dumps(normalized, ensure_ascii=False, indent=2),
        count=len(normalized),
    ).strip()
