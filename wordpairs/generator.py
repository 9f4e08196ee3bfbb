"""Word pair generation: single pairs and validated batches."""

from typing import Any, List, Optional

import structlog

from . import prompts
from .config import (
    BATCH_TOKENS_BASE,
    BATCH_TOKENS_PER_ITEM,
    DEFAULT_BATCH_SIZE,
    MODEL_NAME,
    VALIDATION_MAX_TOKENS,
    WORD_MAX_TOKENS,
)
from .errors import InvalidBatchShapeError
from .gemini_client import Transport, call_model_json
from .models import DIFFICULTIES, BatchRequestParams, WordPair

log = structlog.get_logger()


def batch_max_tokens(count: int) -> int:
    return BATCH_TOKENS_BASE + BATCH_TOKENS_PER_ITEM * count


def sanitize_batch(items: List[Any]) -> List[WordPair]:
    """Coerce raw items, drop malformed ones and deduplicate by ``en`` (first wins)."""
    seen = set()
    result = []
    for raw in items:
        pair = WordPair.from_raw(raw)
        if not pair.is_well_formed():
            continue
        if pair.en in seen:
            continue
        seen.add(pair.en)
        result.append(pair)
    return result


def normalize_verdict(verdict: Any, count: int) -> List[bool]:
    """Align a validation answer with ``count`` candidates.

    Anything other than a list rejects every candidate. Only the literal
    ``true`` keeps an item; short answers are padded with ``False``.
    """
    if not isinstance(verdict, list):
        return [False] * count
    flags = [v is True for v in verdict[:count]]
    return flags + [False] * (count - len(flags))


def _check_difficulty(difficulty: str):
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unsupported difficulty {difficulty!r}")


class WordGenerator:
    """Generates word pairs through the Gemini API."""

    def __init__(self, api_key: str, model: str = MODEL_NAME,
                 transport: Optional[Transport] = None):
        self.api_key = api_key
        self.model = model
        self.transport = transport

    async def _call_json(self, prompt: str, max_output_tokens: int) -> Any:
        return await call_model_json(
            self.api_key,
            prompt,
            max_output_tokens=max_output_tokens,
            model=self.model,
            transport=self.transport,
        )

    async def generate_word_pair(self, category: Optional[str] = None,
                                 difficulty: str = "medium") -> WordPair:
        """Generate one pair. The model's answer is returned without format checks."""
        _check_difficulty(difficulty)
        category = (category or "").strip() or None
        mode = "category" if category else "random"
        prompt = prompts.build_word_prompt(mode, category, difficulty)

        log.info("Generating word pair", mode=mode, category=category, difficulty=difficulty)
        obj = await self._call_json(prompt, WORD_MAX_TOKENS)
        pair = WordPair.from_raw(obj)
        log.info("Word pair generated", category=pair.category, en=pair.en)
        return pair

    async def generate_word_batch(self, category: Optional[str] = None,
                                  count: int = DEFAULT_BATCH_SIZE,
                                  difficulty: str = "medium") -> List[WordPair]:
        """Generate ``count`` pairs, filter them and validate them against their category."""
        _check_difficulty(difficulty)
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        params = BatchRequestParams.build(category, count, difficulty)
        prompt = prompts.build_word_batch_prompt(
            params.mode, params.category, params.count, params.difficulty
        )

        log.info("Generating word batch", mode=params.mode, category=params.category,
                 count=params.count, difficulty=params.difficulty)
        response = await self._call_json(prompt, batch_max_tokens(params.count))
        if not isinstance(response, list):
            log.error("Batch response is not an array", type=type(response).__name__)
            raise InvalidBatchShapeError(
                f"Expected a JSON array, got {type(response).__name__}"
            )

        candidates = sanitize_batch(response)
        log.info("Batch sanitized", received=len(response), kept=len(candidates))

        target = (params.category or "").lower()
        if not target and candidates:
            target = candidates[0].category

        if not target:
            log.info("No target category, skipping validation", count=len(candidates))
            return candidates
        if not candidates:
            return []

        return await self._validate(target, candidates)

    async def _validate(self, category: str, candidates: List[WordPair]) -> List[WordPair]:
        prompt = prompts.build_category_validation_prompt(category, candidates)
        answer = await self._call_json(prompt, VALIDATION_MAX_TOKENS)
        if not isinstance(answer, list):
            log.warning("Validation answer is not an array, rejecting all candidates",
                        category=category, count=len(candidates))

        verdict = normalize_verdict(answer, len(candidates))
        kept = [pair for pair, keep in zip(candidates, verdict) if keep]
        log.info("Batch validated", category=category, candidates=len(candidates),
                 kept=len(kept))
        return kept


async def generate_word_pair(api_key: str, category: Optional[str] = None,
                             difficulty: str = "medium", *, model: str = MODEL_NAME,
                             transport: Optional[Transport] = None) -> WordPair:
    """Convenience function to generate a single word pair."""
    generator = WordGenerator(api_key, model=model, transport=transport)
    return await generator.generate_word_pair(category=category, difficulty=difficulty)


async def generate_word_batch(api_key: str, category: Optional[str] = None,
                              count: int = DEFAULT_BATCH_SIZE, difficulty: str = "medium",
                              *, model: str = MODEL_NAME,
                              transport: Optional[Transport] = None) -> List[WordPair]:
    """Convenience function to generate a validated batch of word pairs."""
    generator = WordGenerator(api_key, model=model, transport=transport)
    return await generator.generate_word_batch(
        category=category, count=count, difficulty=difficulty
    )
