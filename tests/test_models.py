"""Tests for data models."""

import pytest
from pydantic import ValidationError

from wordpairs.models import BatchRequestParams, WordPair


def test_word_pair_defaults():
    """Test WordPair default values."""
    pair = WordPair()

    assert pair.category == ""
    assert pair.ru == ""
    assert pair.en == ""


def test_from_raw_trims_and_lowercases():
    pair = WordPair.from_raw({"category": " Kitchen Tools ", "ru": "  Сковорода", "en": "SKILLET "})

    assert pair.category == "kitchen tools"
    assert pair.ru == "сковорода"
    assert pair.en == "skillet"


def test_from_raw_missing_and_null_fields():
    pair = WordPair.from_raw({"ru": None, "en": "anchor"})

    assert pair.category == ""
    assert pair.ru == ""
    assert pair.en == "anchor"


@pytest.mark.parametrize("raw", [None, "hammer", 42, ["tools", "молоток", "hammer"]])
def test_from_raw_non_object(raw):
    assert WordPair.from_raw(raw) == WordPair()


def test_from_raw_stringifies_scalars():
    pair = WordPair.from_raw({"category": "tools", "ru": "пила", "en": 7})

    assert pair.en == "7"
    assert not pair.is_well_formed()


def test_is_well_formed():
    assert WordPair(category="tools", ru="молоток", en="hammer").is_well_formed()
    assert WordPair(category="tools", ru="ЁЛКА", en="fir").is_well_formed()


@pytest.mark.parametrize("pair", [
    WordPair(category="", ru="пила", en="saw"),
    WordPair(category="tools", ru="", en="saw"),
    WordPair(category="tools", ru="пила", en=""),
    WordPair(category="tools", ru="пила", en="hand saw"),
    WordPair(category="tools", ru="пила", en="saw2"),
    WordPair(category="tools", ru="пила", en="saw-blade"),
    WordPair(category="tools", ru="pila", en="saw"),
    WordPair(category="tools", ru="пила-ножовка", en="saw"),
])
def test_is_not_well_formed(pair):
    assert not pair.is_well_formed()


def test_batch_params_mode_random_without_category():
    params = BatchRequestParams.build(None, 20, "medium")

    assert params.mode == "random"
    assert params.category is None
    assert params.count == 20


def test_batch_params_blank_category_is_random():
    assert BatchRequestParams.build("   ", 5, "easy").mode == "random"


def test_batch_params_mode_category():
    params = BatchRequestParams.build(" tools ", 3, "hard")

    assert params.mode == "category"
    assert params.category == "tools"
    assert params.difficulty == "hard"


def test_batch_params_rejects_unknown_difficulty():
    with pytest.raises(ValidationError):
        BatchRequestParams.build("tools", 3, "extreme")


def test_from_raw_falsy_scalars_are_empty():
    pair = WordPair.from_raw({"category": False, "ru": 0, "en": "saw"})

    assert pair.category == ""
    assert pair.ru == ""
    assert pair.en == "saw"


def test_from_raw_keeps_truthy_zero_string():
    assert WordPair.from_raw({"en": "0"}).en == "0"


def test_long_category_is_still_well_formed():
    pair = WordPair(category="small hand tools", ru="пила", en="saw")

    assert pair.is_well_formed()
