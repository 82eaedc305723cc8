"""Unit tests for ingredient parsing and template pool selection."""

import random

import pytest

from SmartRecipe.generator.features import contains_keyword, extract_features
from SmartRecipe.generator.templates import TEMPLATE_POOLS
from SmartRecipe.generator.variation import select_variation


class TestExtractFeatures:

    def test_tokens_are_trimmed_and_keep_case(self):
        features = extract_features(" Eggs ,Tomatoes  , basil")

        assert features.tokens == ("Eggs", "Tomatoes", "basil")
        assert features.normalized == ("eggs", "tomatoes", "basil")
        assert features.first == "eggs"
        assert features.count == 3

    def test_flags_match_substrings_of_raw_text(self):
        features = extract_features("Chicken breast, brown rice, spinach")

        assert features.flags == {"chicken", "rice", "spinach"}

    def test_eggplant_sets_egg_flag(self):
        assert extract_features("eggplant").has("egg")

    def test_trailing_comma_keeps_empty_token(self):
        features = extract_features("eggs, ")

        assert features.tokens == ("eggs", "")
        assert features.count == 2

    def test_none_is_rejected(self):
        with pytest.raises(ValueError):
            extract_features(None)

    def test_contains_keyword_ignores_case(self):
        assert contains_keyword("Fresh SALMON fillet", "salmon")
        assert not contains_keyword("tofu", "fish")


class TestSelectVariation:

    def test_pick_follows_random_index(self, high_rng):
        pool = TEMPLATE_POOLS["italian_cooking"]

        assert select_variation("italian_cooking", high_rng) == pool[-1]
        assert high_rng.draws == [len(pool)]

    def test_same_seed_same_phrase(self):
        first = select_variation("slow_pacing", random.Random(3))
        second = select_variation("slow_pacing", random.Random(3))

        assert first == second
        assert first in TEMPLATE_POOLS["slow_pacing"]

    def test_unknown_pool_raises_key_error(self, low_rng):
        with pytest.raises(KeyError, match="Unknown template pool: thai_cooking"):
            select_variation("thai_cooking", low_rng)
        assert low_rng.draws == []

    def test_every_pool_is_non_empty(self):
        assert TEMPLATE_POOLS
        for name, phrases in TEMPLATE_POOLS.items():
            assert phrases, name
