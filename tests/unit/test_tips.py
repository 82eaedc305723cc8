"""Unit tests for tip composition."""

import random

import pytest

from SmartRecipe.generator import templates
from SmartRecipe.generator.features import extract_features
from SmartRecipe.generator.models import GenerationRequest
from SmartRecipe.generator.tips import compose_tips


def make_request(ingredients="eggs, tomatoes", meal_type="BREAKFAST", cuisine="Italian",
                 cooking_time="UNDER_30", complexity="beginner"):
    return GenerationRequest(
        ingredients=ingredients,
        meal_type=meal_type,
        cuisine=cuisine,
        cooking_time=cooking_time,
        complexity=complexity,
    )


def tips_for(request, rng):
    return compose_tips(request, extract_features(request.ingredients), rng)


class TestComposeTips:

    def test_egg_tomato_breakfast_tips(self, low_rng):
        tips = tips_for(make_request(), low_rng)

        assert tips == [
            templates.CUISINE_TIPS["italian"][0],
            templates.SKILL_TIPS["beginner"][0],
            templates.EGG_TIP,
            templates.TOMATO_TIP_WITH_EGG,
            templates.DURATION_TIPS["quick"][0],
            templates.MEAL_TYPE_TIPS["BREAKFAST"],
            *templates.CLOSING_TIPS,
        ]

    def test_tomato_without_egg(self, low_rng):
        tips = tips_for(make_request("tomato, onion"), low_rng)

        assert tips[2:4] == [templates.TOMATO_TIP, templates.ONION_TIP]
        assert templates.TOMATO_TIP_WITH_EGG not in tips

    def test_milk_without_egg(self, low_rng):
        tips = tips_for(make_request("milk"), low_rng)

        assert tips[2] == templates.MILK_TIP
        assert templates.MILK_TIP_WITH_EGG not in tips
        assert templates.EGG_TIP_WITH_MILK not in tips

    def test_all_ingredient_tips_can_fire_together(self, low_rng):
        tips = tips_for(make_request("eggs, milk, tomato, potato, onion"), low_rng)

        assert tips[2:7] == [templates.EGG_TIP_WITH_MILK, templates.TOMATO_TIP_WITH_EGG,
                             templates.MILK_TIP_WITH_EGG, templates.POTATO_TIP, templates.ONION_TIP]
        assert len(tips) == 11

    def test_unknown_cuisine_and_level(self, low_rng):
        tips = tips_for(make_request("tofu", cuisine="Thai", complexity="expert", meal_type="BRUNCH"), low_rng)

        assert tips[0] == templates.GENERIC_CUISINE_TIP
        assert tips[1] == templates.SKILL_TIPS["advanced"][0]
        assert not any(tip in templates.MEAL_TYPE_TIPS.values() for tip in tips)
        assert tips[-2:] == list(templates.CLOSING_TIPS)
        assert len(tips) == 5
        assert low_rng.draws == [3, 3]

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("ingredients,meal_type", [
        ("tofu", "BRUNCH"),
        ("rice, carrot", "LUNCH"),
        ("eggs, milk", "SNACK"),
        ("eggs, milk, tomato, potato, onion", "DINNER"),
    ])
    def test_tip_count_stays_in_range(self, seed, ingredients, meal_type):
        tips = tips_for(make_request(ingredients, meal_type), random.Random(seed))

        assert 5 <= len(tips) <= 11
        assert tips[-2:] == list(templates.CLOSING_TIPS)
