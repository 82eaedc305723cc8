"""
Cooking tip composition.

Order: cuisine tip, skill tip, ingredient tips (any number may fire), duration
tip, meal-type tip (known meal types only), then the two closing tips.
"""
from typing import List

from SmartRecipe.generator import templates
from SmartRecipe.generator.features import IngredientFeatures
from SmartRecipe.generator.instructions import pace_for
from SmartRecipe.generator.models import GenerationRequest
from SmartRecipe.generator.variation import select_variation


def cuisine_tip(request: GenerationRequest, rng) -> str:
    cuisine = request.cuisine_key
    if cuisine in templates.CUISINE_TIPS:
        return select_variation(f"{cuisine}_tips", rng)
    return templates.GENERIC_CUISINE_TIP


def skill_tip(request: GenerationRequest, rng) -> str:
    complexity = request.complexity_key
    if complexity not in ("beginner", "intermediate"):
        complexity = "advanced"
    return select_variation(f"{complexity}_tips", rng)


def ingredient_tips(features: IngredientFeatures) -> List[str]:
    """Independent checks; several tips can apply to one recipe."""
    has = features.has
    tips = []
    if has("egg"):
        tips.append(templates.EGG_TIP_WITH_MILK if has("milk") else templates.EGG_TIP)
    if has("tomato"):
        tips.append(templates.TOMATO_TIP_WITH_EGG if has("egg") else templates.TOMATO_TIP)
    if has("milk"):
        tips.append(templates.MILK_TIP_WITH_EGG if has("egg") else templates.MILK_TIP)
    if has("potato"):
        tips.append(templates.POTATO_TIP)
    if has("onion"):
        tips.append(templates.ONION_TIP)
    return tips


def compose_tips(request: GenerationRequest, features: IngredientFeatures, rng) -> List[str]:
    tips = [cuisine_tip(request, rng), skill_tip(request, rng)]
    tips.extend(ingredient_tips(features))
    tips.append(select_variation(f"{pace_for(request.cooking_time)}_duration_tips", rng))
    meal_tip = templates.MEAL_TYPE_TIPS.get(request.meal_type)
    if meal_tip:
        tips.append(meal_tip)
    tips.extend(templates.CLOSING_TIPS)
    return tips
