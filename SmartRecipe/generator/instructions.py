"""
Instruction step composition.

Steps are appended in a fixed order: prep, cooking method, main cooking,
seasoning, pacing, serving. Main cooking yields one or two steps, so a recipe
always has six or seven steps.
"""
from typing import Callable, List, Sequence, Tuple

from SmartRecipe.generator import templates
from SmartRecipe.generator.features import IngredientFeatures
from SmartRecipe.generator.models import GenerationRequest
from SmartRecipe.generator.variation import select_variation

METHOD_CUISINES = ("italian", "asian", "mexican", "indian")
SEASONING_CUISINES = ("italian", "mexican", "asian", "indian", "french")

# First match wins; evaluated only when more than one ingredient is given.
PAIR_RULES: Sequence[Tuple[Callable[[IngredientFeatures], bool], Tuple[str, ...]]] = (
    (lambda f: f.has("egg") and f.has("tomato") and not f.has("milk"), templates.EGG_TOMATO_STEPS),
    (lambda f: f.has("milk") and f.has("egg"), templates.MILK_EGG_STEPS),
    (lambda f: f.has("potato") and f.has("onion"), templates.POTATO_ONION_STEPS),
    (lambda f: f.has("tomato") and f.has("onion"), templates.TOMATO_ONION_STEPS),
)


def pace_for(cooking_time: str) -> str:
    return templates.PACE_BY_BAND.get(cooking_time, templates.DEFAULT_PACE)


def prep_step(features: IngredientFeatures) -> str:
    """Only the first ingredient decides the prep step."""
    first = features.first
    for keyword, step in templates.PREP_STEPS:
        if keyword in first:
            return step
    return templates.GENERIC_PREP_STEP


def main_cooking_steps(features: IngredientFeatures) -> Tuple[str, ...]:
    if features.count <= 1:
        return (templates.SINGLE_INGREDIENT_STEP,)
    for matches, steps in PAIR_RULES:
        if matches(features):
            return steps
    return templates.GENERIC_MULTI_STEPS


def method_step(request: GenerationRequest, rng) -> str:
    cuisine = request.cuisine_key
    key = cuisine if cuisine in METHOD_CUISINES else "general"
    return select_variation(f"{key}_cooking", rng)


def seasoning_step(request: GenerationRequest, rng) -> str:
    cuisine = request.cuisine_key
    if cuisine in SEASONING_CUISINES:
        return select_variation(f"{cuisine}_seasoning", rng)
    return templates.GENERIC_SEASONING_STEP


def serving_step(request: GenerationRequest) -> str:
    complexity = request.complexity_key
    if complexity == "beginner":
        return templates.BEGINNER_SERVING_STEP.format(meal=request.meal_type.lower())
    if complexity == "intermediate":
        return templates.INTERMEDIATE_SERVING_STEP
    return templates.ADVANCED_SERVING_STEP


def compose_instructions(request: GenerationRequest, features: IngredientFeatures, rng) -> List[str]:
    steps = [prep_step(features), method_step(request, rng)]
    steps.extend(main_cooking_steps(features))
    steps.append(seasoning_step(request, rng))
    steps.append(select_variation(f"{pace_for(request.cooking_time)}_pacing", rng))
    steps.append(serving_step(request))
    return steps
