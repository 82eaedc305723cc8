"""
Procedural recipe generator.

generate_recipe() is a pure function of the request, the random source and the
timestamp: it performs no I/O and keeps no state between calls. Pass a seeded
random.Random (or any object with randrange) to make output reproducible.
"""
import random
from datetime import datetime
from typing import Optional

from SmartRecipe.generator.document import assemble_document, format_cooking_time
from SmartRecipe.generator.estimates import estimate
from SmartRecipe.generator.features import IngredientFeatures, extract_features
from SmartRecipe.generator.instructions import compose_instructions
from SmartRecipe.generator.models import (
    Complexity, CookingTime, Estimates, GeneratedDocument, GenerationRequest, MealType
)
from SmartRecipe.generator.tips import compose_tips
from SmartRecipe.generator.variation import select_variation


def generate_recipe(
    request: GenerationRequest,
    rng=None,
    generated_at: Optional[datetime] = None,
) -> GeneratedDocument:
    if rng is None:
        rng = random.Random()
    if generated_at is None:
        generated_at = datetime.now()

    features = extract_features(request.ingredients)
    instructions = compose_instructions(request, features, rng)
    tips = compose_tips(request, features, rng)
    estimates = estimate(request, features, rng)
    content = assemble_document(
        request,
        instructions,
        tips,
        estimates.prep_minutes,
        estimates.servings,
        estimates.calories,
        generated_at,
    )
    return GeneratedDocument(
        instructions=tuple(instructions),
        tips=tuple(tips),
        prep_minutes=estimates.prep_minutes,
        servings=estimates.servings,
        calories=estimates.calories,
        content=content,
    )


__all__ = [
    'Complexity',
    'CookingTime',
    'Estimates',
    'GeneratedDocument',
    'GenerationRequest',
    'IngredientFeatures',
    'MealType',
    'assemble_document',
    'compose_instructions',
    'compose_tips',
    'estimate',
    'extract_features',
    'format_cooking_time',
    'generate_recipe',
    'select_variation',
]
