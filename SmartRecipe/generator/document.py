"""
Plain-text recipe layout.

The emoji markers and line layout are consumed by existing clients and
must stay byte-for-byte stable.
"""
from datetime import datetime
from typing import Sequence

from SmartRecipe.generator.features import extract_features
from SmartRecipe.generator.models import GenerationRequest

COOKING_TIME_LABELS = {
    "UNDER_30": "Under 30 minutes",
    "MIN_30_60": "30-60 minutes",
    "OVER_60": "Over 60 minutes",
}
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_cooking_time(cooking_time: str) -> str:
    return COOKING_TIME_LABELS.get(cooking_time, cooking_time)


def assemble_document(
    request: GenerationRequest,
    instructions: Sequence[str],
    tips: Sequence[str],
    prep_minutes: int,
    servings: str,
    calories: str,
    generated_at: datetime,
) -> str:
    lines = [
        f"🍳 {request.meal_type} RECIPE",
        f"⏰ Generated on: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"🌍 Cuisine: {request.cuisine}",
        f"⏱️  Cooking Time: {format_cooking_time(request.cooking_time)}",
        f"📊 Difficulty: {request.complexity}",
        "",
        "📝 INGREDIENTS:",
    ]
    ingredients = extract_features(request.ingredients).tokens
    lines += [f"   {i}. {item}" for i, item in enumerate(ingredients, start=1)]
    lines += ["", "👨‍🍳 INSTRUCTIONS:"]
    lines += [f"   {i}. {step}" for i, step in enumerate(instructions, start=1)]
    lines += ["", "💡 COOKING TIPS:"]
    lines += [f"   • {tip}" for tip in tips]
    lines += [
        "",
        f"⏰ Estimated Prep Time: {prep_minutes} minutes",
        f"👥 Servings: {servings}",
        f"🔥 Calories per serving: {calories}",
        "",
        "Bon appétit! 🎉",
    ]
    return "\n".join(lines)
