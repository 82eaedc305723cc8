#!/usr/bin/env python3
"""
Demo run for the Smart Recipe generator.
Prints one recipe per cooking-time band without touching the database.

Run:
    python main.py [seed]
"""

import random
import sys

from SmartRecipe.generator import GenerationRequest, generate_recipe


DEMO_REQUESTS = [
    GenerationRequest(
        ingredients="eggs, tomatoes",
        meal_type="BREAKFAST",
        cuisine="Italian",
        cooking_time="UNDER_30",
        complexity="beginner",
    ),
    GenerationRequest(
        ingredients="potato, onion, spinach",
        meal_type="LUNCH",
        cuisine="Indian",
        cooking_time="MIN_30_60",
        complexity="intermediate",
    ),
    GenerationRequest(
        ingredients="beef, rice, carrot, mushroom",
        meal_type="DINNER",
        cuisine="Mexican",
        cooking_time="OVER_60",
        complexity="advanced",
    ),
]


def example_run(seed=None):
    rng = random.Random(seed)
    for request in DEMO_REQUESTS:
        document = generate_recipe(request, rng=rng)
        print(document.content)
        print("=" * 60)


if __name__ == "__main__":
    example_run(int(sys.argv[1]) if len(sys.argv) > 1 else None)
