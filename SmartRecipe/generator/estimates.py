"""
Prep time, servings and calorie estimates.

Each contribution is either flat or a jitter range (lo, width) drawn as
lo + rng.randrange(width), i.e. the half-open range [lo, lo + width).
Contributions are applied in table order so a seeded rng replays exactly.
"""
from SmartRecipe.generator.features import IngredientFeatures
from SmartRecipe.generator.models import Estimates, GenerationRequest

PREP_BASE_MINUTES = 15
PREP_UNDER_30_CAP = 25
PREP_BY_INGREDIENT = (
    ("salmon", 8, 4),
    ("chicken", 8, 4),
    ("beef", 10, 5),
    ("fish", 8, 4),
    ("egg", 5, 3),
    ("tomato", 3, 2),
    ("milk", 3, 2),
    ("potato", 8, 4),
    ("onion", 3, 2),
    ("rice", 5, 3),
    ("pasta", 3, 2),
    ("carrot", 5, 3),
    ("spinach", 3, 2),
    ("mushroom", 5, 3),
)
PREP_BY_COMPLEXITY = {"intermediate": (5, 3), "advanced": (8, 4)}
PREP_BY_BAND = {"MIN_30_60": (10, 5), "OVER_60": (15, 10)}

SERVINGS_BASE = 2
SERVINGS_MIN = 2
SERVINGS_MAX = 8
# width 1 means a flat increment (no draw)
SERVINGS_BY_INGREDIENT = (
    ("egg", 1, 2),
    ("tomato", 1, 1),
    ("milk", 1, 1),
    ("potato", 1, 2),
    ("onion", 1, 1),
)
SERVINGS_BY_COMPLEXITY = {"intermediate": (1, 1), "advanced": (1, 2)}
SERVINGS_BY_BAND = {"MIN_30_60": (1, 1), "OVER_60": (1, 2)}
# upper bound -> label; the "1 serving" entry is unreachable under the clamp
SERVINGS_LABELS = (
    (1, "1 serving"),
    (2, "2 servings"),
    (4, "2-4 servings"),
    (6, "4-6 servings"),
    (SERVINGS_MAX, "6-8 servings"),
)

CALORIES_BASE = 350
CALORIES_STEP = 25
CALORIES_BY_INGREDIENT = (
    ("egg", 100, 50),
    ("tomato", 50, 25),
    ("milk", 100, 50),
    ("potato", 150, 75),
    ("onion", 50, 25),
)
CALORIES_BY_COMPLEXITY = {"intermediate": (50, 25), "advanced": (100, 50)}
CALORIES_BY_BAND = {"MIN_30_60": (50, 25), "OVER_60": (100, 50)}


def jitter(rng, lo: int, width: int) -> int:
    if width <= 1:
        return lo
    return lo + rng.randrange(width)


def _ingredient_total(features: IngredientFeatures, table, rng) -> int:
    return sum(jitter(rng, lo, width) for keyword, lo, width in table if features.has(keyword))


def _lookup(table, key, rng) -> int:
    if key not in table:
        return 0
    return jitter(rng, *table[key])


def estimate_prep_minutes(request: GenerationRequest, features: IngredientFeatures, rng) -> int:
    minutes = PREP_BASE_MINUTES + _ingredient_total(features, PREP_BY_INGREDIENT, rng)
    minutes += _lookup(PREP_BY_COMPLEXITY, request.complexity_key, rng)
    if request.cooking_time == "UNDER_30":
        # cap only; shorter totals pass through unchanged
        minutes = min(minutes, PREP_UNDER_30_CAP)
    else:
        minutes += _lookup(PREP_BY_BAND, request.cooking_time, rng)
    return minutes


def servings_label(servings: int) -> str:
    for upper, label in SERVINGS_LABELS:
        if servings <= upper:
            return label
    return SERVINGS_LABELS[-1][1]


def estimate_servings(request: GenerationRequest, features: IngredientFeatures, rng) -> str:
    servings = SERVINGS_BASE + _ingredient_total(features, SERVINGS_BY_INGREDIENT, rng)
    servings += _lookup(SERVINGS_BY_COMPLEXITY, request.complexity_key, rng)
    servings += _lookup(SERVINGS_BY_BAND, request.cooking_time, rng)
    servings = max(SERVINGS_MIN, min(SERVINGS_MAX, servings))
    return servings_label(servings)


def round_calories(calories: int) -> int:
    return ((calories + CALORIES_STEP // 2) // CALORIES_STEP) * CALORIES_STEP


def estimate_calories(request: GenerationRequest, features: IngredientFeatures, rng) -> str:
    calories = CALORIES_BASE + _ingredient_total(features, CALORIES_BY_INGREDIENT, rng)
    calories += _lookup(CALORIES_BY_COMPLEXITY, request.complexity_key, rng)
    calories += _lookup(CALORIES_BY_BAND, request.cooking_time, rng)
    return f"~{round_calories(calories)} kcal"


def estimate(request: GenerationRequest, features: IngredientFeatures, rng) -> Estimates:
    return Estimates(
        prep_minutes=estimate_prep_minutes(request, features, rng),
        servings=estimate_servings(request, features, rng),
        calories=estimate_calories(request, features, rng),
    )
