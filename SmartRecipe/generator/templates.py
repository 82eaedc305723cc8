"""
Phrase data for the recipe generator.

Pools are keyed by category and then by variant; TEMPLATE_POOLS flattens them
into "<variant>_<category>" names (e.g. "italian_cooking", "quick_tips") used by
the variation selector. Add phrasings here, selection logic does not change.
"""

COOKING_METHODS = {
    "italian": (
        "Heat extra virgin olive oil in a large pan over medium heat",
        "Warm olive oil in a deep skillet until shimmering",
        "Heat a generous amount of olive oil in a heavy-bottomed pan",
    ),
    "asian": (
        "Heat a wok or large pan with a tablespoon of vegetable oil until smoking hot",
        "Get your wok smoking hot with oil before adding ingredients",
        "Heat oil in a wok until it's almost smoking, then add aromatics",
    ),
    "mexican": (
        "Heat a cast-iron skillet over medium-high heat with oil",
        "Get your comal or skillet very hot before starting",
        "Heat oil in a heavy pan until it shimmers and is hot",
    ),
    "indian": (
        "Heat ghee or oil in a deep pan and add whole spices until fragrant",
        "Warm oil in a kadai and temper with whole spices",
        "Heat oil and add whole spices, letting them crackle and release aroma",
    ),
    "general": (
        "Heat a large pan over medium heat with cooking oil",
        "Warm oil in a skillet until it's hot but not smoking",
        "Heat a pan with oil over medium heat until shimmering",
    ),
}

SEASONINGS = {
    "italian": (
        "Season with Italian herbs like basil, oregano, and garlic",
        "Add fresh basil, dried oregano, and minced garlic for authentic flavor",
        "Finish with Italian seasoning blend and fresh garlic",
    ),
    "mexican": (
        "Season with cumin, chili powder, and fresh cilantro",
        "Add ground cumin, smoked paprika, and chopped cilantro",
        "Season with Mexican spices and finish with fresh herbs",
    ),
    "asian": (
        "Season with soy sauce, ginger, and garlic",
        "Add light soy sauce, fresh ginger, and minced garlic",
        "Season with Asian sauces and aromatics for authentic flavor",
    ),
    "indian": (
        "Add ground spices like turmeric, cumin, and coriander",
        "Season with garam masala, turmeric, and ground spices",
        "Add Indian spice blend and ground aromatics",
    ),
    "french": (
        "Finish with fresh herbs like thyme, rosemary, and a splash of wine",
        "Add French herbs and deglaze with white wine",
        "Season with herbes de Provence and finish with wine",
    ),
}

PACING = {
    "quick": (
        "Cook quickly over medium-high heat until all ingredients are well combined and heated through",
        "Stir-fry over high heat for quick, even cooking",
        "Cook rapidly over medium-high heat to preserve texture and flavor",
    ),
    "medium": (
        "Simmer over medium heat for 15-20 minutes until flavors meld and develop depth",
        "Cook gently over medium heat to allow flavors to combine",
        "Simmer slowly to develop rich, layered flavors",
    ),
    "slow": (
        "Cook over low heat for 30-45 minutes until rich, complex flavors develop",
        "Simmer gently over low heat to build deep, complex flavors",
        "Cook slowly to allow all flavors to meld and develop richness",
    ),
}

CUISINE_TIPS = {
    "italian": (
        "Use extra virgin olive oil for authentic Italian flavor",
        "Finish with a drizzle of good quality olive oil",
        "Use fresh herbs for the most authentic taste",
    ),
    "mexican": (
        "Toast your spices briefly in a dry pan to enhance their flavor",
        "Use fresh lime juice to brighten the flavors",
        "Add a pinch of Mexican oregano for authentic taste",
    ),
    "asian": (
        "Prepare all ingredients before starting (mise en place) for quick cooking",
        "Use high heat for authentic stir-fry technique",
        "Finish with a splash of sesame oil for authentic flavor",
    ),
    "indian": (
        "Bloom whole spices in hot oil to release their essential oils",
        "Use fresh ginger and garlic for the best flavor",
        "Finish with fresh cilantro for authentic Indian taste",
    ),
    "french": (
        "Use butter and wine to create rich, layered flavors",
        "Deglaze the pan with wine to capture all the flavors",
        "Use fresh herbs and quality butter for authentic French cooking",
    ),
}

SKILL_TIPS = {
    "beginner": (
        "This recipe is perfect for beginner cooks - take your time and don't rush",
        "Don't worry about perfection, focus on learning and enjoying the process",
        "Keep it simple and build your confidence step by step",
    ),
    "intermediate": (
        "Try adjusting the seasoning to develop your palate and confidence",
        "Experiment with different herb combinations to find your favorites",
        "Practice your knife skills while preparing ingredients",
    ),
    "advanced": (
        "Feel free to experiment with advanced techniques and flavor combinations",
        "Try different cooking methods to achieve different textures",
        "Use this as a base recipe and add your own creative twists",
    ),
}

DURATION_TIPS = {
    "quick": (
        "Keep ingredients small and uniform for quick, even cooking",
        "Use high heat for fast cooking while preserving texture",
        "Prep everything before starting to ensure quick execution",
    ),
    "medium": (
        "Low and slow cooking develops deeper, more complex flavors",
        "Take time to build layers of flavor during cooking",
        "Medium heat allows flavors to develop without burning",
    ),
    "slow": (
        "Long cooking times allow flavors to meld and develop richness",
        "Patience is key - let the flavors develop naturally",
        "Low heat prevents burning while building complex flavors",
    ),
}


def _flatten(categories):
    pools = {}
    for category, variants in categories.items():
        for variant, phrases in variants.items():
            pools[f"{variant}_{category}"] = phrases
    return pools


TEMPLATE_POOLS = _flatten({
    "cooking": COOKING_METHODS,
    "seasoning": SEASONINGS,
    "pacing": PACING,
    "tips": {**CUISINE_TIPS, **SKILL_TIPS},
    "duration_tips": DURATION_TIPS,
})

# Cooking-time band -> pace keyword used for pacing steps and duration tips.
# Any other band falls back to "slow".
PACE_BY_BAND = {
    "UNDER_30": "quick",
    "MIN_30_60": "medium",
}
DEFAULT_PACE = "slow"

# Fixed (non-pooled) phrases.

# First-ingredient prep lines, checked in this order.
PREP_STEPS = (
    ("egg", "Crack and whisk the eggs in a bowl, season with salt and pepper"),
    ("milk", "Measure and warm the milk slightly (not boiling)"),
    ("tomato", "Wash and dice the tomatoes into small cubes"),
    ("potato", "Wash and dice the potatoes into small cubes"),
    ("onion", "Peel and finely dice the onion"),
    ("chicken", "Cut the chicken into bite-sized pieces and season with salt and pepper"),
)
GENERIC_PREP_STEP = "Prepare your ingredients by washing and chopping as needed"

EGG_TOMATO_STEPS = (
    "Add diced tomatoes to the pan and sauté for 2-3 minutes until softened",
    "Pour the whisked eggs over the tomatoes and cook, stirring gently until eggs are set",
)
MILK_EGG_STEPS = (
    "Slowly pour the warm milk into the eggs while whisking constantly",
    "Cook over low heat, stirring continuously until thickened to custard consistency",
)
POTATO_ONION_STEPS = (
    "Add diced onions to the pan and sauté until translucent",
    "Add potato cubes and cook, stirring occasionally, until potatoes are tender",
)
TOMATO_ONION_STEPS = (
    "Sauté onions until golden, then add tomatoes and cook until they break down",
)
GENERIC_MULTI_STEPS = (
    "Add your prepared ingredients to the pan in order of cooking time needed",
    "Cook each ingredient until tender before adding the next",
)
SINGLE_INGREDIENT_STEP = "Add your prepared ingredients to the pan and cook until fragrant and tender"

GENERIC_SEASONING_STEP = "Season with salt, pepper, and herbs that complement your ingredients"

BEGINNER_SERVING_STEP = "Serve hot and enjoy your delicious {meal}!"
INTERMEDIATE_SERVING_STEP = "Plate with care, ensuring good visual presentation before serving"
ADVANCED_SERVING_STEP = "Plate beautifully with garnishes and arrange ingredients artistically"

GENERIC_CUISINE_TIP = "Experiment with different cooking methods to discover new flavors"

EGG_TIP_WITH_MILK = "For creamier eggs, add a splash of milk before whisking"
EGG_TIP = "For fluffier eggs, add a splash of water before whisking"
TOMATO_TIP_WITH_EGG = "Use ripe tomatoes for the best flavor in your egg dish"
TOMATO_TIP = "Use ripe tomatoes for the best flavor, or roast them for deeper taste"
MILK_TIP_WITH_EGG = "Warm milk slightly before using to prevent curdling in custards"
MILK_TIP = "Use whole milk for richer flavor, or skim for lighter dishes"
POTATO_TIP = "Cut potatoes into uniform sizes for even cooking"
ONION_TIP = "Let onions cook slowly to develop natural sweetness"

MEAL_TYPE_TIPS = {
    "BREAKFAST": "Prep ingredients the night before for a stress-free morning",
    "LUNCH": "This recipe works great for meal prep and leftovers",
    "DINNER": "Pair with a simple side dish for a complete meal",
    "SNACK": "Perfect for sharing or enjoying as a light meal",
}

CLOSING_TIPS = (
    "Taste as you cook and adjust seasoning gradually",
    "Don't be afraid to make this recipe your own with personal touches",
)
