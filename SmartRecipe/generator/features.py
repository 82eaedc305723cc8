"""
Ingredient parsing and keyword flags.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple

# Flags are checked by substring over the whole raw text, so "eggplant" also
# sets "egg".
KEY_INGREDIENTS = (
    "egg", "milk", "tomato", "potato", "onion", "chicken", "beef",
    "fish", "salmon", "rice", "pasta", "carrot", "spinach", "mushroom",
)


def contains_keyword(ingredients: str, keyword: str) -> bool:
    return keyword.lower() in ingredients.lower()


@dataclass(frozen=True)
class IngredientFeatures:
    tokens: Tuple[str, ...]
    flags: FrozenSet[str]

    @property
    def normalized(self) -> Tuple[str, ...]:
        return tuple(token.lower() for token in self.tokens)

    @property
    def first(self) -> str:
        return self.normalized[0] if self.tokens else ""

    @property
    def count(self) -> int:
        return len(self.tokens)

    def has(self, keyword: str) -> bool:
        return keyword in self.flags


def extract_features(ingredients: str) -> IngredientFeatures:
    """
    Split comma-separated ingredient text into trimmed tokens and keyword flags.

    Empty tokens are kept, so a trailing comma yields a trailing "" token.
    Tokens keep their original casing for display; use `normalized` to match.
    """
    if ingredients is None:
        raise ValueError("ingredients is required")
    tokens = tuple(part.strip() for part in ingredients.split(","))
    flags = frozenset(k for k in KEY_INGREDIENTS if contains_keyword(ingredients, k))
    return IngredientFeatures(tokens=tokens, flags=flags)
