"""
Smart Recipe - procedural recipe suggestions.

This package provides:
- A pure recipe generator (SmartRecipe.generator)
- Recipe, request, review and logged-meal storage
- Recipe and review delivery by email
- The REST routers mounted under /api
"""

__version__ = "1.0.0"
