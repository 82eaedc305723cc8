from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from SmartRecipe.generator.models import Complexity, CookingTime, MealType

T = TypeVar('T')

COMPLEXITY_LEVELS = {level.value for level in Complexity}


class ApiResponse(BaseModel, Generic[T]):
    """Generic API response wrapper."""
    status: bool = Field(..., description="Response status: True on success, False on error")
    message: Optional[str] = Field(None, description="Optional message")
    data: Optional[Any] = Field(None, description="Response data (only present on success)")


class RecipeGenerateRequest(BaseModel):
    """Schema for a recipe generation request."""
    ingredients: str = Field(..., min_length=1, max_length=1000, description="Comma-separated ingredient list")
    meal_type: MealType = Field(..., description="BREAKFAST, LUNCH, DINNER or SNACK")
    cuisine: str = Field(..., min_length=1, max_length=50, description="Cuisine label, e.g. Italian")
    cooking_time: CookingTime = Field(..., description="UNDER_30, MIN_30_60 or OVER_60")
    complexity: str = Field(..., description="beginner, intermediate or advanced (any case)")

    @field_validator('ingredients', 'cuisine')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value must not be blank')
        return v

    @field_validator('complexity')
    @classmethod
    def validate_complexity(cls, v: str) -> str:
        """Accept any casing of a known level and keep the caller's spelling."""
        if v.lower() not in COMPLEXITY_LEVELS:
            raise ValueError('Complexity must be one of: beginner, intermediate, advanced')
        return v


class RecipeRequestCreate(RecipeGenerateRequest):
    """Schema for storing a recipe request directly."""
    user_id: int = Field(..., ge=1)


class RecipeRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    ingredients: str
    meal_type: str
    cuisine: str
    cooking_time: str
    complexity: str
    created_at: Optional[datetime] = None


class RecipeCreate(BaseModel):
    """Schema for creating a recipe row."""
    user_id: int = Field(..., ge=1)
    request_id: Optional[int] = None
    recipe_title: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., min_length=1, description="Full recipe text")
    prep_time_minutes: Optional[int] = Field(None, ge=0)
    servings: Optional[str] = Field(None, max_length=50)
    calories: Optional[str] = Field(None, max_length=50)

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Recipe content must not be blank')
        return v


class RecipeUpdate(BaseModel):
    """Partial update; only the fields sent are changed."""
    user_id: Optional[int] = Field(None, ge=1)
    request_id: Optional[int] = None
    recipe_title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    prep_time_minutes: Optional[int] = Field(None, ge=0)
    servings: Optional[str] = Field(None, max_length=50)
    calories: Optional[str] = Field(None, max_length=50)

    @field_validator('user_id', 'content')
    @classmethod
    def validate_not_null(cls, v):
        """Omitting these leaves them unchanged; sending null is an error."""
        if v is None:
            raise ValueError('Value must not be null')
        if isinstance(v, str) and not v.strip():
            raise ValueError('Recipe content must not be blank')
        return v


class RecipeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    request_id: Optional[int] = None
    recipe_title: Optional[str] = None
    content: str
    prep_time_minutes: Optional[int] = None
    servings: Optional[str] = None
    calories: Optional[str] = None
    created_at: Optional[datetime] = None


class GeneratedRecipeResponse(BaseModel):
    """Schema returned by the generate endpoint."""
    recipe_id: int
    request_id: int
    recipe_title: str
    content: str
    prep_time_minutes: int
    servings: str
    calories: str
