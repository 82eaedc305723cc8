from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class LoggedMealRequest(BaseModel):
    """Schema for logging a cooked meal."""
    user_email: EmailStr
    recipe_title: str = Field(..., min_length=1, max_length=255)
    ingredients: str = Field(..., min_length=1)
    cooking_time: str = Field(..., min_length=1, max_length=50)
    content: str = Field(..., min_length=1)
    logged_at: Optional[datetime] = Field(None, description="Defaults to now when omitted")

    @field_validator('recipe_title', 'ingredients', 'cooking_time', 'content')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value must not be blank')
        return v


class LoggedMealResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_email: str
    recipe_title: str
    ingredients: str
    cooking_time: str
    content: str
    logged_at: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
