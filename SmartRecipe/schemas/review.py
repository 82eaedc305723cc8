from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class ReviewRequest(BaseModel):
    """Schema for creating or replacing a review."""
    recipe_id: int = Field(..., ge=1, description="Recipe being reviewed")
    review_text: str = Field(..., min_length=1, max_length=1000, description="Review text (max 1000 chars)")
    rating: int = Field(..., ge=1, le=5, description="Rating must be 1-5")
    review_date: Optional[datetime] = Field(None, description="Defaults to now when omitted")

    @field_validator('review_text')
    @classmethod
    def validate_review_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Review text is required')
        return v


class ReviewResponse(BaseModel):
    id: int
    recipe_id: int
    recipe_title: Optional[str] = None
    user_id: int
    review_text: Optional[str] = None
    rating: Optional[int] = None
    review_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecipeStats(BaseModel):
    recipe_id: int
    average_rating: float = Field(..., description="Average rating rounded to one decimal, 0.0 without reviews")
    review_count: int


class ReviewEmailRequest(BaseModel):
    """Schema for emailing a review."""
    email: EmailStr
    review_content: str = Field(..., min_length=1)
    recipe_title: str = Field(..., min_length=1)
    reviewer_name: Optional[str] = None
    rating: Optional[int] = Field(None, ge=0, le=5)

    @field_validator('review_content', 'recipe_title')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value must not be blank')
        return v
