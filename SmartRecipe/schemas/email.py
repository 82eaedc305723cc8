from pydantic import BaseModel, EmailStr, Field, field_validator


class EmailRequest(BaseModel):
    """Schema for emailing a generated recipe."""
    email: EmailStr = Field(..., description="Recipient address")
    recipe_content: str = Field(..., min_length=1, description="Recipe text to send")
    recipe_title: str = Field(..., min_length=1, max_length=255, description="Used in the subject line")

    @field_validator('recipe_content', 'recipe_title')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value must not be blank')
        return v
