from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from SmartRecipe.database import LoggedMeal
from SmartRecipe.logger import get_logger
from SmartRecipe.schemas.logged_meal import LoggedMealRequest, LoggedMealResponse
from SmartRecipe.utils_time import get_local_time

logger = get_logger(__name__)


class LoggedMealService:
    """Service for the per-user log of cooked meals."""

    def __init__(self, db: Session):
        self.db = db

    def create_logged_meal(self, request: LoggedMealRequest) -> LoggedMealResponse:
        logger.info(f"Creating logged meal for user: {request.user_email}")
        now = get_local_time()
        meal = LoggedMeal(
            user_email=request.user_email,
            recipe_title=request.recipe_title,
            ingredients=request.ingredients,
            cooking_time=request.cooking_time,
            content=request.content,
            logged_at=request.logged_at or now,
            created_at=now,
            updated_at=now
        )
        self.db.add(meal)
        self.db.commit()
        self.db.refresh(meal)
        logger.info(f"Logged meal saved with ID: {meal.id}")
        return LoggedMealResponse.model_validate(meal)

    def get_logged_meals(self, user_email: str) -> List[LoggedMealResponse]:
        logger.info(f"Fetching logged meals for user: {user_email}")
        meals = (
            self.db.query(LoggedMeal)
            .filter(LoggedMeal.user_email == user_email)
            .order_by(LoggedMeal.logged_at.desc(), LoggedMeal.id.desc())
            .all()
        )
        return [LoggedMealResponse.model_validate(m) for m in meals]

    def search_logged_meals(self, user_email: str, recipe_title: str) -> List[LoggedMealResponse]:
        """Case-insensitive substring match on the recipe title."""
        logger.info(f"Searching logged meals for user: {user_email} with recipe title: {recipe_title}")
        meals = (
            self.db.query(LoggedMeal)
            .filter(LoggedMeal.user_email == user_email)
            .filter(func.lower(LoggedMeal.recipe_title).contains(recipe_title.lower(), autoescape=True))
            .order_by(LoggedMeal.logged_at.desc(), LoggedMeal.id.desc())
            .all()
        )
        return [LoggedMealResponse.model_validate(m) for m in meals]
