from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from SmartRecipe.database import get_db
from SmartRecipe.logger import get_logger
from SmartRecipe.routers.base import api_router
from SmartRecipe.schemas.logged_meal import LoggedMealRequest
from SmartRecipe.schemas.recipe import ApiResponse
from SmartRecipe.services.logged_meal_service import LoggedMealService

logger = get_logger(__name__)


@api_router.post("/logged-meals", response_model=ApiResponse)
def create_logged_meal(request: LoggedMealRequest, db: Session = Depends(get_db)):
    try:
        result = LoggedMealService(db).create_logged_meal(request)
        return ApiResponse(status=True, message="Meal logged successfully.", data=result)
    except Exception:
        logger.exception("create_logged_meal failed")
        raise HTTPException(status_code=500, detail="An error occurred while logging the meal.")


@api_router.get("/logged-meals/search", response_model=ApiResponse)
def search_logged_meals(
    user_email: str = Query(..., min_length=1),
    recipe_title: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    result = LoggedMealService(db).search_logged_meals(user_email, recipe_title)
    return ApiResponse(status=True, message="Logged meals fetched successfully.", data=result)


@api_router.get("/logged-meals", response_model=ApiResponse)
def get_logged_meals(user_email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    result = LoggedMealService(db).get_logged_meals(user_email)
    return ApiResponse(status=True, message="Logged meals fetched successfully.", data=result)
