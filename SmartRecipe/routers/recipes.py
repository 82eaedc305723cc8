import os

from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from SmartRecipe.database import get_db
from SmartRecipe.logger import get_logger
from SmartRecipe.routers.base import api_router
from SmartRecipe.schemas.recipe import (
    ApiResponse, RecipeCreate, RecipeGenerateRequest, RecipeUpdate
)
from SmartRecipe.services.email_service import EmailService
from SmartRecipe.services.recipe_service import RecipeService

logger = get_logger(__name__)


def get_random_source():
    """Random source for generation; None gives each call a fresh random.Random."""
    return None


@api_router.get("/recipes/health", response_model=ApiResponse)
def recipes_health():
    return ApiResponse(status=True, message="Recipe service is healthy! 🍳")


@api_router.get("/recipes/check-env", response_model=ApiResponse)
def check_environment():
    """Report which settings are present without exposing their values."""
    settings = {
        "database_url_configured": bool(os.getenv("DATABASE_URL")),
        "sendgrid_configured": EmailService().is_configured(),
        "email_from_configured": bool(os.getenv("EMAIL_FROM")),
        "app_timezone_configured": bool(os.getenv("APP_TIMEZONE")),
    }
    logger.info(f"Environment check: {settings}")
    return ApiResponse(status=True, message="Environment check completed.", data=settings)


@api_router.post("/recipes/generate", response_model=ApiResponse)
def generate_recipe(
    request: RecipeGenerateRequest,
    x_user_id: int = Header(...),
    db: Session = Depends(get_db),
    rng=Depends(get_random_source)
):
    try:
        result = RecipeService(db, rng=rng).generate_recipe(request, x_user_id)
        return ApiResponse(status=True, message="Recipe generated successfully!", data=result)
    except HTTPException:
        raise
    except Exception:
        logger.exception("generate_recipe failed")
        raise HTTPException(status_code=500, detail="An error occurred while generating the recipe. Please try again.")


@api_router.post("/recipes", response_model=ApiResponse)
def create_recipe(recipe: RecipeCreate, db: Session = Depends(get_db)):
    try:
        result = RecipeService(db).create_recipe(recipe)
        return ApiResponse(status=True, message="Recipe created successfully.", data=result)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("create_recipe failed")
        raise HTTPException(status_code=500, detail="An error occurred while creating the recipe.")


@api_router.get("/recipes", response_model=ApiResponse)
def list_recipes(db: Session = Depends(get_db)):
    result = RecipeService(db).list_recipes()
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}", response_model=ApiResponse)
def get_user_recipes(
    user_id: int,
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db)
):
    result = RecipeService(db).get_user_recipes(user_id, limit)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/search", response_model=ApiResponse)
def search_recipes_by_ingredient(
    user_id: int,
    ingredient: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    result = RecipeService(db).search_by_ingredient(user_id, ingredient)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/meal-type/{meal_type}", response_model=ApiResponse)
def get_recipes_by_meal_type(user_id: int, meal_type: str, db: Session = Depends(get_db)):
    result = RecipeService(db).filter_by_meal_type(user_id, meal_type)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/cuisine/{cuisine}", response_model=ApiResponse)
def get_recipes_by_cuisine(user_id: int, cuisine: str, db: Session = Depends(get_db)):
    result = RecipeService(db).filter_by_cuisine(user_id, cuisine)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/complexity/{complexity}", response_model=ApiResponse)
def get_recipes_by_complexity(user_id: int, complexity: str, db: Session = Depends(get_db)):
    result = RecipeService(db).filter_by_complexity(user_id, complexity)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/cooking-time/{cooking_time}", response_model=ApiResponse)
def get_recipes_by_cooking_time(user_id: int, cooking_time: str, db: Session = Depends(get_db)):
    result = RecipeService(db).filter_by_cooking_time(user_id, cooking_time)
    return ApiResponse(status=True, message="Recipes fetched successfully.", data=result)


@api_router.get("/recipes/{recipe_id}", response_model=ApiResponse)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    result = RecipeService(db).get_recipe(recipe_id)
    if not result:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
    return ApiResponse(status=True, message="Recipe fetched successfully.", data=result)


@api_router.put("/recipes/{recipe_id}", response_model=ApiResponse)
def update_recipe(recipe_id: int, recipe: RecipeUpdate, db: Session = Depends(get_db)):
    try:
        result = RecipeService(db).update_recipe(recipe_id, recipe)
        if not result:
            raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
        return ApiResponse(status=True, message="Recipe updated successfully.", data=result)
    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("update_recipe failed")
        raise HTTPException(status_code=500, detail="An error occurred while updating the recipe.")


@api_router.delete("/recipes/{recipe_id}", response_model=ApiResponse)
def delete_recipe(recipe_id: int, db: Session = Depends(get_db)):
    try:
        if not RecipeService(db).delete_recipe(recipe_id):
            raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
        return ApiResponse(status=True, message="Recipe deleted successfully.")
    except HTTPException:
        raise
    except Exception:
        logger.exception("delete_recipe failed")
        raise HTTPException(status_code=500, detail="An error occurred while deleting the recipe.")
