from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from SmartRecipe.database import get_db
from SmartRecipe.logger import get_logger
from SmartRecipe.routers.base import api_router
from SmartRecipe.schemas.recipe import ApiResponse, RecipeRequestCreate
from SmartRecipe.services.recipe_service import RecipeService

logger = get_logger(__name__)


@api_router.post("/recipes/requests", response_model=ApiResponse)
def create_recipe_request(request: RecipeRequestCreate, db: Session = Depends(get_db)):
    try:
        result = RecipeService(db).create_request(request)
        return ApiResponse(status=True, message="Recipe request created successfully.", data=result)
    except Exception:
        logger.exception("create_recipe_request failed")
        raise HTTPException(status_code=500, detail="An error occurred while creating the recipe request.")


@api_router.get("/recipes/requests", response_model=ApiResponse)
def list_recipe_requests(db: Session = Depends(get_db)):
    result = RecipeService(db).list_requests()
    return ApiResponse(status=True, message="Recipe requests fetched successfully.", data=result)


@api_router.get("/recipes/requests/{request_id}", response_model=ApiResponse)
def get_recipe_request(request_id: int, db: Session = Depends(get_db)):
    result = RecipeService(db).get_request(request_id)
    if not result:
        raise HTTPException(status_code=404, detail=f"Recipe request not found: {request_id}")
    return ApiResponse(status=True, message="Recipe request fetched successfully.", data=result)


@api_router.get("/recipes/user/{user_id}/requests", response_model=ApiResponse)
def get_user_recipe_requests(
    user_id: int,
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db)
):
    result = RecipeService(db).get_user_requests(user_id, limit)
    return ApiResponse(status=True, message="Recipe requests fetched successfully.", data=result)


@api_router.put("/recipes/requests/{request_id}", response_model=ApiResponse)
def update_recipe_request(request_id: int, request: RecipeRequestCreate, db: Session = Depends(get_db)):
    try:
        result = RecipeService(db).update_request(request_id, request)
        if not result:
            raise HTTPException(status_code=404, detail=f"Recipe request not found: {request_id}")
        return ApiResponse(status=True, message="Recipe request updated successfully.", data=result)
    except HTTPException:
        raise
    except Exception:
        logger.exception("update_recipe_request failed")
        raise HTTPException(status_code=500, detail="An error occurred while updating the recipe request.")


@api_router.delete("/recipes/requests/{request_id}", response_model=ApiResponse)
def delete_recipe_request(request_id: int, db: Session = Depends(get_db)):
    try:
        if not RecipeService(db).delete_request(request_id):
            raise HTTPException(status_code=404, detail=f"Recipe request not found: {request_id}")
        return ApiResponse(status=True, message="Recipe request deleted successfully.")
    except HTTPException:
        raise
    except Exception:
        logger.exception("delete_recipe_request failed")
        raise HTTPException(status_code=500, detail="An error occurred while deleting the recipe request.")
