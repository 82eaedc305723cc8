from typing import Optional

from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from SmartRecipe.database import get_db
from SmartRecipe.logger import get_logger
from SmartRecipe.routers.base import api_router
from SmartRecipe.schemas.recipe import ApiResponse
from SmartRecipe.schemas.review import ReviewRequest
from SmartRecipe.services.review_service import ReviewService

logger = get_logger(__name__)

DEFAULT_REVIEW_USER_ID = 1


@api_router.post("/recipes/reviews", response_model=ApiResponse)
def create_review(
    request: ReviewRequest,
    x_user_id: Optional[int] = Header(None, ge=1),
    db: Session = Depends(get_db)
):
    try:
        user_id = DEFAULT_REVIEW_USER_ID if x_user_id is None else x_user_id
        result = ReviewService(db).create_review(request, user_id)
        return ApiResponse(status=True, message="Review created successfully.", data=result)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("create_review failed")
        raise HTTPException(status_code=500, detail="An error occurred while creating the review.")


@api_router.get("/recipes/reviews/recent", response_model=ApiResponse)
def get_recent_reviews(limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db)):
    result = ReviewService(db).get_recent_reviews(limit)
    return ApiResponse(status=True, message="Recent reviews fetched successfully.", data=result)


@api_router.get("/recipes/reviews/{review_id}", response_model=ApiResponse)
def get_review(review_id: int, db: Session = Depends(get_db)):
    result = ReviewService(db).get_review(review_id)
    if not result:
        raise HTTPException(status_code=404, detail=f"Review not found: {review_id}")
    return ApiResponse(status=True, message="Review fetched successfully.", data=result)


@api_router.put("/recipes/reviews/{review_id}", response_model=ApiResponse)
def update_review(review_id: int, request: ReviewRequest, db: Session = Depends(get_db)):
    try:
        result = ReviewService(db).update_review(review_id, request)
        if not result:
            raise HTTPException(status_code=404, detail=f"Review not found: {review_id}")
        return ApiResponse(status=True, message="Review updated successfully.", data=result)
    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("update_review failed")
        raise HTTPException(status_code=500, detail="An error occurred while updating the review.")


@api_router.delete("/recipes/reviews/{review_id}", response_model=ApiResponse)
def delete_review(review_id: int, db: Session = Depends(get_db)):
    if not ReviewService(db).delete_review(review_id):
        raise HTTPException(status_code=404, detail=f"Review not found: {review_id}")
    return ApiResponse(status=True, message="Review deleted successfully.")


@api_router.get("/recipes/user/{user_id}/reviews", response_model=ApiResponse)
def get_user_reviews(user_id: int, db: Session = Depends(get_db)):
    result = ReviewService(db).get_reviews_by_user(user_id)
    return ApiResponse(status=True, message="Reviews fetched successfully.", data=result)


@api_router.get("/recipes/{recipe_id}/reviews", response_model=ApiResponse)
def get_recipe_reviews(recipe_id: int, db: Session = Depends(get_db)):
    result = ReviewService(db).get_reviews_by_recipe(recipe_id)
    return ApiResponse(status=True, message="Reviews fetched successfully.", data=result)


@api_router.get("/recipes/{recipe_id}/stats", response_model=ApiResponse)
def get_recipe_stats(recipe_id: int, db: Session = Depends(get_db)):
    result = ReviewService(db).get_recipe_stats(recipe_id)
    return ApiResponse(status=True, message="Recipe stats fetched successfully.", data=result)
