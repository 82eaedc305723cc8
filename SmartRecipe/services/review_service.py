from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from SmartRecipe.database import Recipe, Review
from SmartRecipe.logger import get_logger
from SmartRecipe.schemas.review import RecipeStats, ReviewRequest, ReviewResponse
from SmartRecipe.utils_time import get_local_time

logger = get_logger(__name__)


class ReviewService:
    """Service for recipe reviews and rating statistics."""

    def __init__(self, db: Session):
        self.db = db

    def _to_response(self, review: Review) -> ReviewResponse:
        return ReviewResponse(
            id=review.id,
            recipe_id=review.recipe_id,
            recipe_title=review.recipe.recipe_title if review.recipe else None,
            user_id=review.user_id,
            review_text=review.review_text,
            rating=review.rating,
            review_date=review.review_date,
            created_at=review.created_at,
            updated_at=review.updated_at
        )

    def _newest_first(self, query, limit: Optional[int] = None) -> List[ReviewResponse]:
        query = query.order_by(Review.review_date.desc(), Review.id.desc())
        if limit is not None:
            query = query.limit(limit)
        reviews = query.all()
        return [self._to_response(r) for r in reviews]

    def _require_recipe(self, recipe_id: int) -> Recipe:
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            raise ValueError(f"Recipe not found with ID: {recipe_id}")
        return recipe

    def create_review(self, request: ReviewRequest, user_id: int = 1) -> ReviewResponse:
        logger.info(f"Creating review for recipe ID: {request.recipe_id}", extra={"user_id": user_id})
        recipe = self._require_recipe(request.recipe_id)
        now = get_local_time()
        review = Review(
            recipe_id=recipe.id,
            user_id=user_id,
            review_text=request.review_text,
            rating=request.rating,
            review_date=request.review_date or now,
            created_at=now,
            updated_at=now
        )
        self.db.add(review)
        self.db.commit()
        self.db.refresh(review)
        logger.info(f"Review created with ID: {review.id}")
        return self._to_response(review)

    def get_review(self, review_id: int) -> Optional[ReviewResponse]:
        review = self.db.query(Review).filter(Review.id == review_id).first()
        if not review:
            logger.warning(f"Review not found: {review_id}")
            return None
        return self._to_response(review)

    def get_reviews_by_recipe(self, recipe_id: int) -> List[ReviewResponse]:
        logger.info(f"Fetching reviews for recipe ID: {recipe_id}")
        return self._newest_first(self.db.query(Review).filter(Review.recipe_id == recipe_id))

    def get_reviews_by_user(self, user_id: int) -> List[ReviewResponse]:
        logger.info(f"Fetching reviews for user ID: {user_id}")
        return self._newest_first(self.db.query(Review).filter(Review.user_id == user_id))

    def get_recent_reviews(self, limit: int = 10) -> List[ReviewResponse]:
        return self._newest_first(self.db.query(Review), limit)

    def update_review(self, review_id: int, request: ReviewRequest) -> Optional[ReviewResponse]:
        review = self.db.query(Review).filter(Review.id == review_id).first()
        if not review:
            logger.warning(f"Review not found for update: {review_id}")
            return None

        if request.recipe_id != review.recipe_id:
            self._require_recipe(request.recipe_id)
            review.recipe_id = request.recipe_id
        review.review_text = request.review_text
        review.rating = request.rating
        if request.review_date:
            review.review_date = request.review_date
        review.updated_at = get_local_time()
        self.db.commit()
        self.db.refresh(review)
        logger.info(f"Updated review with ID: {review_id}")
        return self._to_response(review)

    def delete_review(self, review_id: int) -> bool:
        review = self.db.query(Review).filter(Review.id == review_id).first()
        if not review:
            logger.warning(f"Review not found for delete: {review_id}")
            return False
        self.db.delete(review)
        self.db.commit()
        logger.info(f"Deleted review with ID: {review_id}")
        return True

    def get_recipe_stats(self, recipe_id: int) -> RecipeStats:
        """Average rating (one decimal, 0.0 without reviews) and review count."""
        average, count = (
            self.db.query(func.avg(Review.rating), func.count(Review.id))
            .filter(Review.recipe_id == recipe_id)
            .one()
        )
        return RecipeStats(
            recipe_id=recipe_id,
            average_rating=round(float(average), 1) if average is not None else 0.0,
            review_count=count or 0
        )
