from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from SmartRecipe.database import Recipe, RecipeRequestEntity
from SmartRecipe.generator import GenerationRequest, generate_recipe
from SmartRecipe.logger import get_logger
from SmartRecipe.schemas.recipe import (
    GeneratedRecipeResponse, RecipeCreate, RecipeGenerateRequest, RecipeRequestCreate,
    RecipeRequestResponse, RecipeResponse, RecipeUpdate
)
from SmartRecipe.services.user_service import UserService
from SmartRecipe.utils_time import get_local_time

logger = get_logger(__name__)


def recipe_title_for(cuisine: str, meal_type: str) -> str:
    """Display title for a generated recipe, e.g. 'Italian Breakfast'."""
    return f"{cuisine.strip().title()} {meal_type.title()}"


class RecipeService:
    """Service for recipe generation, storage and search."""

    def __init__(self, db: Session, rng=None):
        self.db = db
        self.rng = rng

    # ---- generation ----

    def generate_recipe(self, request: RecipeGenerateRequest, user_id: int) -> GeneratedRecipeResponse:
        """Store the request, run the generator and store the resulting recipe."""
        logger.info(
            f"Generating recipe for user {user_id}: {request.meal_type.value}, "
            f"{request.cuisine}, {request.cooking_time.value}, {request.complexity}",
            extra={"user_id": user_id}
        )
        user = UserService(self.db).ensure_user_exists(user_id)
        now = get_local_time()

        request_row = RecipeRequestEntity(
            user_id=user.id,
            ingredients=request.ingredients,
            meal_type=request.meal_type.value,
            cuisine=request.cuisine,
            cooking_time=request.cooking_time.value,
            complexity=request.complexity,
            created_at=now
        )
        self.db.add(request_row)
        self.db.commit()
        self.db.refresh(request_row)
        logger.info(f"Recipe request saved with ID: {request_row.id}")

        generation_request = GenerationRequest(
            ingredients=request_row.ingredients,
            meal_type=request_row.meal_type,
            cuisine=request_row.cuisine,
            cooking_time=request_row.cooking_time,
            complexity=request_row.complexity,
        )
        document = generate_recipe(generation_request, rng=self.rng, generated_at=now)

        title = recipe_title_for(request_row.cuisine, request_row.meal_type)
        recipe = Recipe(
            user_id=user.id,
            request_id=request_row.id,
            recipe_title=title,
            content=document.content,
            prep_time_minutes=document.prep_minutes,
            servings=document.servings,
            calories=document.calories,
            created_at=now
        )
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Recipe saved to database with ID: {recipe.id}")

        return GeneratedRecipeResponse(
            recipe_id=recipe.id,
            request_id=request_row.id,
            recipe_title=title,
            content=document.content,
            prep_time_minutes=document.prep_minutes,
            servings=document.servings,
            calories=document.calories
        )

    # ---- recipes ----

    def create_recipe(self, recipe: RecipeCreate) -> RecipeResponse:
        logger.info(f"Creating new recipe for user: {recipe.user_id}")
        UserService(self.db).ensure_user_exists(recipe.user_id)
        if recipe.request_id is not None and not self.get_request(recipe.request_id):
            raise ValueError(f"Recipe request not found: {recipe.request_id}")
        db_recipe = Recipe(**recipe.model_dump(), created_at=get_local_time())
        self.db.add(db_recipe)
        self.db.commit()
        self.db.refresh(db_recipe)
        return RecipeResponse.model_validate(db_recipe)

    def get_recipe(self, recipe_id: int) -> Optional[RecipeResponse]:
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            logger.warning(f"Recipe not found: {recipe_id}")
            return None
        return RecipeResponse.model_validate(recipe)

    def list_recipes(self) -> List[RecipeResponse]:
        recipes = self.db.query(Recipe).order_by(Recipe.id).all()
        return [RecipeResponse.model_validate(r) for r in recipes]

    def get_user_recipes(self, user_id: int, limit: int = 10) -> List[RecipeResponse]:
        logger.info(f"Fetching {limit} recent recipes for user {user_id}")
        recipes = (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .limit(limit)
            .all()
        )
        return [RecipeResponse.model_validate(r) for r in recipes]

    def update_recipe(self, recipe_id: int, recipe_update: RecipeUpdate) -> Optional[RecipeResponse]:
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            logger.warning(f"Recipe not found for update: {recipe_id}")
            return None

        update_data = recipe_update.model_dump(exclude_unset=True)
        if "user_id" in update_data:
            UserService(self.db).ensure_user_exists(update_data["user_id"])
        request_id = update_data.get("request_id")
        if request_id is not None and not self.get_request(request_id):
            raise ValueError(f"Recipe request not found: {request_id}")
        for key, value in update_data.items():
            setattr(recipe, key, value)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Updated recipe with ID: {recipe_id}")
        return RecipeResponse.model_validate(recipe)

    def delete_recipe(self, recipe_id: int) -> bool:
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            logger.warning(f"Recipe not found for delete: {recipe_id}")
            return False
        self.db.delete(recipe)
        self.db.commit()
        logger.info(f"Deleted recipe with ID: {recipe_id}")
        return True

    # ---- recipe requests ----

    def create_request(self, request: RecipeRequestCreate) -> RecipeRequestResponse:
        logger.info(f"Creating recipe request for user: {request.user_id}")
        UserService(self.db).ensure_user_exists(request.user_id)
        request_row = RecipeRequestEntity(
            user_id=request.user_id,
            ingredients=request.ingredients,
            meal_type=request.meal_type.value,
            cuisine=request.cuisine,
            cooking_time=request.cooking_time.value,
            complexity=request.complexity,
            created_at=get_local_time()
        )
        self.db.add(request_row)
        self.db.commit()
        self.db.refresh(request_row)
        return RecipeRequestResponse.model_validate(request_row)

    def get_request(self, request_id: int) -> Optional[RecipeRequestResponse]:
        request_row = self.db.query(RecipeRequestEntity).filter(RecipeRequestEntity.id == request_id).first()
        if not request_row:
            logger.warning(f"Recipe request not found: {request_id}")
            return None
        return RecipeRequestResponse.model_validate(request_row)

    def list_requests(self) -> List[RecipeRequestResponse]:
        rows = self.db.query(RecipeRequestEntity).order_by(RecipeRequestEntity.id).all()
        return [RecipeRequestResponse.model_validate(r) for r in rows]

    def get_user_requests(self, user_id: int, limit: int = 10) -> List[RecipeRequestResponse]:
        logger.info(f"Fetching {limit} recent recipe requests for user {user_id}")
        rows = (
            self.db.query(RecipeRequestEntity)
            .filter(RecipeRequestEntity.user_id == user_id)
            .order_by(RecipeRequestEntity.created_at.desc(), RecipeRequestEntity.id.desc())
            .limit(limit)
            .all()
        )
        return [RecipeRequestResponse.model_validate(r) for r in rows]

    def update_request(self, request_id: int, request: RecipeRequestCreate) -> Optional[RecipeRequestResponse]:
        request_row = self.db.query(RecipeRequestEntity).filter(RecipeRequestEntity.id == request_id).first()
        if not request_row:
            logger.warning(f"Recipe request not found for update: {request_id}")
            return None

        UserService(self.db).ensure_user_exists(request.user_id)
        request_row.user_id = request.user_id
        request_row.ingredients = request.ingredients
        request_row.meal_type = request.meal_type.value
        request_row.cuisine = request.cuisine
        request_row.cooking_time = request.cooking_time.value
        request_row.complexity = request.complexity
        self.db.commit()
        self.db.refresh(request_row)
        logger.info(f"Updated recipe request with ID: {request_id}")
        return RecipeRequestResponse.model_validate(request_row)

    def delete_request(self, request_id: int) -> bool:
        request_row = self.db.query(RecipeRequestEntity).filter(RecipeRequestEntity.id == request_id).first()
        if not request_row:
            logger.warning(f"Recipe request not found for delete: {request_id}")
            return False
        # Recipes keep their row but lose the link to the deleted request
        self.db.query(Recipe).filter(Recipe.request_id == request_id).update({Recipe.request_id: None})
        self.db.delete(request_row)
        self.db.commit()
        logger.info(f"Deleted recipe request with ID: {request_id}")
        return True

    # ---- search and filters ----

    def _user_recipes_joined(self, user_id: int):
        return (
            self.db.query(Recipe)
            .join(RecipeRequestEntity, Recipe.request_id == RecipeRequestEntity.id)
            .filter(Recipe.user_id == user_id)
        )

    def _newest_first(self, query) -> List[RecipeResponse]:
        recipes = query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()
        return [RecipeResponse.model_validate(r) for r in recipes]

    def search_by_ingredient(self, user_id: int, ingredient: str) -> List[RecipeResponse]:
        logger.info(f"Searching recipes for user {user_id} with ingredient: {ingredient}")
        query = self._user_recipes_joined(user_id).filter(
            func.lower(RecipeRequestEntity.ingredients).contains(ingredient.lower(), autoescape=True)
        )
        return self._newest_first(query)

    def _filter_column(self, user_id: int, column, value: str) -> List[RecipeResponse]:
        query = self._user_recipes_joined(user_id).filter(func.lower(column) == value.lower())
        return self._newest_first(query)

    def filter_by_meal_type(self, user_id: int, meal_type: str) -> List[RecipeResponse]:
        logger.info(f"Fetching {meal_type} recipes for user {user_id}")
        return self._filter_column(user_id, RecipeRequestEntity.meal_type, meal_type)

    def filter_by_cuisine(self, user_id: int, cuisine: str) -> List[RecipeResponse]:
        logger.info(f"Fetching {cuisine} recipes for user {user_id}")
        return self._filter_column(user_id, RecipeRequestEntity.cuisine, cuisine)

    def filter_by_complexity(self, user_id: int, complexity: str) -> List[RecipeResponse]:
        logger.info(f"Fetching {complexity} recipes for user {user_id}")
        return self._filter_column(user_id, RecipeRequestEntity.complexity, complexity)

    def filter_by_cooking_time(self, user_id: int, cooking_time: str) -> List[RecipeResponse]:
        logger.info(f"Fetching {cooking_time} recipes for user {user_id}")
        return self._filter_column(user_id, RecipeRequestEntity.cooking_time, cooking_time)
