from sqlalchemy.orm import Session

from SmartRecipe.database import User
from SmartRecipe.logger import get_logger
from SmartRecipe.utils_time import get_local_time

logger = get_logger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int):
        return self.db.query(User).filter(User.id == user_id).first()

    def ensure_user_exists(self, user_id: int) -> User:
        """Return the user, creating a demo account with this id on first use."""
        user = self.get_user(user_id)
        if user:
            return user

        demo_user = User(
            id=user_id,
            username=f"demo_user_{user_id}",
            email=f"demo{user_id}@example.com",
            created_at=get_local_time()
        )
        self.db.add(demo_user)
        self.db.commit()
        self.db.refresh(demo_user)
        logger.info(f"Created demo user with ID: {demo_user.id}")
        return demo_user
