# Router modules for Smart Recipe API
# Import order matters - routers register endpoints on the shared api_router,
# and the static /recipes/... paths must be registered before /recipes/{recipe_id}

from . import base
from . import recipe_requests
from . import reviews
from . import email
from . import logged_meals
from . import recipes

__all__ = ['recipe_requests', 'reviews', 'email', 'logged_meals', 'recipes']
