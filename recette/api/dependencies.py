"""Process-wide collaborators handed to the routers through FastAPI Depends.

Tests swap any of them with app.dependency_overrides.
"""
import logging
from functools import lru_cache

from recette.domain.ShoppingSelection import ShoppingSelection
from recette.infra.Health_Provider import HealthDataProvider, StubHealthDataProvider
from recette.infra.Identity_Provider import AuthSession
from recette.infra.Recipe_Repository import InMemoryRecipeRepository, JsonRecipeRepository, RecipeRepository
from recette.utilities.config import RECIPE_STORE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_recipe_repository() -> RecipeRepository:
    if RECIPE_STORE == "memory":
        logger.info("Using in-memory demo recipe store")
        return InMemoryRecipeRepository()
    return JsonRecipeRepository()


@lru_cache(maxsize=None)
def get_selection() -> ShoppingSelection:
    return ShoppingSelection()


@lru_cache(maxsize=None)
def get_auth_session() -> AuthSession:
    return AuthSession()


@lru_cache(maxsize=None)
def get_health_provider() -> HealthDataProvider:
    return StubHealthDataProvider()
