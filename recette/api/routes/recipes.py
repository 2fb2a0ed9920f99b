import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from recette.api.dependencies import get_auth_session, get_recipe_repository, get_selection
from recette.domain.Ingredient import Ingredient
from recette.domain.Recipe import Recipe
from recette.domain.ShoppingSelection import ShoppingSelection
from recette.events.event_helpers import publish_recipe_deleted, publish_recipe_liked
from recette.infra.Identity_Provider import AuthSession
from recette.infra.Recipe_Repository import RecipeRepository
from recette.logic.recipes.search import all_tags, filter_recipes, liked_recipes
from recette.utilities.config import LIKED_LIMIT, LIKED_MIN_LIKES
from recette.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


@router.get("")
def list_recipes(q: str = Query(default=""), tag: Optional[List[str]] = Query(default=None),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    """Return recipes (newest first) filtered by keyword and tags."""
    recipes = repo.list()
    filtered = filter_recipes(recipes, q, tag or [])
    return {"count": len(filtered), "total": len(recipes), "recipes": [r.to_dict() for r in filtered]}


@router.get("/tags")
def list_tags(repo: RecipeRepository = Depends(get_recipe_repository)):
    return {"tags": all_tags(repo.list())}


@router.get("/liked")
def list_liked(repo: RecipeRepository = Depends(get_recipe_repository)):
    liked = liked_recipes(repo.list(), min_likes=LIKED_MIN_LIKES, limit=LIKED_LIMIT)
    return {"count": len(liked), "recipes": [r.to_dict() for r in liked]}


@router.get("/{recipe_id}")
def recipe_detail(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("", status_code=201)
def post_recipe(payload: RecipeInput,
                repo: RecipeRepository = Depends(get_recipe_repository),
                auth: AuthSession = Depends(get_auth_session)):
    if not auth.is_authenticated:
        raise HTTPException(status_code=401, detail="Sign in to post a recipe")
    recipe = Recipe(
        title=payload.title,
        description=payload.description,
        ingredients=[Ingredient(i.name, i.amount) for i in payload.ingredients],
        instructions=payload.instructions,
        cooking_time=payload.cooking_time,
        servings=payload.servings,
        difficulty=payload.difficulty,
        tags=payload.tags,
        estimated_budget=payload.estimated_budget,
        estimated_calories=payload.estimated_calories,
        author_id=auth.current_user,
        author_name=auth.current_user,
        likes=0,
        is_public=payload.is_public,
    )
    repo.put(recipe)
    logger.info("Recipe posted by %s: %s", auth.current_user, recipe.title)
    return {"status": "success", "recipe": recipe.to_dict()}


@router.post("/{recipe_id}/like")
def like_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        recipe = repo.like(recipe_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    publish_recipe_liked(recipe)
    return {"id": recipe.id, "likes": recipe.likes}


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str,
                  repo: RecipeRepository = Depends(get_recipe_repository),
                  selection: ShoppingSelection = Depends(get_selection)):
    try:
        repo.delete(recipe_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    selection.discard(recipe_id)
    publish_recipe_deleted(recipe_id)
    return {"success": True}
