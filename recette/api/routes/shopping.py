import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from recette.api.dependencies import get_recipe_repository, get_selection
from recette.domain.ShoppingSelection import ShoppingSelection
from recette.infra.Recipe_Repository import RecipeRepository
from recette.infra.pdf_utils import generate_pdf_for_shopping_list
from recette.utilities.validators import CheckItemInput, SelectRecipeInput, ServingsUpdateInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])
logger = logging.getLogger(__name__)


@router.get("")
def shopping_list(selection: ShoppingSelection = Depends(get_selection)):
    """Current selection, merged items, totals and the still-unchecked items."""
    return selection.to_dict()


@router.post("/select")
def toggle_recipe(payload: SelectRecipeInput,
                  repo: RecipeRepository = Depends(get_recipe_repository),
                  selection: ShoppingSelection = Depends(get_selection)):
    recipe = repo.get(payload.recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    selection.toggle(recipe)
    logger.info("ShoppingList selection toggled recipe=%s selected=%s",
                recipe.id, selection.is_selected(recipe.id))
    return selection.to_dict()


@router.post("/servings")
def update_servings(payload: ServingsUpdateInput, selection: ShoppingSelection = Depends(get_selection)):
    entry = selection.find(payload.recipe_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Recipe is not selected")
    if payload.servings is not None:
        selection.set_servings(payload.recipe_id, payload.servings)
    else:
        selection.set_servings(payload.recipe_id, entry.servings + payload.delta)
    return selection.to_dict()


@router.post("/check")
def toggle_checked(payload: CheckItemInput, selection: ShoppingSelection = Depends(get_selection)):
    try:
        checked = selection.toggle_checked(payload.item_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {**selection.to_dict(), "item_id": payload.item_id, "item_checked": checked}


@router.delete("")
def clear_selection(selection: ShoppingSelection = Depends(get_selection)):
    selection.clear()
    return selection.to_dict()


@router.get("/pdf")
def export_pdf(selection: ShoppingSelection = Depends(get_selection)):
    pdf_bytes = generate_pdf_for_shopping_list(selection.result, selection.checked)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=shopping_list.pdf"},
    )
