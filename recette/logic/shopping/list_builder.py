"""Shopping list builder.

Merges the ingredients of the selected recipes into one list, scaled by each
selection's serving multiplier, and sums the budget/calorie estimates.
Provides build_shopping_list(selected).
"""
from typing import Dict, List, Sequence

from recette.domain.SelectedRecipe import SelectedRecipe
from recette.domain.ShoppingItem import ShoppingItem, ShoppingListResult
from recette.logic.shopping.quantity_parser import (
    parse_budget,
    parse_calories,
    scale_amount,
    servings_ratio,
)
from recette.utilities.constants import INGREDIENT_SEPARATOR


def build_shopping_list(selected: Sequence[SelectedRecipe]) -> ShoppingListResult:
    """Aggregate the selected recipes into a shopping list.

    Args:
        selected: SelectedRecipe entries in selection order.

    Returns:
        ShoppingListResult with items sorted by name. Ingredients sharing a
        name are joined as display text ("2個 + 1個"), never summed; the
        budget and calorie totals are summed as integers.
    """
    merged: Dict[str, str] = {}
    total_budget = 0
    total_calories = 0

    for selection in selected:
        recipe = selection.recipe
        ratio = servings_ratio(selection.servings, recipe.servings)
        for ing in recipe.ingredients:
            amount = scale_amount(ing.amount, ratio)
            if ing.name in merged:
                merged[ing.name] = merged[ing.name] + INGREDIENT_SEPARATOR + amount
            else:
                merged[ing.name] = amount
        total_budget += int(parse_budget(recipe.estimated_budget) * ratio)
        total_calories += int(parse_calories(recipe.estimated_calories) * ratio)

    items: List[ShoppingItem] = [
        ShoppingItem(id=name, name=name, quantity=quantity)
        for name, quantity in sorted(merged.items())
    ]
    return ShoppingListResult(items, str(total_budget), str(total_calories))


__all__ = ['build_shopping_list']
