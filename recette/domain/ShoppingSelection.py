"""ShoppingSelection aggregate: selected recipes, checked items and the derived shopping list."""
from typing import List, Optional, Set

from recette.domain.Recipe import Recipe
from recette.domain.SelectedRecipe import SelectedRecipe, MIN_SERVINGS
from recette.domain.ShoppingItem import ShoppingItem, ShoppingListResult
from recette.events.Event_Bus import GLOBAL_EVENT_BUS
from recette.events.event_helpers import publish_selection_changed
from recette.logic.shopping.list_builder import build_shopping_list
from recette.logic.shopping.quantity_parser import extract_servings


class ShoppingSelection:
    def __init__(self):
        self.selected: List[SelectedRecipe] = []  # selection order
        self.checked: Set[str] = set()  # ShoppingItem ids ticked off
        self._event_bus = GLOBAL_EVENT_BUS
        self.result: ShoppingListResult = build_shopping_list([])

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _recompute(self):
        self.result = build_shopping_list(self.selected)
        ids = {item.id for item in self.result.items}
        self.checked &= ids
        publish_selection_changed(self, self.result, bus=self._event_bus)
        return self.result

    # --- Selection --------------------------------------------------------
    def find(self, recipe_id: str) -> Optional[SelectedRecipe]:
        for entry in self.selected:
            if entry.recipe.id == recipe_id:
                return entry
        return None

    def is_selected(self, recipe_id: str) -> bool:
        return self.find(recipe_id) is not None

    def add(self, recipe: Recipe, servings: Optional[int] = None):
        '''
        Adds a recipe to the selection. The multiplier starts at the recipe's own
        serving count when it can be read from its descriptor, else at 1.
        '''
        if self.is_selected(recipe.id):
            raise ValueError(f"Recipe '{recipe.id}' is already selected.")
        if servings is None:
            servings = extract_servings(recipe.servings) or MIN_SERVINGS
        self.selected.append(SelectedRecipe(recipe, servings))
        return self._recompute()

    def remove(self, recipe_id: str):
        entry = self.find(recipe_id)
        if entry is None:
            raise ValueError(f"Recipe '{recipe_id}' is not selected.")
        self.selected.remove(entry)
        return self._recompute()

    def discard(self, recipe_id: str):
        '''Removes the recipe if selected; no-op otherwise.'''
        if self.is_selected(recipe_id):
            return self.remove(recipe_id)
        return self.result

    def toggle(self, recipe: Recipe):
        if self.is_selected(recipe.id):
            return self.remove(recipe.id)
        return self.add(recipe)

    def _require(self, recipe_id: str) -> SelectedRecipe:
        entry = self.find(recipe_id)
        if entry is None:
            raise ValueError(f"Recipe '{recipe_id}' is not selected.")
        return entry

    def set_servings(self, recipe_id: str, servings: int):
        self._require(recipe_id).set_servings(servings)
        return self._recompute()

    def increment(self, recipe_id: str):
        self._require(recipe_id).increment()
        return self._recompute()

    def decrement(self, recipe_id: str):
        self._require(recipe_id).decrement()
        return self._recompute()

    def clear(self):
        self.selected = []
        self.checked = set()
        return self._recompute()

    # --- Checklist --------------------------------------------------------
    def toggle_checked(self, item_id: str) -> bool:
        '''Ticks or unticks an item of the current list. Returns the new checked state.'''
        if item_id not in {item.id for item in self.result.items}:
            raise ValueError(f"'{item_id}' is not on the shopping list.")
        if item_id in self.checked:
            self.checked.discard(item_id)
            return False
        self.checked.add(item_id)
        return True

    def unchecked_items(self) -> List[ShoppingItem]:
        return [item for item in self.result.items if item.id not in self.checked]

    def __str__(self) -> str:
        selected_str = ", ".join(str(s) for s in self.selected)
        return f"Selection: [{selected_str}] -> {len(self.result.items)} items"

    __repr__ = __str__

    def to_dict(self):
        return {
            "selected": [s.to_dict() for s in self.selected],
            **self.result.to_dict(),
            "checked": sorted(self.checked),
            "unchecked": [item.to_dict() for item in self.unchecked_items()],
        }
