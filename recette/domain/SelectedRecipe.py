"""SelectedRecipe: a recipe picked for the shopping list plus its serving multiplier (>= 1)."""
from recette.domain.Recipe import Recipe

MIN_SERVINGS = 1


class SelectedRecipe:
    def __init__(self, recipe: Recipe, servings: int = MIN_SERVINGS):
        self.recipe = recipe
        self.servings = max(MIN_SERVINGS, int(servings))

    def set_servings(self, servings: int):
        '''Sets the multiplier; values below 1 are clamped to 1.'''
        self.servings = max(MIN_SERVINGS, int(servings))

    def increment(self):
        self.servings += 1

    def decrement(self):
        self.servings = max(MIN_SERVINGS, self.servings - 1)

    def __str__(self) -> str:
        return f"{self.recipe.title} x{self.servings}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "recipe_id": self.recipe.id,
            "title": self.recipe.title,
            "servings": self.servings,
            "nominal_servings": self.recipe.servings,
            "estimated_budget": self.recipe.estimated_budget,
            "estimated_calories": self.recipe.estimated_calories,
        }
