import unittest

from recette.domain.Ingredient import Ingredient
from recette.domain.Recipe import Recipe
from recette.domain.SelectedRecipe import SelectedRecipe
from recette.domain.ShoppingItem import ShoppingItem
from recette.logic.shopping.list_builder import build_shopping_list


def _recipe(id, servings="2人分", ingredients=(), budget="", calories=""):
    return Recipe(id=id, title=id, servings=servings,
                  ingredients=[Ingredient(n, a) for n, a in ingredients],
                  estimated_budget=budget, estimated_calories=calories)


class TestBuildShoppingList(unittest.TestCase):

    def setUp(self):
        self.curry = _recipe("curry", "4人分",
                             [("玉ねぎ", "2個"), ("合いびき肉", "300g"), ("カレールウ", "適量")],
                             budget="2500円", calories="4,000kcal")
        self.pasta = _recipe("pasta", "2人分",
                             [("玉ねぎ", "1個"), ("スパゲッティ", "200g"), ("トマト", "2個")],
                             budget="800円", calories="600kcal")

    def test_empty_selection(self):
        result = build_shopping_list([])
        self.assertEqual(result.items, [])
        self.assertEqual(result.total_budget, "0")
        self.assertEqual(result.total_calories, "0")

    def test_items_sorted_by_name(self):
        result = build_shopping_list([SelectedRecipe(self.pasta, 2), SelectedRecipe(self.curry, 4)])
        names = [item.name for item in result.items]
        self.assertEqual(names, sorted(names))
        self.assertEqual(len(names), 5)

    def test_item_id_is_the_ingredient_name(self):
        result = build_shopping_list([SelectedRecipe(self.pasta, 2)])
        for item in result.items:
            self.assertEqual(item.id, item.name)

    def test_same_name_is_concatenated_in_selection_order(self):
        result = build_shopping_list([SelectedRecipe(self.curry, 4), SelectedRecipe(self.pasta, 2)])
        onions = [i for i in result.items if i.name == "玉ねぎ"]
        self.assertEqual(onions, [ShoppingItem("玉ねぎ", "玉ねぎ", "2個 + 1個")])

        reversed_order = build_shopping_list([SelectedRecipe(self.pasta, 2), SelectedRecipe(self.curry, 4)])
        onions = [i for i in reversed_order.items if i.name == "玉ねぎ"]
        self.assertEqual(onions[0].quantity, "1個 + 2個")

    def test_names_are_not_normalized(self):
        a = _recipe("a", ingredients=[("Onion", "1個")])
        b = _recipe("b", ingredients=[("onion", "1個"), ("Onion ", "2個")])
        result = build_shopping_list([SelectedRecipe(a, 2), SelectedRecipe(b, 2)])
        self.assertEqual(len(result.items), 3)

    def test_scaling_by_servings_ratio(self):
        recipe = _recipe("r", "2人分", [("卵", "2個")])
        result = build_shopping_list([SelectedRecipe(recipe, 4)])
        self.assertEqual(result.items[0].quantity, "4個")

    def test_fractional_scaling(self):
        recipe = _recipe("r", "2人分", [("卵", "1個")])
        result = build_shopping_list([SelectedRecipe(recipe, 3)])
        self.assertEqual(result.items[0].quantity, "1.5個")

    def test_scaled_amounts_are_concatenated(self):
        result = build_shopping_list([SelectedRecipe(self.curry, 8), SelectedRecipe(self.pasta, 1)])
        onions = [i for i in result.items if i.name == "玉ねぎ"][0]
        self.assertEqual(onions.quantity, "4個 + 0.5個")

    def test_unknown_nominal_servings_leaves_amounts(self):
        recipe = _recipe("r", "適量", [("塩", "2g")], budget="100円", calories="50kcal")
        result = build_shopping_list([SelectedRecipe(recipe, 9)])
        self.assertEqual(result.items[0].quantity, "2g")
        self.assertEqual(result.total_budget, "100")
        self.assertEqual(result.total_calories, "50")

    def test_budget_totals(self):
        first = _recipe("first", "適量", budget="¥1000-")
        second = _recipe("second", "2人分", budget="¥500-")
        result = build_shopping_list([SelectedRecipe(first, 1), SelectedRecipe(second, 4)])
        self.assertEqual(result.total_budget, "2000")

    def test_calorie_totals_are_scaled(self):
        result = build_shopping_list([SelectedRecipe(self.curry, 2), SelectedRecipe(self.pasta, 2)])
        # 4000 * 0.5 + 600 * 1.0
        self.assertEqual(result.total_calories, "2600")
        # 2500 * 0.5 + 800 * 1.0
        self.assertEqual(result.total_budget, "2050")

    def test_per_recipe_totals_truncate(self):
        recipe = _recipe("r", "3人分", budget="100円", calories="100kcal")
        result = build_shopping_list([SelectedRecipe(recipe, 1), SelectedRecipe(recipe, 1)])
        self.assertEqual(result.total_budget, "66")
        self.assertEqual(result.total_calories, "66")

    def test_unparseable_totals_count_as_zero(self):
        recipe = _recipe("r", "2人分", budget="時価", calories="不明")
        result = build_shopping_list([SelectedRecipe(recipe, 2), SelectedRecipe(self.pasta, 2)])
        self.assertEqual(result.total_budget, "800")
        self.assertEqual(result.total_calories, "600")

    def test_numeric_document_fields(self):
        recipe = Recipe.from_dict({"id": "n", "title": 1, "servings": 4, "estimatedBudget": 1000,
                                   "estimatedCalories": 1200, "cookingTime": 30,
                                   "ingredients": [{"name": "卵", "amount": 2}]})
        self.assertEqual(recipe.servings, "4")
        result = build_shopping_list([SelectedRecipe(recipe, 8)])
        # "4" has no serving suffix, so nothing is scaled
        self.assertEqual(result.items, [ShoppingItem("卵", "卵", "2")])
        self.assertEqual(result.total_budget, "1000")
        self.assertEqual(result.total_calories, "1200")

    def test_range_budget_contributes_nothing(self):
        ranged = _recipe("ranged", "2人分", budget="¥1000-1500")
        result = build_shopping_list([SelectedRecipe(ranged, 2), SelectedRecipe(self.pasta, 2)])
        self.assertEqual(result.total_budget, "800")

    def test_idempotent(self):
        selected = [SelectedRecipe(self.curry, 3), SelectedRecipe(self.pasta, 5)]
        self.assertEqual(build_shopping_list(selected), build_shopping_list(selected))
        self.assertEqual(build_shopping_list(selected).to_dict(), build_shopping_list(selected).to_dict())


if __name__ == '__main__':
    unittest.main()
