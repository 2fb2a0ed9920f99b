import unittest
from datetime import datetime, timezone

from recette.domain.Ingredient import Ingredient
from recette.domain.Recipe import Recipe
from recette.logic.recipes.search import all_tags, filter_recipes, liked_recipes


def _recipe(id, title, tags=(), likes=0, description=""):
    return Recipe(id=id, title=title, description=description, tags=list(tags), likes=likes)


class TestRecipe(unittest.TestCase):

    def test_document_round_trip_keeps_camel_case_keys(self):
        recipe = Recipe(id="r1", title="嫁カレー", ingredients=[Ingredient("玉ねぎ", "2個")],
                        instructions=["切る", "煮る"], cooking_time="30分", servings="4人分",
                        estimated_budget="2500円", estimated_calories="4000kcal",
                        author_id="u1", author_name="しゅうとのよめ",
                        created_at=datetime(2025, 8, 10, 12, 0, tzinfo=timezone.utc), likes=15)
        doc = recipe.to_dict()
        self.assertEqual(doc["cookingTime"], "30分")
        self.assertEqual(doc["estimatedBudget"], "2500円")
        self.assertEqual(doc["createdAt"], "2025-08-10T12:00:00+00:00")
        self.assertEqual(Recipe.from_dict(doc), recipe)

    def test_from_dict_tolerates_missing_and_bad_fields(self):
        recipe = Recipe.from_dict({"id": "x", "title": "t", "likes": "many", "createdAt": "Z-not-a-date",
                                   "ingredients": [{"name": "塩"}], "unknown": 1})
        self.assertEqual(recipe.likes, 0)
        self.assertEqual(recipe.ingredients, [Ingredient("塩", "")])
        self.assertEqual(recipe.servings, "")
        self.assertIsNotNone(recipe.created_at.tzinfo)

    def test_from_dict_reads_numbers_as_text(self):
        recipe = Recipe.from_dict({"id": 7, "servings": 4, "estimatedBudget": 1000, "cookingTime": 30})
        self.assertEqual((recipe.id, recipe.servings, recipe.estimated_budget, recipe.cooking_time),
                         ("7", "4", "1000", "30"))

    def test_from_dict_accepts_epoch_timestamp(self):
        recipe = Recipe.from_dict({"id": "x", "createdAt": 0})
        self.assertEqual(recipe.created_at, datetime(1970, 1, 1, tzinfo=timezone.utc))

    def test_new_recipe_gets_an_id(self):
        self.assertTrue(Recipe(title="t").id)
        self.assertNotEqual(Recipe(title="t").id, Recipe(title="t").id)


class TestRecipeSearch(unittest.TestCase):

    def setUp(self):
        self.recipes = [
            _recipe("1", "嫁カレー", ["和食", "カレー"], likes=15, description="お気に入り"),
            _recipe("2", "Easy Pasta", ["洋食", "パスタ"], likes=8),
            _recipe("3", "味噌汁", ["和食", "ヘルシー"], likes=3, description="野菜たっぷり"),
        ]

    def test_empty_filters_return_everything(self):
        self.assertEqual(filter_recipes(self.recipes), self.recipes)

    def test_keyword_matches_title_description_and_tags(self):
        self.assertEqual([r.id for r in filter_recipes(self.recipes, "カレー")], ["1"])
        self.assertEqual([r.id for r in filter_recipes(self.recipes, "野菜")], ["3"])
        self.assertEqual([r.id for r in filter_recipes(self.recipes, "和食")], ["1", "3"])

    def test_keyword_is_case_insensitive(self):
        self.assertEqual([r.id for r in filter_recipes(self.recipes, "pasta")], ["2"])

    def test_tag_filter_matches_any_selected_tag(self):
        result = filter_recipes(self.recipes, selected_tags=["パスタ", "ヘルシー"])
        self.assertEqual([r.id for r in result], ["2", "3"])

    def test_keyword_and_tags_combine(self):
        result = filter_recipes(self.recipes, "和食", ["ヘルシー"])
        self.assertEqual([r.id for r in result], ["3"])

    def test_all_tags_sorted_unique(self):
        self.assertEqual(all_tags(self.recipes), sorted({"和食", "カレー", "洋食", "パスタ", "ヘルシー"}))

    def test_liked_shelf(self):
        liked = liked_recipes(self.recipes)
        self.assertEqual([r.id for r in liked], ["1", "2"])
        self.assertEqual([r.id for r in liked_recipes(self.recipes, min_likes=1, limit=1)], ["1"])


if __name__ == '__main__':
    unittest.main()
