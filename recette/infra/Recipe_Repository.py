"""Recipe repositories: list / get / put / delete / like over a document store.

JsonRecipeRepository keeps the documents in a JSON file; InMemoryRecipeRepository
holds them in a dict and is seeded with the demo recipes.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, List, Optional

from recette.domain.Ingredient import Ingredient
from recette.domain.Recipe import Recipe
from recette.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Collaborator interface for the recipe document store."""

    def list(self) -> List[Recipe]:
        raise NotImplementedError

    def get(self, recipe_id: str) -> Optional[Recipe]:
        raise NotImplementedError

    def put(self, recipe: Recipe) -> Recipe:
        raise NotImplementedError

    def delete(self, recipe_id: str) -> None:
        raise NotImplementedError

    def like(self, recipe_id: str) -> Recipe:
        raise NotImplementedError


def _newest_first(recipes: Iterable[Recipe]) -> List[Recipe]:
    return sorted(recipes, key=lambda r: r.created_at, reverse=True)


class InMemoryRecipeRepository(RecipeRepository):
    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._lock = Lock()
        self._items: Dict[str, Recipe] = {}
        for r in (demo_recipes() if recipes is None else recipes):
            self._items[r.id] = r

    def list(self) -> List[Recipe]:
        with self._lock:
            return _newest_first(self._items.values())

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            return self._items.get(recipe_id)

    def put(self, recipe: Recipe) -> Recipe:
        with self._lock:
            self._items[recipe.id] = recipe
        return recipe

    def delete(self, recipe_id: str) -> None:
        with self._lock:
            if recipe_id not in self._items:
                raise ValueError(f"Recipe '{recipe_id}' not found.")
            del self._items[recipe_id]

    def like(self, recipe_id: str) -> Recipe:
        with self._lock:
            recipe = self._items.get(recipe_id)
            if recipe is None:
                raise ValueError(f"Recipe '{recipe_id}' not found.")
            recipe.likes += 1
            return recipe


class JsonRecipeRepository(RecipeRepository):
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or RECIPES_FILE)
        self._lock = Lock()

    # === file helpers ===
    def _load(self) -> List[dict]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Recipes file not found: {self.path}. Returning empty list.")
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in recipes file: {e}")
            return []
        if not isinstance(data, list):
            logger.error("Recipes file %s does not hold a list", self.path)
            return []
        return data

    def _atomic_write(self, documents: List[dict]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".recipes_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(documents, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # === repository API ===
    def list(self) -> List[Recipe]:
        with self._lock:
            documents = self._load()
        return _newest_first(Recipe.from_dict(d) for d in documents)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            documents = self._load()
        for d in documents:
            if d.get('id') == recipe_id:
                return Recipe.from_dict(d)
        return None

    def put(self, recipe: Recipe) -> Recipe:
        with self._lock:
            documents = [d for d in self._load() if d.get('id') != recipe.id]
            documents.append(recipe.to_dict())
            self._atomic_write(documents)
        logger.info("Saved recipe %s (%s)", recipe.id, recipe.title)
        return recipe

    def delete(self, recipe_id: str) -> None:
        with self._lock:
            documents = self._load()
            remaining = [d for d in documents if d.get('id') != recipe_id]
            if len(remaining) == len(documents):
                raise ValueError(f"Recipe '{recipe_id}' not found.")
            self._atomic_write(remaining)
        logger.info("Deleted recipe %s", recipe_id)

    def like(self, recipe_id: str) -> Recipe:
        # read-increment-write under the lock
        with self._lock:
            documents = self._load()
            for d in documents:
                if d.get('id') == recipe_id:
                    try:
                        d['likes'] = int(d.get('likes') or 0) + 1
                    except (TypeError, ValueError):
                        raise ValueError(f"Recipe '{recipe_id}' has an invalid like count.")
                    self._atomic_write(documents)
                    return Recipe.from_dict(d)
        raise ValueError(f"Recipe '{recipe_id}' not found.")


def demo_recipes() -> List[Recipe]:
    """Recipes shown when no document store is configured."""
    now = datetime.now(timezone.utc)
    return [
        Recipe(id="demo-1", title="デモレシピ1", description="これはデモ用のレシピです。",
               ingredients=[Ingredient("材料A", "1個")], instructions=["手順1", "手順2"],
               cooking_time="30分", servings="2人分", difficulty="簡単", tags=["和食", "時短"],
               estimated_budget="500円", estimated_calories="300kcal",
               author_id="demoUser1", author_name="デモユーザー1",
               created_at=now - timedelta(hours=1), likes=5),
        Recipe(id="demo-2", title="デモレシピ2", description="もう一つのデモレシピ。",
               ingredients=[Ingredient("材料B", "2個")], instructions=["手順A", "手順B"],
               cooking_time="45分", servings="4人分", difficulty="普通", tags=["洋食", "ヘルシー"],
               estimated_budget="800円", estimated_calories="450kcal",
               author_id="demoUser2", author_name="デモユーザー2",
               created_at=now - timedelta(hours=2), likes=10),
        Recipe(id="demo-curry", title="嫁カレー", description="お気に入りのカレーレシピ",
               ingredients=[Ingredient("ごはん", "4杯"), Ingredient("赤パプリカ", "1/2個"),
                            Ingredient("ズッキーニ", "1/2本"), Ingredient("玉ねぎ", "2個")],
               instructions=["手順1", "手順2"], cooking_time="30分", servings="4人分",
               difficulty="簡単", tags=["和食", "カレー"],
               estimated_budget="2500円", estimated_calories="4000kcal",
               author_id="demoUser1", author_name="しゅうとのよめ",
               created_at=now - timedelta(hours=3), likes=15),
        Recipe(id="demo-pasta", title="簡単パスタ", description="時短パスタレシピ",
               ingredients=[Ingredient("スパゲッティ", "200g"), Ingredient("トマト", "2個"),
                            Ingredient("玉ねぎ", "1個")],
               instructions=["手順A", "手順B"], cooking_time="15分", servings="2人分",
               difficulty="簡単", tags=["洋食", "パスタ"],
               estimated_budget="800円", estimated_calories="600kcal",
               author_id="demoUser2", author_name="料理好き",
               created_at=now - timedelta(hours=4), likes=8),
    ]


__all__ = ['RecipeRepository', 'InMemoryRecipeRepository', 'JsonRecipeRepository', 'demo_recipes']
