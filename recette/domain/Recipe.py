"""Recipe domain entity: title, ingredients, instructions, budget/calorie estimates, author, likes."""
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from recette.domain.Ingredient import Ingredient
from recette.utilities.constants import DEFAULT_DIFFICULTY

# document key -> attribute name
_DOCUMENT_KEYS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "instructions": "instructions",
    "cookingTime": "cooking_time",
    "servings": "servings",
    "difficulty": "difficulty",
    "tags": "tags",
    "estimatedBudget": "estimated_budget",
    "estimatedCalories": "estimated_calories",
    "authorId": "author_id",
    "authorName": "author_name",
    "likes": "likes",
    "isPublic": "is_public",
}


_TEXT_FIELDS = ("id", "title", "description", "cooking_time", "servings", "difficulty",
                "estimated_budget", "estimated_calories", "author_id", "author_name")


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
        except ValueError:
            pass
    return datetime.now(timezone.utc)


class Recipe:
    def __init__(self, id: str = "", title: str = "", description: str = "",
                 ingredients: Optional[List[Ingredient]] = None, instructions: Optional[List[str]] = None,
                 cooking_time: str = "", servings: str = "", difficulty: str = DEFAULT_DIFFICULTY,
                 tags: Optional[List[str]] = None, estimated_budget: str = "", estimated_calories: str = "",
                 author_id: str = "", author_name: str = "", created_at: Optional[datetime] = None,
                 likes: int = 0, is_public: bool = True):
        self.id = id or str(uuid4())
        self.title = title
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.cooking_time = cooking_time
        self.servings = servings
        self.difficulty = difficulty
        self.tags = tags[:] if tags else []
        self.estimated_budget = estimated_budget
        self.estimated_calories = estimated_calories
        self.author_id = author_id
        self.author_name = author_name
        self.created_at = created_at or datetime.now(timezone.utc)
        self.likes = likes
        self.is_public = is_public

    def __str__(self) -> str:
        return f"{self.title} - {self.servings} - {self.difficulty} - Tags: {', '.join(self.tags)} - Likes: {self.likes}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from its document form (camelCase keys). Unknown keys are ignored.'''
        d = dict(data) if isinstance(data, dict) else {}
        kwargs = {attr: d[key] for key, attr in _DOCUMENT_KEYS.items() if key in d and d[key] is not None}
        kwargs['ingredients'] = [Ingredient.from_dict(ing) for ing in d.get('ingredients') or []]
        kwargs['created_at'] = _parse_timestamp(d.get('createdAt'))
        # stored documents may hold numbers where free text is expected ("servings": 4)
        for attr in _TEXT_FIELDS:
            if attr in kwargs:
                kwargs[attr] = str(kwargs[attr])
        if 'likes' in kwargs:
            try:
                kwargs['likes'] = int(kwargs['likes'])
            except (TypeError, ValueError):
                kwargs['likes'] = 0
        return Recipe(**kwargs)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "cookingTime": self.cooking_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "tags": self.tags,
            "estimatedBudget": self.estimated_budget,
            "estimatedCalories": self.estimated_calories,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "createdAt": self.created_at.isoformat(),
            "likes": self.likes,
            "isPublic": self.is_public,
        }
