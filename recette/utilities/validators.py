"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from recette.utilities.constants import DEFAULT_DIFFICULTY, DIFFICULTY_OPTIONS


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., max_length=100)
    amount: str = Field(..., max_length=50)

    @field_validator('name', 'amount')
    @classmethod
    def strip_and_require(cls, v):
        """Remove leading/trailing whitespace; both fields are required."""
        v = v.strip()
        if not v:
            raise ValueError('材料を正しく入力してください')
        return v


class RecipeInput(BaseModel):
    """Schema for recipe post validation."""
    title: str = Field(..., max_length=200)
    description: str = ""
    ingredients: List[IngredientInput]
    instructions: List[str]
    cooking_time: str = ""
    servings: str = ""
    difficulty: str = DEFAULT_DIFFICULTY
    tags: List[str] = Field(default_factory=list)
    estimated_budget: str = ""
    estimated_calories: str = ""
    is_public: bool = True

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('レシピタイトルを入力してください')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('材料を正しく入力してください')
        return v

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Every step must be filled in."""
        if not v or any(not step.strip() for step in v):
            raise ValueError('作り方を入力してください')
        return [step.strip() for step in v]

    @field_validator('difficulty')
    @classmethod
    def validate_difficulty(cls, v):
        if v not in DIFFICULTY_OPTIONS:
            raise ValueError(f"difficulty must be one of {', '.join(DIFFICULTY_OPTIONS)}")
        return v

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Drop blank and repeated tags, keeping first occurrence order."""
        seen = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class CredentialsInput(BaseModel):
    """Email / password pair; the identity provider applies its own rules."""
    email: str = ""
    password: str = ""

    @field_validator('email')
    @classmethod
    def strip_email(cls, v):
        return v.strip()


class SelectRecipeInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)


class ServingsUpdateInput(BaseModel):
    """Either an absolute servings value or a +/- delta."""
    recipe_id: str = Field(..., min_length=1)
    servings: Optional[int] = None
    delta: Optional[int] = None

    @model_validator(mode='after')
    def exactly_one(self):
        if (self.servings is None) == (self.delta is None):
            raise ValueError('Provide exactly one of servings or delta')
        return self


class CheckItemInput(BaseModel):
    item_id: str = Field(..., min_length=1)
