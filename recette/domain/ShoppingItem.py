"""ShoppingItem: one consolidated ingredient line of the shopping list."""
from typing import List


class ShoppingItem:
    def __init__(self, id: str, name: str, quantity: str):
        self.id = id
        self.name = name
        self.quantity = quantity

    def __str__(self) -> str:
        return f"{self.name}: {self.quantity}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return (self.id, self.name, self.quantity) == (other.id, other.name, other.quantity)

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.quantity))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "quantity": self.quantity}


class ShoppingListResult:
    """Aggregator output: sorted items plus budget/calorie totals as plain integer strings."""

    def __init__(self, items: List[ShoppingItem], total_budget: str = "0", total_calories: str = "0"):
        self.items = items
        self.total_budget = total_budget
        self.total_calories = total_calories

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListResult):
            return NotImplemented
        return (self.items, self.total_budget, self.total_calories) == \
            (other.items, other.total_budget, other.total_calories)

    def __repr__(self) -> str:
        return f"ShoppingListResult(items={self.items!r}, budget={self.total_budget}, calories={self.total_calories})"

    def to_dict(self):
        return {
            "items": [item.to_dict() for item in self.items],
            "count": len(self.items),
            "total_budget": self.total_budget,
            "total_calories": self.total_calories,
        }
