"""Ingredient domain entity: name (aggregation key) and free-text amount."""


class Ingredient:
    def __init__(self, name: str = "", amount: str = ""):
        # name is used verbatim as the shopping-list key (no normalization)
        self.name = name
        self.amount = amount

    def __str__(self) -> str:
        return f"{self.name} - {self.amount}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.name == other.name and self.amount == other.amount

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(name=str(d.get("name") or ""), amount=str(d.get("amount") or ""))

    def to_dict(self):
        return {"name": self.name, "amount": self.amount}
