import uuid

from schemas.dto import Ingredient

INITIAL_ROWS = 3
SEPARATOR = "、"

def new_id() -> str:
    return uuid.uuid4().hex

class IngredientEditor:
    """Ordered list of (name, amount) rows, addressed by id."""

    def __init__(self, rows=INITIAL_ROWS):
        self.ingredients = [Ingredient(id=new_id()) for _ in range(rows)]

    def add(self) -> Ingredient:
        row = Ingredient(id=new_id())
        self.ingredients.append(row)
        return row

    def remove(self, ingredient_id: str):
        self.ingredients = [i for i in self.ingredients if i.id != ingredient_id]

    def update(self, ingredient_id: str, field: str, value: str):
        if field not in ("name", "amount"):
            raise ValueError(f"unknown ingredient field: {field}")
        self.ingredients = [
            i.model_copy(update={field: value}) if i.id == ingredient_id else i
            for i in self.ingredients
        ]

    def named(self) -> list[Ingredient]:
        return [i for i in self.ingredients if i.name.strip() != ""]

    def has_named_ingredient(self) -> bool:
        return bool(self.named())

    def build_prompt_ingredients_list(self) -> str:
        # blank amount still renders as "{name} g"
        return SEPARATOR.join(f"{i.name} {i.amount}g" for i in self.named())

    def to_dict(self):
        return [i.model_dump() for i in self.ingredients]
