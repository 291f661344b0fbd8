from typing import Dict, Iterable, List, Optional

from constants import INGREDIENT_LINE_RE
from recipe_models import Ingredient, Tag


def parse_ingredient(line: str) -> Optional[Ingredient]:
    """Split an ingredient line such as "200g farine" into quantity, unit and name.

    Lines without a leading quantity are kept whole as the name. Lines that look
    like a quantity but cannot be read (e.g. "1.2.3 sel") give None.
    """
    m = INGREDIENT_LINE_RE.match(line)
    if not m:
        return Ingredient(name=line)
    try:
        quantity = float(m.group(1))
    except ValueError:
        return None
    name = m.group(3)
    if not name:
        return None
    return Ingredient(name=name, quantity=quantity, unit=m.group(2) or None)


def parse_ingredients(lines: Iterable[str]) -> List[Ingredient]:
    ingredients: List[Ingredient] = []
    for line in lines:
        ingredient = parse_ingredient(line)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def format_ingredient(ingredient: Ingredient) -> str:
    if ingredient.quantity is None:
        return ingredient.name
    return f"{ingredient.quantity:g}{ingredient.unit or ''} {ingredient.name}"


def label_to_tag(label: Dict) -> Tag:
    return Tag(name=label["name"], color=f"#{label['color']}")
