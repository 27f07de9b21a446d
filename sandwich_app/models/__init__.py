from .bread import Bread
from .ingredient import Ingredient
from .sauce import Sauce
from .sandwich import Sandwich, sandwich_ingredients
from .todo import Todo

__all__ = ["Bread", "Ingredient", "Sauce", "Sandwich", "sandwich_ingredients", "Todo"]
