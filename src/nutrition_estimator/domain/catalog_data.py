"""Built-in food reference table.

Values are per 100g of edible portion. Typical portions are a single
serving: one fruit, one egg, one slice of bread, one glass of milk.
"""

from functools import cache

from nutrition_estimator.domain.catalog import (
    FoodCatalog,
    FoodCategory,
    FoodRecord,
    MacroProfile,
)

_FOODS: tuple[FoodRecord, ...] = (
    # Fruit
    FoodRecord(
        key="apple",
        display_name="Apple",
        category=FoodCategory.FRUIT,
        calories_per_100g=52,
        macros_per_100g=MacroProfile(proteins=0.3, carbohydrates=14, fats=0.2, fiber=2.4),
        typical_portion_grams=150,
        aliases=("manzana", "apple", "red apple", "green apple"),
    ),
    FoodRecord(
        key="banana",
        display_name="Banana",
        category=FoodCategory.FRUIT,
        calories_per_100g=89,
        macros_per_100g=MacroProfile(proteins=1.1, carbohydrates=23, fats=0.3, fiber=2.6),
        typical_portion_grams=120,
        aliases=("plátano", "banana", "banano"),
    ),
    FoodRecord(
        key="orange",
        display_name="Orange",
        category=FoodCategory.FRUIT,
        calories_per_100g=47,
        macros_per_100g=MacroProfile(proteins=0.9, carbohydrates=12, fats=0.1, fiber=2.4),
        typical_portion_grams=130,
        aliases=("naranja", "orange"),
    ),
    # Vegetables
    FoodRecord(
        key="tomato",
        display_name="Tomato",
        category=FoodCategory.VEGETABLE,
        calories_per_100g=18,
        macros_per_100g=MacroProfile(proteins=0.9, carbohydrates=3.9, fats=0.2, fiber=1.2),
        typical_portion_grams=80,
        aliases=("tomate", "tomato"),
    ),
    FoodRecord(
        key="potato",
        display_name="Potato",
        category=FoodCategory.VEGETABLE,
        calories_per_100g=77,
        macros_per_100g=MacroProfile(proteins=2, carbohydrates=17, fats=0.1, fiber=2.2),
        typical_portion_grams=150,
        aliases=("papa", "potato", "patata"),
    ),
    FoodRecord(
        key="carrot",
        display_name="Carrot",
        category=FoodCategory.VEGETABLE,
        calories_per_100g=41,
        macros_per_100g=MacroProfile(proteins=0.9, carbohydrates=10, fats=0.2, fiber=2.8),
        typical_portion_grams=60,
        aliases=("zanahoria", "carrot"),
    ),
    # Protein
    FoodRecord(
        key="chicken",
        display_name="Chicken",
        category=FoodCategory.PROTEIN,
        calories_per_100g=165,
        macros_per_100g=MacroProfile(proteins=31, carbohydrates=0, fats=3.6, fiber=0),
        typical_portion_grams=100,
        aliases=("pollo", "chicken", "chicken breast", "pechuga de pollo"),
    ),
    FoodRecord(
        key="beef",
        display_name="Beef",
        category=FoodCategory.PROTEIN,
        calories_per_100g=250,
        macros_per_100g=MacroProfile(proteins=26, carbohydrates=0, fats=15, fiber=0),
        typical_portion_grams=100,
        aliases=("carne", "beef", "carne de res", "res"),
    ),
    FoodRecord(
        key="fish",
        display_name="Fish",
        category=FoodCategory.PROTEIN,
        calories_per_100g=206,
        macros_per_100g=MacroProfile(proteins=22, carbohydrates=0, fats=12, fiber=0),
        typical_portion_grams=100,
        aliases=("pescado", "fish", "salmon", "salmón"),
    ),
    FoodRecord(
        key="egg",
        display_name="Egg",
        category=FoodCategory.PROTEIN,
        calories_per_100g=155,
        macros_per_100g=MacroProfile(proteins=13, carbohydrates=1.1, fats=11, fiber=0),
        typical_portion_grams=50,
        aliases=("huevo", "egg", "eggs"),
    ),
    # Carbohydrates
    FoodRecord(
        key="bread",
        display_name="Bread",
        category=FoodCategory.CARBOHYDRATE,
        calories_per_100g=265,
        macros_per_100g=MacroProfile(proteins=9, carbohydrates=49, fats=3.2, fiber=2.7),
        typical_portion_grams=30,
        aliases=("pan", "bread", "slice of bread"),
    ),
    FoodRecord(
        key="rice",
        display_name="Rice",
        category=FoodCategory.CARBOHYDRATE,
        calories_per_100g=130,
        macros_per_100g=MacroProfile(proteins=2.7, carbohydrates=28, fats=0.3, fiber=0.4),
        typical_portion_grams=80,
        aliases=("arroz", "rice", "white rice"),
    ),
    FoodRecord(
        key="pasta",
        display_name="Pasta",
        category=FoodCategory.CARBOHYDRATE,
        calories_per_100g=131,
        macros_per_100g=MacroProfile(proteins=5, carbohydrates=25, fats=1.1, fiber=1.8),
        typical_portion_grams=80,
        aliases=("pasta", "noodles", "fideos", "espagueti"),
    ),
    # Dairy
    FoodRecord(
        key="milk",
        display_name="Milk",
        category=FoodCategory.DAIRY,
        calories_per_100g=42,
        macros_per_100g=MacroProfile(proteins=3.4, carbohydrates=5, fats=1, fiber=0),
        typical_portion_grams=250,
        aliases=("leche", "milk"),
    ),
    FoodRecord(
        key="cheese",
        display_name="Cheese",
        category=FoodCategory.DAIRY,
        calories_per_100g=113,
        macros_per_100g=MacroProfile(proteins=25, carbohydrates=1, fats=9, fiber=0),
        typical_portion_grams=30,
        aliases=("queso", "cheese"),
    ),
    FoodRecord(
        key="yogurt",
        display_name="Yogurt",
        category=FoodCategory.DAIRY,
        calories_per_100g=59,
        macros_per_100g=MacroProfile(proteins=10, carbohydrates=3.6, fats=0.4, fiber=0),
        typical_portion_grams=125,
        aliases=("yogur", "yogurt", "yoghurt"),
    ),
)


@cache
def default_catalog() -> FoodCatalog:
    """Return the built-in catalog, constructed once per process."""
    return FoodCatalog(_FOODS)
