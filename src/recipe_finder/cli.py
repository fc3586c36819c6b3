import logging
import re
from typing import List, Optional

from recipe_finder.clients import RecipeClient
from recipe_finder.config import API_KEY_ENV, load_settings
from recipe_finder.schema import RecipeSummary

DEFAULT_COUNT = 3
_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


def normalize_ingredients(raw: str) -> str:
    """Trim each comma-separated token, drop blanks, and rejoin with commas."""
    tokens = [token.strip() for token in raw.split(",")]
    return ",".join(token for token in tokens if token)


def parse_count(raw: str, default: int = DEFAULT_COUNT) -> int:
    """Parse a plain ASCII integer; anything else (blanks, padding, "1_000") gives the default."""
    if not _COUNT_PATTERN.fullmatch(raw):
        return default
    return int(raw)


def select_recipe(recipes: List[RecipeSummary], raw: str) -> Optional[RecipeSummary]:
    """Pick a recipe by its 1-based list number.

    Blank input means the user wants to quit and gives None. Anything that
    is not a number in range raises ValueError.
    """
    if not raw.strip():
        return None

    choice = int(raw.strip())
    if not 1 <= choice <= len(recipes):
        raise ValueError(f"Invalid choice {choice}, must be 1-{len(recipes)}")

    return recipes[choice - 1]


def format_recipe(index: int, recipe: RecipeSummary) -> str:
    return (
        f"{index}. {recipe.title}\n"
        f"   Recipe ID#: {recipe.id}\n"
        f"   Used: {recipe.usedIngredientCount}\n"
        f"   Used ingredients: {', '.join(recipe.usedIngredients)}\n"
        f"   Missing: {recipe.missedIngredientCount}\n"
        f"   Missing ingredients: {', '.join(recipe.missedIngredients)}\n"
    )


def run(client: RecipeClient) -> None:
    ingredients = normalize_ingredients(input("Enter ingredients (separated by commas): "))
    if not ingredients:
        print("Please enter at least one ingredient.")
        return

    number = parse_count(input("How many recipes would you like to see? (e.g. 3): "))

    recipes = client.find_recipes_by_ingredients(ingredients, number)
    if not recipes:
        print("No recipes found. Check your ingredients or API key.")
        return

    for idx, recipe in enumerate(recipes, 1):
        print(format_recipe(idx, recipe))

    choice_input = input("Enter a recipe number to see recipe instructions (or press Enter to quit): ")
    try:
        selected = select_recipe(recipes, choice_input)
    except ValueError:
        print("Please enter a valid choice")
        return
    if selected is None:
        return

    steps = client.get_recipe_instructions(selected.id)
    if not steps:
        print("No instructions were found for this recipe.")
        return

    print(f"\n--- Instructions for {selected.title} ---")
    for idx, step in enumerate(steps, 1):
        print(f"{idx}. {step}")


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    settings = load_settings()
    if settings is None:
        print(f"ERROR: {API_KEY_ENV} environment variable is not set.")
        print("Please export it in your shell or add it to a .env file before running the program.")
        return

    run(RecipeClient.from_settings(settings))


if __name__ == "__main__":
    main()
