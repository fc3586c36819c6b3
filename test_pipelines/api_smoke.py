"""
Live check that the Spoonacular key, the network and the API all work.

Run:
  python test_pipelines/api_smoke.py

Requires SPOONACULAR_API_KEY in the environment or a .env file.
"""
import logging

from recipe_finder.cli import format_recipe
from recipe_finder.clients import RecipeClient
from recipe_finder.config import API_KEY_ENV, load_settings


def main() -> None:
    settings = load_settings()
    if settings is None:
        print(f"ERROR: {API_KEY_ENV} environment variable is not set.")
        return

    client = RecipeClient.from_settings(settings)
    recipes = client.find_recipes_by_ingredients("chicken, rice", 3)

    if not recipes:
        print("ERROR: No recipes found for those ingredients.")
    else:
        for idx, recipe in enumerate(recipes, 1):
            print(format_recipe(idx, recipe))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    main()
