from .recipe_client import RecipeClient
__all__ = ["RecipeClient"]
