from .clients import RecipeClient
from .config import Settings, load_settings
from .schema import RecipeSummary
__all__ = ["RecipeClient", "Settings", "load_settings", "RecipeSummary"]
