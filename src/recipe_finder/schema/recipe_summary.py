from pydantic import BaseModel, ConfigDict, field_validator
from typing import Tuple


class RecipeSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    usedIngredientCount: int
    usedIngredients: Tuple[str, ...]
    missedIngredientCount: int
    missedIngredients: Tuple[str, ...]

    @field_validator("usedIngredients", "missedIngredients", mode="before")
    @classmethod
    def ingredient_names(cls, value):
        # Upstream sends ingredient objects; only the name is kept
        if not isinstance(value, list):
            return value
        return [item["name"] if isinstance(item, dict) else item for item in value]
