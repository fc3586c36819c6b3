import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

API_KEY_ENV = "SPOONACULAR_API_KEY"
BASE_URL_ENV = "SPOONACULAR_BASE_URL"
DEFAULT_BASE_URL = "https://api.spoonacular.com"
DEFAULT_TIMEOUT = 5.0


class Settings(BaseModel):
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("api_key")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be blank")
        return value


def load_settings() -> Optional[Settings]:
    """Read settings from the environment (and a .env file, if present).

    Returns None when the API key is missing or blank.
    """
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)
    if not api_key or not api_key.strip():
        return None

    base_url = os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL
    return Settings(api_key=api_key, base_url=base_url)
