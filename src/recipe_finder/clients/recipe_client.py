import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter

from recipe_finder.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from recipe_finder.schema import AnalyzedInstruction, RecipeSummary, instruction_lines

logger = logging.getLogger(__name__)

_recipes_adapter = TypeAdapter(List[RecipeSummary])
_instructions_adapter = TypeAdapter(List[AnalyzedInstruction])

# pydantic's ValidationError is a ValueError; KeyError/TypeError come from odd ingredient shapes.
# InvalidURL (e.g. an over-long query) is not an HTTPError.
_FAILURES = (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, TypeError)


class RecipeClient:
    """Synchronous client for the Spoonacular recipe endpoints.

    Every call is fail-soft: HTTP errors, transport errors and malformed
    payloads are logged and come back as an empty list.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout, connect=timeout, read=timeout)
        self.transport = transport
        self.search_endpoint = f"{self.base_url}/recipes/findByIngredients"
        self.instructions_endpoint = self.base_url + "/recipes/{id}/analyzedInstructions"

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> "RecipeClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    def find_recipes_by_ingredients(self, ingredients: str, number: int) -> List[RecipeSummary]:
        # ranking=2 favours fewest missing ingredients, ignorePantry skips salt, water, etc.
        params = {
            "ingredients": ingredients,
            "number": number,
            "ranking": 2,
            "ignorePantry": "true",
            "apiKey": self.api_key,
        }
        try:
            response = self._get(self.search_endpoint, params)
            if response is None:
                return []
            return _recipes_adapter.validate_json(response.content)
        except _FAILURES as e:
            logger.error("%s", e)
            return []

    def get_recipe_instructions(self, recipe_id: int) -> List[str]:
        url = self.instructions_endpoint.format(id=recipe_id)
        try:
            response = self._get(url, {"apiKey": self.api_key})
            if response is None:
                return []
            sections = _instructions_adapter.validate_json(response.content)
        except _FAILURES as e:
            logger.error("%s", e)
            return []

        return instruction_lines(sections)

    def _get(self, url: str, params: dict) -> Optional[httpx.Response]:
        """GET ``url``; returns None (after logging) on a non-200 status.

        The client, and with it the connection, is closed before returning.
        """
        with httpx.Client(timeout=self.timeout, transport=self.transport) as http:
            response = http.get(url, params=params)

        logger.debug("GET %s -> %s", response.url.copy_remove_param("apiKey"), response.status_code)
        if response.status_code != 200:
            logger.error("Request failed with code %s", response.status_code)
            if response.text:
                logger.error("%s", response.text)
            return None

        return response
