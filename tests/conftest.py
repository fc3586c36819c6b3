"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from recipe_finder.clients import RecipeClient


@pytest.fixture
def recipe_payload():
    """Two findByIngredients results, in the order the API returned them."""
    return [
        {
            "id": 715497,
            "title": "Chicken Fried Rice",
            "image": "https://img.spoonacular.com/recipes/715497-312x231.jpg",
            "usedIngredientCount": 2,
            "usedIngredients": [
                {"id": 5006, "name": "chicken", "amount": 1.0},
                {"id": 20444, "name": "rice", "amount": 2.0},
            ],
            "missedIngredientCount": 1,
            "missedIngredients": [{"id": 11291, "name": "green onions", "amount": 3.0}],
            "likes": 12,
        },
        {
            "id": 640062,
            "title": "Chicken and Rice Soup",
            "usedIngredientCount": 1,
            "usedIngredients": [{"name": "chicken"}],
            "missedIngredientCount": 0,
            "missedIngredients": [],
        },
    ]


@pytest.fixture
def instructions_payload():
    return [
        {
            "name": "",
            "steps": [
                {"number": 1, "step": "Rinse the rice."},
                {"number": 2, "step": "Brown the chicken."},
            ],
        },
        {
            "name": "For the sauce",
            "steps": [
                {"number": 1, "step": "Whisk soy sauce and ginger."},
                {"number": 2, "step": "Pour over the rice."},
            ],
        },
    ]


@pytest.fixture
def make_client():
    """Build a RecipeClient whose requests are answered by ``handler``.

    Requests seen by the transport are appended to ``client.requests``.
    """
    def _make(handler):
        seen = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = RecipeClient("test-key", transport=httpx.MockTransport(_record))
        client.requests = seen
        return client

    return _make
