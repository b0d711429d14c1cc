"""Shared fixtures for API tests."""
import pytest
from httpx import AsyncClient

from tests.api.helpers import bearer, signup_and_signin


@pytest.fixture
async def user_token(client: AsyncClient) -> str:
    """Access token for a user registered through the API."""
    return await signup_and_signin(client, "user@fromtest.com")


@pytest.fixture
def auth_headers(user_token: str) -> dict[str, str]:
    """Authorization header for the default API test user."""
    return bearer(user_token)
