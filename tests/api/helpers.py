"""Helpers shared by API tests."""
from httpx import AsyncClient

DEFAULT_PASSWORD = "fromtest"


async def signup_and_signin(
    client: AsyncClient,
    email: str,
    password: str = DEFAULT_PASSWORD,
) -> str:
    """Register a user through the API and return a fresh access token from signin."""
    response = await client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text

    response = await client.post("/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}
