from typing import Any, Optional

from app.repos.content_repo import ContentRepo, bearer_headers, json_headers


class AuthService:
    """
    Thin wrappers over the content service's users & permissions endpoints.
    Payloads (jwt, user) are handed back as-is, None on any failure.
    """

    def __init__(self, repo: ContentRepo):
        self.repo = repo

    async def login(self, identifier: str, password: str) -> Optional[Any]:
        return await self.repo.fetch_data(
            "/api/auth/local",
            method="POST",
            headers=json_headers(),
            json={"identifier": identifier, "password": password},
        )

    async def register(
        self, username: str, email: str, password: str
    ) -> Optional[Any]:
        return await self.repo.fetch_data(
            "/api/auth/local/register",
            method="POST",
            headers=json_headers(),
            json={"username": username, "email": email, "password": password},
        )

    async def get_profile(self, token: str) -> Optional[Any]:
        return await self.repo.fetch_data(
            "/api/users/me", method="GET", headers=bearer_headers(token)
        )
