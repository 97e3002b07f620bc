import logging
from typing import Any, Dict, Optional

import httpx

from app.settings import settings

logger = logging.getLogger(__name__)


class ContentRepo:
    """
    Single entry point to the content service.
    Every failure (bad status, network error, unreadable body) is logged
    and comes back as None, so callers only ever see "data" or "no data".
    """

    def __init__(self, client: httpx.AsyncClient, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (
            base_url if base_url is not None else settings.content_api_url
        ).rstrip("/")

    async def fetch_data(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Optional[Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.request(
                method, url, headers=headers, json=json
            )
            if not response.is_success:
                logger.error(
                    f"HTTP error! status: {response.status_code} ({method} {path})"
                )
                return None
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Fetch error for {method} {path}: {e}")
            return None
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Invalid JSON body from {method} {path}: {e}")
            return None

    async def aclose(self):
        await self.client.aclose()


def json_headers(token: Optional[str] = None) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def bearer_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
