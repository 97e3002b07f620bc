from typing import Optional

import httpx

from app.settings import settings


def get_http_client(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the shared async HTTP client for the content service.
    Called at runtime so importing the app never opens connections.
    Redirects are followed, so a moved resource still yields its JSON body.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.REQUEST_TIMEOUT),
        follow_redirects=True,
        transport=transport,
    )
