import asyncio

import httpx

from app.db.content_api import get_http_client
from app.repos.content_repo import ContentRepo

BASE_URL = "http://cms.test"


class FakeContentService:
    """
    In-memory stand-in for the content service, plugged into httpx.MockTransport.
    Routes map a URL path to a JSON body, an httpx.Response or a callable.
    Unknown paths answer 404. Every request is recorded in order.
    """

    def __init__(self, routes: dict | None = None):
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": {"status": 404}})
        if isinstance(route, httpx.Response):
            return route
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def make_repo(handler, base_url: str = BASE_URL) -> ContentRepo:
    client = get_http_client(transport=httpx.MockTransport(handler))
    return ContentRepo(client, base_url=base_url)


# --- Content service payload helpers ---


def media(url: str | None, many: bool = True) -> dict:
    entry = {"id": 1, "attributes": {"url": url}}
    return {"data": [entry] if many else entry}


def tag_entry(name: str, slug: str | None = None, image_url: str | None = None, id=1):
    attributes = {"name": name, "slug": slug or name.lower()}
    if image_url is not None:
        attributes["image"] = media(image_url, many=False)
    return {"id": id, "attributes": attributes}


def post_entry(
    id: int,
    title: str = "Title",
    slug: str | None = None,
    cover_url: str | None = None,
    tags: list | None = None,
    content=None,
    seo: dict | None = None,
    created_at: str = "2024-01-01T00:00:00.000Z",
) -> dict:
    attributes = {
        "title": title,
        "slug": slug or f"post-{id}",
        "createdAt": created_at,
    }
    if cover_url is not None:
        attributes["cover"] = media(cover_url)
    if tags is not None:
        attributes["tags"] = {"data": tags}
    if content is not None:
        attributes["content"] = content
    if seo is not None:
        attributes["seo"] = seo
    return {"id": id, "attributes": attributes}


def envelope(entries: list, pagination: dict | None = None) -> dict:
    return {
        "data": entries,
        "meta": {
            "pagination": pagination
            or {"page": 1, "pageSize": 25, "pageCount": 1, "total": len(entries)}
        },
    }


class FakeRatingsService:
    """
    Ratings stand-in that serves scores per slug and tracks how many
    lookups were in flight at once.
    """

    def __init__(self, scores: dict[str, float], delay: float = 0.0):
        self.scores = scores
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_average_score(self, slug: str) -> float:
        self.calls.append(slug)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            return self.scores.get(slug, 0.0)
        finally:
            self.in_flight -= 1


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, **returns):
        self.returns = returns
        self.calls = []

    def _result(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self.returns.get(name)

    async def get_all_posts(self, page=1, page_size=4):
        return self._result("get_all_posts", page=page, page_size=page_size)

    async def get_post_by_slug(self, slug):
        return self._result("get_post_by_slug", slug)

    async def get_posts_by_tag(self, tag, page=1, page_size=8):
        return self._result("get_posts_by_tag", tag, page=page, page_size=page_size)

    async def search_posts(self, query, page=1, page_size=8):
        return self._result("search_posts", query, page=page, page_size=page_size)

    async def get_posts_by_page(self, page, page_size):
        return self._result("get_posts_by_page", page=page, page_size=page_size)

    async def get_similar_posts(self, tags, current_post_id):
        return self._result("get_similar_posts", list(tags), current_post_id)

    async def get_popular_posts_by_rating(self):
        return self._result("get_popular_posts_by_rating")
