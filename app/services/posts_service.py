import asyncio
import logging
from typing import Iterable, List, Optional, Union

from app.repos.content_repo import ContentRepo
from app.schemas.blog import Page, PopularPost, PostDetail, PostSummary
from app.schemas.strapi import PostEntry, PostListEnvelope
from app.services.post_mapper import parse_envelope, to_detail, to_summary
from app.services.ratings_service import RatingsService
from app.services.strapi_query import StrapiQuery
from app.settings import settings

logger = logging.getLogger(__name__)

POSTS_PATH = "/api/posts"


class PostsService:
    def __init__(
        self,
        repo: ContentRepo,
        ratings_service: Optional[RatingsService] = None,
        fanout_limit: Optional[int] = None,
    ):
        self.repo = repo
        self.ratings_service = ratings_service or RatingsService(repo)
        self.fanout_limit = (
            settings.RATING_FANOUT_LIMIT if fanout_limit is None else fanout_limit
        )

    @property
    def base_url(self) -> str:
        return self.repo.base_url

    async def get_all_posts(
        self, page: int = 1, page_size: int = 4
    ) -> Page[PostSummary]:
        """Newest posts first, one page at a time."""
        query = (
            StrapiQuery()
            .populate("cover", "tags")
            .paginate(page, page_size)
            .sort("createdAt", "desc")
        )
        envelope = await self._fetch_posts(query)
        if envelope is None:
            return Page[PostSummary].empty()
        return Page[PostSummary](
            data=[to_summary(post, self.base_url) for post in envelope.data],
            pagination=envelope.meta.pagination,
        )

    async def get_post_by_slug(self, slug: str) -> Optional[PostDetail]:
        query = (
            StrapiQuery()
            .filter("slug", operator="$eq", value=slug)
            .populate("cover", "seo", "tags")
        )
        envelope = await self._fetch_posts(query)
        if envelope is None or not envelope.data:
            logger.info(f"No post found for slug {slug}")
            return None
        return to_detail(envelope.data[0], self.base_url, include_tag_slugs=True)

    async def get_posts_by_tag(
        self, tag: str, page: int = 1, page_size: int = 8
    ) -> Page[PostSummary]:
        query = (
            StrapiQuery()
            .filter("tags", "slug", operator="$eq", value=tag)
            .populate("cover", "tags")
            .paginate(page, page_size)
            .sort("createdAt", "desc")
        )
        envelope = await self._fetch_posts(query)
        if envelope is None:
            return Page[PostSummary].empty()
        return Page[PostSummary](
            data=[
                to_summary(post, self.base_url, include_tag_slugs=True)
                for post in envelope.data
            ],
            pagination=envelope.meta.pagination,
        )

    async def search_posts(
        self, query: str, page: int = 1, page_size: int = 8
    ) -> Page[PostSummary]:
        """Case-insensitive title search."""
        strapi_query = (
            StrapiQuery()
            .filter("title", operator="$containsi", value=query)
            .paginate(page, page_size)
            .populate("cover", "tags")
        )
        envelope = await self._fetch_posts(strapi_query)
        if envelope is None:
            return Page[PostSummary].empty()
        return Page[PostSummary](
            data=[to_summary(post, self.base_url) for post in envelope.data],
            pagination=envelope.meta.pagination,
        )

    async def get_posts_by_page(self, page: int, page_size: int) -> Page[PostDetail]:
        """Unfiltered page of posts including content and seo."""
        query = (
            StrapiQuery()
            .paginate(page, page_size)
            .populate("cover", "seo", "tags")
        )
        envelope = await self._fetch_posts(query)
        if envelope is None:
            return Page[PostDetail].empty()
        return Page[PostDetail](
            data=[
                to_detail(post, self.base_url, include_tag_slugs=False)
                for post in envelope.data
            ],
            pagination=envelope.meta.pagination,
        )

    async def get_similar_posts(
        self, tags: Union[str, Iterable[str]], current_post_id: int
    ) -> List[PostSummary]:
        """Posts sharing any of the given tag names, minus the current post."""
        if isinstance(tags, str):
            tags = [tags]
        tag_names = [tag for tag in tags if tag]
        if not tag_names:
            return []

        query = StrapiQuery()
        for name in tag_names:
            query.filter("tags", "name", operator="$eq", value=name)
        query.populate("cover", "tags")

        envelope = await self._fetch_posts(query)
        if envelope is None:
            return []
        return [
            to_summary(post, self.base_url, include_tag_slugs=True)
            for post in envelope.data
            if post.id != current_post_id
        ]

    async def get_popular_posts_by_rating(self) -> List[PopularPost]:
        """
        All posts with their average rating, best rated first.
        Ratings are looked up concurrently and the call waits for every one.
        """
        envelope = await self._fetch_posts(StrapiQuery().populate("cover", "tags"))
        if envelope is None:
            return []

        semaphore = (
            asyncio.Semaphore(self.fanout_limit) if self.fanout_limit > 0 else None
        )

        async def with_rating(post: PostEntry) -> PopularPost:
            if semaphore is None:
                score = await self._average_score(post)
            else:
                async with semaphore:
                    score = await self._average_score(post)
            summary = to_summary(post, self.base_url)
            return PopularPost(**summary.model_dump(), averageRating=score)

        posts = await asyncio.gather(*(with_rating(post) for post in envelope.data))
        # sorted() is stable, equal ratings keep the service's order
        return sorted(posts, key=lambda p: p.averageRating, reverse=True)

    async def _average_score(self, post: PostEntry) -> float:
        if not post.attributes.slug:
            logger.debug(f"Post {post.id} has no slug, rating defaults to 0")
            return 0.0
        return await self.ratings_service.get_average_score(post.attributes.slug)

    async def _fetch_posts(self, query: StrapiQuery) -> Optional[PostListEnvelope]:
        payload = await self.repo.fetch_data(query.path(POSTS_PATH))
        return parse_envelope(payload, PostListEnvelope)
