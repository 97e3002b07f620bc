import logging
import urllib.parse
from typing import Any, List, Optional

from pydantic import ValidationError

from app.repos.content_repo import ContentRepo, json_headers
from app.schemas.blog import RatingSummary, Review

logger = logging.getLogger(__name__)

REVIEWS_PATH = "/api/ratings/reviews"


class RatingsService:
    def __init__(self, repo: ContentRepo):
        self.repo = repo

    async def get_comments_and_ratings(self, slug: str) -> RatingSummary:
        """Reviews for one post plus its average score and review count."""
        response = await self.repo.fetch_data(f"{REVIEWS_PATH}/{_quote(slug)}")
        if not isinstance(response, dict):
            return RatingSummary()

        return RatingSummary(
            comments=_to_reviews(response.get("reviews"), slug),
            averageScore=_to_score(response.get("averageScore"), slug),
            reviewsCount=_to_count(response.get("reviewsCount"), slug),
        )

    async def get_average_score(self, slug: str) -> float:
        """Average score from the stats resource, 0 when it is unavailable."""
        stats = await self.repo.fetch_data(f"{REVIEWS_PATH}/{_quote(slug)}/stats")
        if not isinstance(stats, dict):
            return 0.0
        return _to_score(stats.get("averageScore"), slug)

    async def submit_rating(
        self, post_id, comment: str, score: float, token: str
    ) -> Optional[Any]:
        """Post a comment/score pair as the token's user. Raw response or None."""
        return await self.repo.fetch_data(
            f"{REVIEWS_PATH}/{_quote(str(post_id))}",
            method="POST",
            headers=json_headers(token),
            json={"comment": comment, "score": score},
        )


def _quote(segment: str) -> str:
    return urllib.parse.quote(segment, safe="")


def _to_score(value, slug: str) -> float:
    if not value:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric averageScore {value!r} for {slug}")
        return 0.0


def _to_count(value, slug: str) -> int:
    if not value:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric reviewsCount {value!r} for {slug}")
        return 0


def _to_reviews(entries, slug: str) -> List[Review]:
    # one unreadable entry is dropped, the rest of the summary survives
    if not isinstance(entries, list):
        return []
    reviews = []
    for entry in entries:
        try:
            reviews.append(Review.model_validate(entry))
        except ValidationError:
            logger.warning(f"Skipping unreadable review {entry!r} for {slug}")
    return reviews
