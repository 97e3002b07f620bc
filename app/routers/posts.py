import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.schemas.blog import (
    Page,
    PopularPost,
    PostDetail,
    PostSummary,
    RatingRequest,
    RatingSummary,
)
from app.security import get_bearer_token
from app.services.posts_service import PostsService
from app.services.ratings_service import RatingsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=Page[PostSummary])
async def list_posts(
    page: int = Query(1, ge=1),
    page_size: int = Query(4, ge=1, le=100, alias="pageSize"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Newest posts, paginated."""
    try:
        return await service.get_all_posts(page=page, page_size=page_size)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/page", response_model=Page[PostDetail])
async def list_posts_with_content(
    page: int = Query(..., ge=1),
    page_size: int = Query(..., ge=1, le=100, alias="pageSize"),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return await service.get_posts_by_page(page=page, page_size=page_size)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts page {page}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/search", response_model=Page[PostSummary])
async def search_posts(
    q: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    page_size: int = Query(8, ge=1, le=100, alias="pageSize"),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return await service.search_posts(q, page=page, page_size=page_size)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error searching posts for {q!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to search posts")


@router.get("/posts/popular", response_model=List[PopularPost])
async def popular_posts(service: PostsService = Depends(deps.get_posts_service)):
    """All posts ordered by average rating, best first."""
    try:
        return await service.get_popular_posts_by_rating()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error ranking posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/similar", response_model=List[PostSummary])
async def similar_posts(
    tags: List[str] = Query(...),
    current_post_id: int = Query(..., alias="currentPostId"),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return await service.get_similar_posts(tags, current_post_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error finding posts similar to {current_post_id}: {e}"
        )
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post_by_slug(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}/reviews", response_model=RatingSummary)
async def get_reviews(
    slug: str,
    ratings: RatingsService = Depends(deps.get_ratings_service),
):
    try:
        return await ratings.get_comments_and_ratings(slug)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving reviews for {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve reviews")


@router.post("/posts/{post_id}/reviews")
async def submit_review(
    post_id: int,
    request: RatingRequest,
    token: str = Depends(get_bearer_token),
    ratings: RatingsService = Depends(deps.get_ratings_service),
) -> Any:
    try:
        result = await ratings.submit_rating(
            post_id, request.comment, request.score, token
        )
        if result is None:
            raise HTTPException(status_code=502, detail="Review was not accepted")
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error submitting review for post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit review")
