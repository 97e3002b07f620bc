import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.schemas.blog import Page, PostSummary, TagDetail
from app.services.posts_service import PostsService
from app.services.tags_service import TagsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=List[TagDetail])
async def list_tags(service: TagsService = Depends(deps.get_tags_service)):
    try:
        return await service.get_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}/posts", response_model=Page[PostSummary])
async def posts_by_tag(
    tag: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(8, ge=1, le=100, alias="pageSize"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Posts carrying the tag slug, newest first."""
    try:
        return await service.get_posts_by_tag(tag, page=page, page_size=page_size)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
