import logging
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.schemas.blog import PostDetail, PostSummary, Tag, TagDetail
from app.schemas.strapi import MediaRelation, PostEntry, TagEntry, TagRelation

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


def parse_envelope(payload: Any, model: Type[EnvelopeT]) -> Optional[EnvelopeT]:
    """Read a raw response into an envelope model, None if the shape is unusable."""
    if payload is None:
        return None
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Unexpected {model.__name__} shape from content service: {e}")
        return None


def resolve_media_url(media: Optional[MediaRelation], base_url: str) -> Optional[str]:
    """
    Turn a media relation into an absolute URL on the content service.
    Returns None when there is no media or it has no url.
    """
    entry = media.first() if media else None
    relative_url = entry.attributes.url if entry else None
    return f"{base_url}{relative_url}" if relative_url else None


def map_tags(relation: Optional[TagRelation], include_slug: bool = False) -> List[Tag]:
    entries = relation.entries() if relation else []
    return [
        Tag(
            name=entry.attributes.name,
            slug=entry.attributes.slug if include_slug else None,
        )
        for entry in entries
    ]


def to_summary(
    post: PostEntry, base_url: str, include_tag_slugs: bool = False
) -> PostSummary:
    attributes = post.attributes
    return PostSummary(
        id=post.id,
        title=attributes.title,
        slug=attributes.slug,
        coverUrl=resolve_media_url(attributes.cover, base_url),
        tags=map_tags(attributes.tags, include_slug=include_tag_slugs),
        createdAt=attributes.createdAt,
    )


def to_detail(
    post: PostEntry, base_url: str, include_tag_slugs: bool = True
) -> PostDetail:
    attributes = post.attributes
    return PostDetail(
        id=post.id,
        title=attributes.title,
        slug=attributes.slug,
        content=attributes.content,
        cover=resolve_media_url(attributes.cover, base_url),
        tags=map_tags(attributes.tags, include_slug=include_tag_slugs),
        seo=attributes.seo,
        createdAt=attributes.createdAt,
    )


def to_tag_detail(tag: TagEntry, base_url: str) -> TagDetail:
    attributes = tag.attributes
    return TagDetail(
        id=tag.id,
        name=attributes.name,
        slug=attributes.slug,
        image=resolve_media_url(attributes.image, base_url),
    )
