"""
Tolerant read models for the content service's response envelopes.

Every relation is optional: a missing relation, a relation with
``data: null`` and a relation with an empty list all read as "no entries".
Unknown fields are kept so pass-through values (seo, pagination) survive.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.blog import Pagination, Seo


class MediaAttributes(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: Optional[str] = None


class MediaEntry(BaseModel):
    id: Any = None
    attributes: MediaAttributes = Field(default_factory=MediaAttributes)


class MediaRelation(BaseModel):
    # single media fields come back as an object, multiple media as a list
    data: Union[List[MediaEntry], MediaEntry, None] = None

    def first(self) -> Optional[MediaEntry]:
        if isinstance(self.data, list):
            return self.data[0] if self.data else None
        return self.data


class TagAttributes(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[MediaRelation] = None


class TagEntry(BaseModel):
    id: Any = None
    attributes: TagAttributes = Field(default_factory=TagAttributes)


class TagRelation(BaseModel):
    data: Optional[List[TagEntry]] = None

    def entries(self) -> List[TagEntry]:
        return self.data or []


class PostAttributes(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    slug: Optional[str] = None
    content: Any = None
    createdAt: Optional[str] = None
    cover: Optional[MediaRelation] = None
    tags: Optional[TagRelation] = None
    seo: Optional[Seo] = None


class PostEntry(BaseModel):
    id: int
    attributes: PostAttributes = Field(default_factory=PostAttributes)


class Meta(BaseModel):
    model_config = ConfigDict(extra="allow")

    pagination: Pagination = Field(default_factory=Pagination)


class PostListEnvelope(BaseModel):
    data: List[PostEntry] = Field(default_factory=list)
    meta: Meta = Field(default_factory=Meta)


class TagListEnvelope(BaseModel):
    data: List[TagEntry] = Field(default_factory=list)
    meta: Meta = Field(default_factory=Meta)
