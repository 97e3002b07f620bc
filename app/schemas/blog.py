from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Tag(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None


class TagDetail(Tag):
    id: Any = None
    image: Optional[str] = None


class Seo(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    SeoTitle: Optional[str] = None
    SeoDescription: Optional[str] = None


class PostSummary(BaseModel):
    id: int
    title: Optional[str] = None
    slug: Optional[str] = None
    coverUrl: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    createdAt: Optional[str] = None


class PopularPost(PostSummary):
    averageRating: float = 0


class PostDetail(BaseModel):
    id: int
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Any = None  # markdown string or rich-text blocks
    cover: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    seo: Optional[Seo] = None
    createdAt: Optional[str] = None


class Pagination(BaseModel):
    model_config = ConfigDict(extra="allow")

    page: Optional[int] = None
    pageSize: Optional[int] = None
    pageCount: Optional[int] = None
    total: Optional[int] = None


class Page(BaseModel, Generic[T]):
    data: List[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @classmethod
    def empty(cls):
        """Stand-in returned when the content service gave us nothing."""
        return cls(data=[], pagination=Pagination(pageCount=1))


class Review(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    comment: Any = None
    score: Any = None


class RatingSummary(BaseModel):
    comments: List[Review] = Field(default_factory=list)
    averageScore: float = 0
    reviewsCount: int = 0


class RatingRequest(BaseModel):
    comment: str
    score: float = Field(..., ge=0)

    # { "comment": "Great read!", "score": 5 }
