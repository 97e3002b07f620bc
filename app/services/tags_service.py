from typing import List

from app.repos.content_repo import ContentRepo
from app.schemas.blog import TagDetail
from app.schemas.strapi import TagListEnvelope
from app.services.post_mapper import parse_envelope, to_tag_detail
from app.services.strapi_query import StrapiQuery


class TagsService:
    def __init__(self, repo: ContentRepo):
        self.repo = repo

    async def get_tags(self) -> List[TagDetail]:
        path = StrapiQuery().populate("image").path("/api/tags")
        envelope = parse_envelope(await self.repo.fetch_data(path), TagListEnvelope)
        if envelope is None:
            return []
        return [to_tag_detail(tag, self.repo.base_url) for tag in envelope.data]
