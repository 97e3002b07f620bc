from fastapi import Depends, Request

from app.repos.content_repo import ContentRepo
from app.services.auth_service import AuthService
from app.services.posts_service import PostsService
from app.services.ratings_service import RatingsService
from app.services.tags_service import TagsService


def get_content_repo(request: Request) -> ContentRepo:
    return request.app.state.content_repo


def get_ratings_service(repo=Depends(get_content_repo)):
    return RatingsService(repo)


def get_posts_service(
    repo=Depends(get_content_repo),
    ratings_service=Depends(get_ratings_service),
):
    return PostsService(repo=repo, ratings_service=ratings_service)


def get_tags_service(repo=Depends(get_content_repo)):
    return TagsService(repo)


def get_auth_service(repo=Depends(get_content_repo)):
    return AuthService(repo)
