from types import SimpleNamespace

from app.dependencies import (
    get_auth_service,
    get_content_repo,
    get_posts_service,
    get_ratings_service,
    get_tags_service,
)
from app.services.auth_service import AuthService
from app.services.posts_service import PostsService
from app.services.ratings_service import RatingsService
from app.services.tags_service import TagsService


class FakeRepo:
    base_url = "http://cms.test"


def test_get_content_repo_reads_app_state():
    repo = FakeRepo()
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(content_repo=repo)))

    assert get_content_repo(request) is repo


def test_get_posts_service_constructs_service():
    repo = FakeRepo()
    ratings = get_ratings_service(repo=repo)

    svc = get_posts_service(repo=repo, ratings_service=ratings)

    assert isinstance(ratings, RatingsService)
    assert isinstance(svc, PostsService)
    assert svc.repo is repo
    assert svc.ratings_service is ratings


def test_get_tags_and_auth_services_share_repo():
    repo = FakeRepo()

    tags = get_tags_service(repo=repo)
    auth = get_auth_service(repo=repo)

    assert isinstance(tags, TagsService) and tags.repo is repo
    assert isinstance(auth, AuthService) and auth.repo is repo
