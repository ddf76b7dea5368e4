"""유즈케이스: 최신 게시물 피드."""

from __future__ import annotations

from feedrank.application.use_cases.author_lookup import decorate_authors
from feedrank.domain.entities import Post
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository
from feedrank.domain.value_objects.feed_request import FeedRequest


class GetRecentPostsUseCase:
    def __init__(self, post_repo: PostRepository, user_repo: UserRepository):
        self._post_repo = post_repo
        self._user_repo = user_repo

    async def execute(self, request: FeedRequest) -> list[Post]:
        category = request.category_filter
        posts = await self._post_repo.list_recent(request.limit, category=category)
        if category:
            posts = [p for p in posts if p.category == category]
        return await decorate_authors(posts[: request.limit], self._user_repo)
