from __future__ import annotations

from feedrank.application.use_cases.author_lookup import with_author
from feedrank.domain.entities import Post
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository


class GetPostUseCase:
    """단일 게시물 조회 (작성자 정보 포함)."""

    def __init__(self, post_repo: PostRepository, user_repo: UserRepository):
        self._post_repo = post_repo
        self._user_repo = user_repo

    async def execute(self, post_id: str) -> Post | None:
        post = await self._post_repo.get_by_id(post_id)
        if post is None:
            return None
        profile = await self._user_repo.get_profile(post.author_id) if post.author_id else None
        return with_author(post, profile)
