"""유즈케이스: 작성자 프로필 피드."""

from __future__ import annotations

from feedrank.application.use_cases.author_lookup import with_author
from feedrank.domain.entities import Post
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository


class GetUserPostsUseCase:
    def __init__(self, post_repo: PostRepository, user_repo: UserRepository):
        self._post_repo = post_repo
        self._user_repo = user_repo

    async def execute(self, author_id: str, limit: int = 20) -> list[Post]:
        if limit <= 0:
            raise ValueError(f"limit은 양수여야 합니다: {limit}")
        posts = await self._post_repo.list_by_author(author_id, limit)
        if not posts:
            return []
        # 모든 게시물의 작성자가 같으므로 프로필은 한 번만 조회
        profile = await self._user_repo.get_profile(author_id)
        return [with_author(p, profile) for p in posts]
