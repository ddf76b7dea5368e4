"""유즈케이스: 북마크한 게시물 목록.

users/{id}.bookmarks의 게시물 ID를 한 번의 일괄 조회로 가져와
최신순으로 정렬한다. 삭제된 게시물은 조용히 빠진다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from feedrank.application.use_cases.author_lookup import decorate_authors
from feedrank.domain.entities import Post
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class GetBookmarkedPostsUseCase:
    def __init__(self, post_repo: PostRepository, user_repo: UserRepository):
        self._post_repo = post_repo
        self._user_repo = user_repo

    async def execute(self, user_id: str) -> list[Post]:
        bookmark_ids = await self._user_repo.get_bookmark_ids(user_id)
        if not bookmark_ids:
            return []

        posts = await self._post_repo.get_many(bookmark_ids)
        posts.sort(key=lambda p: p.created_at or _EPOCH, reverse=True)
        if len(posts) < len(bookmark_ids):
            logger.info(
                f"북마크 {user_id}: {len(bookmark_ids) - len(posts)}건은 삭제된 게시물"
            )
        return await decorate_authors(posts, self._user_repo)
