"""유즈케이스: 팔로잉 피드.

팔로우하는 사용자들의 활성 게시물을 10명 단위로 나눠 조회하고
(Firestore 'in' 연산자는 최대 10개 값) 최신순으로 합친다.
"""

from __future__ import annotations

import asyncio
import logging
import math
from datetime import datetime, timezone

from feedrank.application.use_cases.author_lookup import decorate_authors
from feedrank.domain.entities import Post
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository
from feedrank.domain.value_objects.feed_request import FeedRequest

logger = logging.getLogger(__name__)

IN_QUERY_LIMIT = 10

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class GetFollowingPostsUseCase:
    def __init__(self, post_repo: PostRepository, user_repo: UserRepository):
        self._post_repo = post_repo
        self._user_repo = user_repo

    async def execute(self, request: FeedRequest) -> list[Post]:
        if not request.viewer_id:
            raise ValueError("팔로잉 피드에는 viewer_id가 필요합니다")

        following = await self._user_repo.get_following_ids(request.viewer_id)
        if not following:
            return []

        chunks = [
            following[i : i + IN_QUERY_LIMIT]
            for i in range(0, len(following), IN_QUERY_LIMIT)
        ]
        per_chunk = math.ceil(request.limit / len(chunks))
        results = await asyncio.gather(*[
            self._post_repo.list_by_authors(chunk, per_chunk, category=request.category_filter)
            for chunk in chunks
        ])

        posts = [p for page in results for p in page]
        posts.sort(key=lambda p: p.created_at or _EPOCH, reverse=True)
        logger.info(
            f"팔로잉 피드: {request.viewer_id}, 팔로잉 {len(following)}명, "
            f"게시물 {len(posts)}건"
        )
        return await decorate_authors(posts[: request.limit], self._user_repo)
