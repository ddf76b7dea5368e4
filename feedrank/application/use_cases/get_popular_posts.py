"""유즈케이스: 인기 게시물 피드.

후보 수집 → 점수 계산/자격 필터 → 정렬/자르기 → 작성자 정보 채우기.
호출마다 새로 계산하며 점수는 어디에도 저장하지 않는다.
"""

from __future__ import annotations

import logging

from feedrank.application.use_cases.author_lookup import decorate_authors
from feedrank.application.use_cases.fetch_candidates import CandidateFetcher
from feedrank.domain.entities import Post
from feedrank.domain.repositories.user_repository import UserRepository
from feedrank.domain.services.popularity import rank_posts
from feedrank.domain.value_objects.feed_request import FeedRequest

logger = logging.getLogger(__name__)


class GetPopularPostsUseCase:
    def __init__(self, fetcher: CandidateFetcher, user_repo: UserRepository):
        self._fetcher = fetcher
        self._user_repo = user_repo

    async def execute(self, request: FeedRequest) -> list[Post]:
        candidates = await self._fetcher.fetch(request.limit, request.category_filter)
        ranked = rank_posts(candidates, request.limit, request.evaluated_at())

        if not ranked:
            logger.info(f"인기 게시물 없음 (후보 {len(candidates)}건)")
            return []

        logger.info(f"인기 게시물 {len(ranked)}건 반환 (후보 {len(candidates)}건)")
        return await decorate_authors(ranked, self._user_repo)
