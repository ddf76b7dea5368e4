"""후보 게시물 수집기.

자격 필터에서 저품질 게시물 대부분이 탈락하므로 요청 수보다 훨씬 많은
후보를 가져온다. 첫 페이지로 충분하지 않으면 상한에 도달할 때까지
마지막 게시물을 커서로 이어서 가져온다.
"""

from __future__ import annotations

import logging

from feedrank.domain.entities import Post, normalize_category
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.services.popularity import is_qualified

logger = logging.getLogger(__name__)


class CandidateFetcher:
    def __init__(
        self,
        post_repo: PostRepository,
        page_size: int = 100,
        category_page_size: int = 150,
        max_candidates: int = 600,
    ):
        self._post_repo = post_repo
        self._page_size = page_size
        self._category_page_size = category_page_size
        self._max_candidates = max_candidates

    def page_size_for(self, category: str | None) -> int:
        return self._category_page_size if normalize_category(category) else self._page_size

    async def fetch(self, requested_count: int, category: str | None = None) -> list[Post]:
        """최신순 후보 풀을 반환. 저장소 오류(StoreUnavailableError)는 그대로 전파."""
        category = normalize_category(category)
        page_size = self.page_size_for(category)

        pool: list[Post] = []
        qualified = 0
        scanned = 0
        cursor = None

        while scanned < self._max_candidates:
            size = min(page_size, self._max_candidates - scanned)
            page = await self._post_repo.list_recent(size, category=category, start_after=cursor)
            scanned += len(page)

            for post in page:
                if category and post.category != category:
                    continue
                pool.append(post)
                if is_qualified(post):
                    qualified += 1

            # 저장소 소진 또는 충분한 후보 확보
            if len(page) < size or qualified >= requested_count:
                break
            cursor = page[-1]

        logger.info(
            f"후보 수집: {len(pool)}건 (스캔 {scanned}건, 자격 {qualified}건, "
            f"카테고리 {category or 'all'})"
        )
        return pool
