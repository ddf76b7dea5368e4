"""유즈케이스: 댓글 수 동기화.

게시물 문서의 comments 필드를 comments 서브컬렉션의 실제 개수와 맞춘다.
값이 다를 때만 쓴다.
"""

from __future__ import annotations

import logging

from feedrank.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class SyncCommentCountsUseCase:
    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    async def sync_one(self, post_id: str) -> int:
        """단일 게시물 동기화. 실제 댓글 수를 반환."""
        actual = await self._post_repo.count_comments(post_id)
        await self._post_repo.set_comment_count(post_id, actual)
        return actual

    async def execute(self) -> dict[str, int]:
        post_ids = await self._post_repo.list_ids()
        updated = 0
        for post_id in post_ids:
            actual = await self._post_repo.count_comments(post_id)
            stored = await self._post_repo.get_comment_count(post_id)
            if stored != actual:
                await self._post_repo.set_comment_count(post_id, actual)
                updated += 1

        stats = {"checked": len(post_ids), "updated": updated}
        logger.info(f"댓글 수 동기화 완료: 확인 {stats['checked']}건, 수정 {stats['updated']}건")
        return stats
