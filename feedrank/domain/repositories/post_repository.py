from __future__ import annotations

from typing import Protocol

from feedrank.domain.entities import Post


class PostRepository(Protocol):
    """게시물 저장소 인터페이스 (의존성 역전)."""

    async def list_recent(
        self,
        limit: int,
        category: str | None = None,
        start_after: Post | None = None,
    ) -> list[Post]:
        """createdAt 내림차순으로 최대 limit건 조회.

        start_after에는 이전 페이지의 마지막 게시물을 넘긴다. 같은 시각에
        생성된 게시물도 빠짐없이 그 다음 게시물부터 이어서 조회한다.
        """
        ...

    async def get_by_id(self, post_id: str) -> Post | None: ...

    async def get_many(self, post_ids: list[str]) -> list[Post]:
        """여러 게시물 일괄 조회. 없는 게시물은 결과에서 빠진다."""
        ...

    async def list_by_author(self, author_id: str, limit: int = 20) -> list[Post]:
        """한 작성자의 게시물을 최신순으로 조회."""
        ...

    async def list_by_authors(
        self,
        author_ids: list[str],
        limit: int,
        category: str | None = None,
    ) -> list[Post]:
        """주어진 작성자들의 활성 게시물을 최신순으로 조회."""
        ...

    async def list_ids(self) -> list[str]:
        """전체 게시물 ID 목록."""
        ...

    async def get_comment_count(self, post_id: str) -> int | None:
        """게시물 문서에 저장된 댓글 수. 필드나 문서가 없으면 None."""
        ...

    async def count_comments(self, post_id: str) -> int:
        """comments 서브컬렉션의 실제 댓글 수."""
        ...

    async def set_comment_count(self, post_id: str, count: int) -> None: ...
