from __future__ import annotations

from typing import Protocol

from feedrank.domain.entities import AuthorProfile


class UserRepository(Protocol):
    """사용자 프로필 / 팔로우 관계 저장소 인터페이스."""

    async def get_profile(self, user_id: str) -> AuthorProfile | None: ...

    async def get_profiles(self, user_ids: list[str]) -> dict[str, AuthorProfile]:
        """여러 사용자 프로필 일괄 조회. 없는 사용자는 결과에서 빠진다."""
        ...

    async def get_following_ids(self, user_id: str) -> list[str]:
        """user_id가 팔로우하는 사용자 ID 목록."""
        ...

    async def get_bookmark_ids(self, user_id: str) -> list[str]:
        """사용자가 북마크한 게시물 ID 목록. 사용자가 없으면 빈 목록."""
        ...
