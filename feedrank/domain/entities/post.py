from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class PostImage:
    url: str
    position: str = "top"


@dataclass
class Post:
    """블로그 게시물 도메인 엔티티.

    랭킹 엔진은 이 엔티티를 읽기 전용 스냅샷으로만 다룬다.
    좋아요/북마크/댓글 수 변경은 외부 협력자가 담당한다.
    """

    id: str
    content: str = ""
    title: str = ""
    category: str = ""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # 참여 데이터 (likes/bookmarks는 사용자 ID 집합)
    likes: frozenset[str] = field(default_factory=frozenset)
    bookmarks: frozenset[str] = field(default_factory=frozenset)
    comments: int = 0
    views: int = 0

    # 미디어 / 태그
    image_url: Optional[str] = None
    images: list[PostImage] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    status: str = "active"

    # 작성자 (표시용 정보는 조회 시점에 채워짐)
    author_id: Optional[str] = None
    author_name: str = "Anonim"
    author_username: str = "anonim"
    author_avatar: Optional[str] = None

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def bookmark_count(self) -> int:
        return len(self.bookmarks)

    @property
    def has_media(self) -> bool:
        return bool(self.image_url) or len(self.images) > 0


@dataclass
class ScoredPost:
    """랭킹 계산 중에만 존재하는 파생 점수 묶음. 호출자에게 노출하지 않는다."""

    post: Post
    engagement_score: float
    time_factor: float
    quality_bonus: float
    popularity_score: float
