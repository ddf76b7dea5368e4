from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from feedrank.domain.entities import normalize_category


@dataclass(frozen=True)
class FeedRequest:
    """피드 조회 요청 컨텍스트.

    화면 쪽 전역 상태 대신 조회에 필요한 값을 명시적으로 전달한다.
    """

    limit: int
    category: Optional[str] = None
    viewer_id: Optional[str] = None
    now: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"limit은 양수여야 합니다: {self.limit}")

    @property
    def category_filter(self) -> str | None:
        return normalize_category(self.category)

    def evaluated_at(self) -> datetime:
        return self.now or datetime.now(timezone.utc)
