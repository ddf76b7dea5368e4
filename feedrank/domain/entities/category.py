from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# 카테고리 필터 없음을 뜻하는 예약값 (저장되지 않음)
ALL_CATEGORIES = "all"


@dataclass
class Category:
    """게시물 분류 카테고리."""

    name: str
    label: str

    id: Optional[str] = None
    color: str = "#888888"


def normalize_category(category: str | None) -> str | None:
    """'all' 또는 빈 값을 None(필터 없음)으로 정규화."""
    if not category or category == ALL_CATEGORIES:
        return None
    return category
