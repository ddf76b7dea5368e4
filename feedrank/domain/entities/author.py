from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_DISPLAY_NAME = "Anonim"
DEFAULT_USERNAME = "anonim"


@dataclass
class AuthorProfile:
    """게시물 표시에 필요한 작성자 메타데이터."""

    display_name: str = DEFAULT_DISPLAY_NAME
    username: str = DEFAULT_USERNAME
    photo_url: Optional[str] = None
