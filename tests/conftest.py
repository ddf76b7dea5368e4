from __future__ import annotations

from datetime import datetime

import pytest

from feedrank.domain.entities import AuthorProfile
from tests.stubs import NOW, FakeUserRepository


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository(
        profiles={
            "u-author": AuthorProfile(
                display_name="Ayşe Yılmaz", username="ayse", photo_url="https://cdn/a.png"
            ),
        }
    )
