from __future__ import annotations

from typing import Protocol

from feedrank.domain.entities import Category


class CategoryRepository(Protocol):
    async def get_all(self) -> list[Category]: ...

    async def upsert(self, category: Category) -> Category: ...
