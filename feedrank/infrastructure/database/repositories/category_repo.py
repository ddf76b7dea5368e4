"""CategoryRepository: Firebase Firestore 구현.

Firestore 컬렉션: 'categories'
문서 ID: 카테고리 name (예: 'Yazılım', 'Python')
"""

from __future__ import annotations

from feedrank.domain.entities import Category
from feedrank.infrastructure.database.store_call import run_store_call


def _category_from_doc(doc) -> Category:
    d = doc.to_dict() or {}
    return Category(
        id=doc.id,
        name=d.get("name", doc.id),
        label=d.get("label", doc.id),
        color=d.get("color", "#888888"),
    )


class FirestoreCategoryRepository:
    COLLECTION = "categories"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def get_all(self) -> list[Category]:
        def _get():
            return [_category_from_doc(d) for d in self._col().stream()]

        return await run_store_call("categories.get_all", _get)

    async def upsert(self, category: Category) -> Category:
        def _upsert():
            self._col().document(category.name).set({
                "name": category.name,
                "label": category.label,
                "color": category.color,
            })
            category.id = category.name
            return category

        return await run_store_call("categories.upsert", _upsert)
