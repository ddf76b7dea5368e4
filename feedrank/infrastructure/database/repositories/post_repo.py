"""PostRepository: Firebase Firestore 구현.

Firestore 컬렉션: 'posts'
서브컬렉션: 'posts/{id}/comments'
필드명은 모바일 클라이언트가 쓰는 camelCase를 그대로 따른다.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

from feedrank.domain.entities import Post, PostImage
from feedrank.infrastructure.database.store_call import run_store_call

# ─── Firestore 문서 → 도메인 엔티티 변환 (비정상 값은 정규화) ───


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return _to_datetime(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def _to_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return max(int(value), 0)


def _to_id_set(value: Any) -> frozenset[str]:
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(str(v) for v in value if v)


def _to_images(value: Any) -> list[PostImage]:
    if not isinstance(value, list):
        return []
    images = []
    for item in value:
        if isinstance(item, dict) and item.get("url"):
            images.append(PostImage(url=item["url"], position=item.get("position", "top")))
        elif isinstance(item, str) and item:
            images.append(PostImage(url=item))
    return images


def post_from_data(doc_id: str, d: dict[str, Any]) -> Post:
    tags = d.get("tags")
    return Post(
        id=doc_id,
        title=d.get("title") or "",
        content=d.get("content") or "",
        category=d.get("category") or "",
        created_at=_to_datetime(d.get("createdAt")),
        updated_at=_to_datetime(d.get("updatedAt")),
        likes=_to_id_set(d.get("likes")),
        bookmarks=_to_id_set(d.get("bookmarks")),
        comments=_to_count(d.get("comments")),
        views=_to_count(d.get("views")),
        image_url=d.get("imageUrl") or None,
        images=_to_images(d.get("images")),
        tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
        status=d.get("status", "active"),
        author_id=d.get("authorId"),
    )


def _post_from_doc(doc) -> Post:
    return post_from_data(doc.id, doc.to_dict() or {})


class FirestorePostRepository:
    """Firestore 기반 PostRepository 구현."""

    COLLECTION = "posts"
    COMMENTS = "comments"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def list_recent(
        self,
        limit: int,
        category: str | None = None,
        start_after: Post | None = None,
    ) -> list[Post]:
        def _get():
            q = self._col()
            if category:
                q = q.where("category", "==", category)
            q = q.order_by("createdAt", direction="DESCENDING")
            if start_after is not None:
                q = q.start_after(self._cursor_for(start_after))
            q = q.limit(limit)
            return [_post_from_doc(doc) for doc in q.stream()]

        return await run_store_call("posts.list_recent", _get)

    def _cursor_for(self, post: Post):
        # 스냅샷 커서는 같은 createdAt을 가진 게시물도 문서 ID 순으로 이어간다
        snapshot = self._col().document(post.id).get()
        if snapshot.exists:
            return snapshot
        # 페이지 사이에 삭제된 게시물이면 시각 커서로 대체
        return {"createdAt": post.created_at}

    async def get_by_id(self, post_id: str) -> Post | None:
        def _get():
            doc = self._col().document(post_id).get()
            return _post_from_doc(doc) if doc.exists else None

        return await run_store_call("posts.get_by_id", _get)

    async def get_many(self, post_ids: list[str]) -> list[Post]:
        def _get():
            refs = [self._col().document(pid) for pid in post_ids]
            return [_post_from_doc(doc) for doc in self._db.get_all(refs) if doc.exists]

        if not post_ids:
            return []
        return await run_store_call("posts.get_many", _get)

    async def list_by_author(self, author_id: str, limit: int = 20) -> list[Post]:
        def _get():
            q = (
                self._col()
                .where("authorId", "==", author_id)
                .order_by("createdAt", direction="DESCENDING")
                .limit(limit)
            )
            return [_post_from_doc(doc) for doc in q.stream()]

        return await run_store_call("posts.list_by_author", _get)

    async def list_by_authors(
        self,
        author_ids: list[str],
        limit: int,
        category: str | None = None,
    ) -> list[Post]:
        def _get():
            q = (
                self._col()
                .where("authorId", "in", author_ids)
                .where("status", "==", "active")
            )
            if category:
                q = q.where("category", "==", category)
            q = q.order_by("createdAt", direction="DESCENDING").limit(limit)
            return [_post_from_doc(doc) for doc in q.stream()]

        return await run_store_call("posts.list_by_authors", _get)

    async def list_ids(self) -> list[str]:
        def _get():
            return [doc.id for doc in self._col().stream()]

        return await run_store_call("posts.list_ids", _get)

    async def get_comment_count(self, post_id: str) -> int | None:
        def _get():
            doc = self._col().document(post_id).get()
            if not doc.exists:
                return None
            return (doc.to_dict() or {}).get("comments")

        return await run_store_call("posts.get_comment_count", _get)

    async def count_comments(self, post_id: str) -> int:
        def _count():
            comments = self._col().document(post_id).collection(self.COMMENTS)
            return sum(1 for _ in comments.stream())

        return await run_store_call("posts.count_comments", _count)

    async def set_comment_count(self, post_id: str, count: int) -> None:
        def _update():
            self._col().document(post_id).update({"comments": max(count, 0)})

        await run_store_call("posts.set_comment_count", _update)
