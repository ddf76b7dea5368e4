"""UserRepository: Firebase Firestore 구현.

Firestore 컬렉션: 'users'
서브컬렉션: 'users/{id}/following' (문서 ID = 팔로우 대상 사용자 ID)
북마크: 'users/{id}' 문서의 bookmarks 필드 (게시물 ID 배열)
"""

from __future__ import annotations

from feedrank.domain.entities import AuthorProfile
from feedrank.domain.entities.author import DEFAULT_DISPLAY_NAME, DEFAULT_USERNAME
from feedrank.infrastructure.database.store_call import run_store_call


def _profile_from_doc(doc) -> AuthorProfile:
    d = doc.to_dict() or {}
    return AuthorProfile(
        display_name=d.get("displayName") or DEFAULT_DISPLAY_NAME,
        username=d.get("username") or DEFAULT_USERNAME,
        photo_url=d.get("photoURL"),
    )


class FirestoreUserRepository:
    COLLECTION = "users"
    FOLLOWING = "following"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def get_profile(self, user_id: str) -> AuthorProfile | None:
        def _get():
            doc = self._col().document(user_id).get()
            return _profile_from_doc(doc) if doc.exists else None

        return await run_store_call("users.get_profile", _get)

    async def get_profiles(self, user_ids: list[str]) -> dict[str, AuthorProfile]:
        def _get():
            refs = [self._col().document(uid) for uid in user_ids]
            return {
                doc.id: _profile_from_doc(doc)
                for doc in self._db.get_all(refs)
                if doc.exists
            }

        if not user_ids:
            return {}
        return await run_store_call("users.get_profiles", _get)

    async def get_following_ids(self, user_id: str) -> list[str]:
        def _get():
            following = self._col().document(user_id).collection(self.FOLLOWING)
            return [doc.id for doc in following.stream()]

        return await run_store_call("users.get_following_ids", _get)

    async def get_bookmark_ids(self, user_id: str) -> list[str]:
        def _get():
            doc = self._col().document(user_id).get()
            if not doc.exists:
                return []
            ids = (doc.to_dict() or {}).get("bookmarks")
            if not isinstance(ids, list):
                return []
            return list(dict.fromkeys(str(i) for i in ids if i))

        return await run_store_call("users.get_bookmark_ids", _get)
