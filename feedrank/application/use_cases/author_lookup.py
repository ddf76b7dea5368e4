from __future__ import annotations

from dataclasses import replace

from feedrank.domain.entities import AuthorProfile, Post
from feedrank.domain.repositories.user_repository import UserRepository


def with_author(post: Post, profile: AuthorProfile | None) -> Post:
    """작성자 표시 정보를 채운 새 Post. 프로필이 없으면 기본값(Anonim)."""
    profile = profile or AuthorProfile()
    return replace(
        post,
        author_name=profile.display_name,
        author_username=profile.username,
        author_avatar=profile.photo_url,
    )


async def decorate_authors(posts: list[Post], user_repo: UserRepository) -> list[Post]:
    """게시물 목록의 작성자 정보를 한 번의 일괄 조회로 채운다."""
    author_ids = sorted({p.author_id for p in posts if p.author_id})
    profiles = await user_repo.get_profiles(author_ids) if author_ids else {}
    return [with_author(p, profiles.get(p.author_id or "")) for p in posts]
