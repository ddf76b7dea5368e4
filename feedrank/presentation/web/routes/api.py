"""REST API 라우트: 피드 조회 및 유지보수 트리거."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from feedrank.domain.entities import Post
from feedrank.domain.value_objects.feed_request import FeedRequest

router = APIRouter(tags=["api"])


def _get_container(request: Request):
    return request.app.state.container


def post_to_json(p: Post) -> dict[str, Any]:
    return {
        "id": p.id,
        "title": p.title,
        "content": p.content,
        "category": p.category,
        "tags": p.tags,
        "imageUrl": p.image_url,
        "images": [{"url": i.url, "position": i.position} for i in p.images],
        "likes": sorted(p.likes),
        "bookmarks": sorted(p.bookmarks),
        "comments": p.comments,
        "views": p.views,
        "status": p.status,
        "authorId": p.author_id,
        "authorName": p.author_name,
        "authorUsername": p.author_username,
        "authorAvatar": p.author_avatar,
        "createdAt": p.created_at.isoformat() if p.created_at else None,
        "updatedAt": p.updated_at.isoformat() if p.updated_at else None,
    }


@router.get("/posts/popular")
async def popular_posts(
    request: Request,
    limit: int | None = Query(None, ge=1, le=100),
    category: str | None = None,
):
    """인기 게시물 피드."""
    c = _get_container(request)
    feed = FeedRequest(limit=limit or c.config.ranking.default_limit, category=category)
    posts = await c.popular_posts_use_case().execute(feed)
    return [post_to_json(p) for p in posts]


@router.get("/posts/recent")
async def recent_posts(
    request: Request,
    limit: int | None = Query(None, ge=1, le=100),
    category: str | None = None,
):
    """최신 게시물 피드."""
    c = _get_container(request)
    feed = FeedRequest(limit=limit or c.config.feeds.recent_default_limit, category=category)
    posts = await c.recent_posts_use_case().execute(feed)
    return [post_to_json(p) for p in posts]


@router.get("/posts/{post_id}")
async def get_post(request: Request, post_id: str):
    c = _get_container(request)
    post = await c.post_use_case().execute(post_id)
    if post is None:
        return JSONResponse(status_code=404, content={"error": "게시물 없음"})
    return post_to_json(post)


@router.get("/users/{user_id}/following-posts")
async def following_posts(
    request: Request,
    user_id: str,
    limit: int | None = Query(None, ge=1, le=100),
    category: str | None = None,
):
    """팔로우하는 사용자들의 게시물 피드."""
    c = _get_container(request)
    try:
        feed = FeedRequest(
            limit=limit or c.config.feeds.following_default_limit,
            category=category,
            viewer_id=user_id,
        )
        posts = await c.following_posts_use_case().execute(feed)
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return [post_to_json(p) for p in posts]


@router.get("/users/{user_id}/posts")
async def user_posts(
    request: Request,
    user_id: str,
    limit: int | None = Query(None, ge=1, le=100),
):
    """작성자 프로필 피드."""
    c = _get_container(request)
    posts = await c.user_posts_use_case().execute(
        user_id, limit or c.config.feeds.user_posts_default_limit
    )
    return [post_to_json(p) for p in posts]


@router.get("/users/{user_id}/bookmarks")
async def bookmarked_posts(request: Request, user_id: str):
    c = _get_container(request)
    posts = await c.bookmarked_posts_use_case().execute(user_id)
    return [post_to_json(p) for p in posts]


@router.get("/categories")
async def categories(request: Request):
    c = _get_container(request)
    cats = await c.category_repo.get_all()
    return [{"name": cat.name, "label": cat.label, "color": cat.color} for cat in cats]


@router.post("/maintenance/sync-comments")
async def trigger_comment_sync(request: Request):
    """수동 댓글 수 동기화 트리거."""
    c = _get_container(request)
    return await c.sync_comment_counts_use_case().execute()
