"""인기 게시물 점수 계산 및 랭킹.

popularity = engagement × time_factor × quality_bonus

모든 함수는 순수 함수이며, 평가 시각(now)만 외부에서 주입받는다.
점수는 저장하지 않고 호출마다 다시 계산한다.
"""

from __future__ import annotations

from datetime import datetime, timezone

from feedrank.domain.entities import Post, ScoredPost

LIKE_WEIGHT = 1.0
COMMENT_WEIGHT = 2.5
BOOKMARK_WEIGHT = 1.5

# 인기 피드에 들어가기 위한 최소 참여 점수
MIN_ENGAGEMENT_SCORE = 2.0

LONG_CONTENT_LENGTH = 200
LONG_CONTENT_BONUS = 0.1
MEDIA_BONUS = 0.1
TAGS_BONUS = 0.05

# 바이럴 감지 구간: (최대 경과 시간, 최소 시간당 참여, 계수)
_VIRAL_TIERS: tuple[tuple[float, float, float], ...] = (
    (6.0, 2.0, 2.0),
    (12.0, 1.0, 1.8),
)

# 최신성 구간: (최대 경과 일수, 계수)
_RECENCY_TIERS: tuple[tuple[float, float], ...] = (
    (1.0, 1.5),
    (3.0, 1.3),
    (7.0, 1.1),
    (30.0, 1.0),
)

STALE_FACTOR = 0.8


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def engagement_score(post: Post) -> float:
    """좋아요 1.0, 댓글 2.5, 북마크 1.5 가중합."""
    comments = max(post.comments or 0, 0)
    return (
        post.like_count * LIKE_WEIGHT
        + comments * COMMENT_WEIGHT
        + post.bookmark_count * BOOKMARK_WEIGHT
    )


def hours_since(created_at: datetime | None, now: datetime) -> float | None:
    if created_at is None:
        return None
    return (_as_utc(now) - _as_utc(created_at)).total_seconds() / 3600


def time_factor(engagement: float, hours: float | None) -> float:
    """최신성 + 바이럴 계수.

    구간은 위에서부터 평가하며 처음 일치한 구간만 적용된다.
    생성 시각을 알 수 없는 게시물은 가장 오래된 것으로 취급한다.
    """
    if hours is None:
        return STALE_FACTOR

    per_hour = engagement / hours if hours > 0 else 0.0
    for max_hours, min_per_hour, factor in _VIRAL_TIERS:
        if hours <= max_hours and per_hour >= min_per_hour:
            return factor

    days = hours / 24
    for max_days, factor in _RECENCY_TIERS:
        if days <= max_days:
            return factor
    return STALE_FACTOR


def quality_bonus(post: Post) -> float:
    """콘텐츠 품질 보너스 (누적, 최대 1.25)."""
    bonus = 1.0
    if len(post.content or "") >= LONG_CONTENT_LENGTH:
        bonus += LONG_CONTENT_BONUS
    if post.has_media:
        bonus += MEDIA_BONUS
    if post.tags:
        bonus += TAGS_BONUS
    return bonus


def score_post(post: Post, now: datetime) -> ScoredPost:
    engagement = engagement_score(post)
    factor = time_factor(engagement, hours_since(post.created_at, now))
    quality = quality_bonus(post)
    return ScoredPost(
        post=post,
        engagement_score=engagement,
        time_factor=factor,
        quality_bonus=quality,
        popularity_score=engagement * factor * quality,
    )


def is_qualified(post: Post) -> bool:
    return engagement_score(post) >= MIN_ENGAGEMENT_SCORE


def _sort_key(scored: ScoredPost) -> tuple[float, float, str]:
    # 동점이면 최신 게시물 우선, 생성 시각이 없으면 맨 뒤, 마지막으로 ID 순
    created = scored.post.created_at
    created_ts = _as_utc(created).timestamp() if created else float("-inf")
    return (-scored.popularity_score, -created_ts, scored.post.id)


def rank_scored(posts: list[Post], now: datetime) -> list[ScoredPost]:
    """자격 미달 게시물을 제외하고 점수 내림차순으로 정렬된 ScoredPost 목록."""
    scored = [score_post(p, now) for p in posts]
    qualified = [s for s in scored if s.engagement_score >= MIN_ENGAGEMENT_SCORE]
    qualified.sort(key=_sort_key)
    return qualified


def rank_posts(posts: list[Post], limit: int, now: datetime) -> list[Post]:
    """인기 순 상위 limit개 게시물. 파생 점수는 떼어내고 Post만 반환한다."""
    return [s.post for s in rank_scored(posts, now)[:limit]]
