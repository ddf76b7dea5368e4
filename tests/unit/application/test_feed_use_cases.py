import pytest

from feedrank.application.use_cases.get_bookmarked_posts import GetBookmarkedPostsUseCase
from feedrank.application.use_cases.get_following_posts import GetFollowingPostsUseCase
from feedrank.application.use_cases.get_post import GetPostUseCase
from feedrank.application.use_cases.get_recent_posts import GetRecentPostsUseCase
from feedrank.application.use_cases.get_user_posts import GetUserPostsUseCase
from feedrank.application.use_cases.sync_comment_counts import SyncCommentCountsUseCase
from feedrank.domain.entities import AuthorProfile
from feedrank.domain.value_objects.feed_request import FeedRequest
from tests.stubs import FakePostRepository, FakeUserRepository, make_post


# ─── recent feed ───


@pytest.mark.asyncio
async def test_recent_feed_is_newest_first_and_truncated(user_repo):
    repo = FakePostRepository([make_post(f"p{i}", hours_ago=i + 1) for i in range(30)])
    result = await GetRecentPostsUseCase(repo, user_repo).execute(FeedRequest(limit=10))

    assert [p.id for p in result] == [f"p{i}" for i in range(10)]
    assert all(p.author_name == "Ayşe Yılmaz" for p in result)


@pytest.mark.asyncio
async def test_recent_feed_filters_category(user_repo):
    repo = FakePostRepository([
        make_post("a", hours_ago=1, category="Web"),
        make_post("b", hours_ago=2, category="Mobil"),
        make_post("c", hours_ago=3, category="Web"),
    ])
    result = await GetRecentPostsUseCase(repo, user_repo).execute(
        FeedRequest(limit=10, category="Web")
    )

    assert [p.id for p in result] == ["a", "c"]


# ─── following feed ───


@pytest.mark.asyncio
async def test_following_feed_empty_without_followees():
    users = FakeUserRepository(following={"viewer": []})
    repo = FakePostRepository([make_post("p", hours_ago=1)])

    result = await GetFollowingPostsUseCase(repo, users).execute(
        FeedRequest(limit=20, viewer_id="viewer")
    )

    assert result == []
    assert repo.list_by_authors_calls == []


@pytest.mark.asyncio
async def test_following_feed_queries_in_chunks_of_ten():
    followees = [f"u{i}" for i in range(25)]
    users = FakeUserRepository(following={"viewer": followees})
    repo = FakePostRepository([
        make_post(f"p{i}", hours_ago=i + 1, author_id=f"u{i % 25}") for i in range(60)
    ])

    result = await GetFollowingPostsUseCase(repo, users).execute(
        FeedRequest(limit=20, viewer_id="viewer")
    )

    assert [len(c["author_ids"]) for c in repo.list_by_authors_calls] == [10, 10, 5]
    assert all(c["limit"] == 7 for c in repo.list_by_authors_calls)
    created = [p.created_at for p in result]
    assert created == sorted(created, reverse=True)
    assert len(result) == 20
    # unknown authors fall back to the anonymous profile
    assert result[0].author_name == "Anonim"


@pytest.mark.asyncio
async def test_following_feed_skips_inactive_posts():
    users = FakeUserRepository(following={"viewer": ["u1"]})
    hidden = make_post("hidden", hours_ago=1, author_id="u1")
    hidden.status = "inactive"
    repo = FakePostRepository([hidden, make_post("shown", hours_ago=2, author_id="u1")])

    result = await GetFollowingPostsUseCase(repo, users).execute(
        FeedRequest(limit=20, viewer_id="viewer")
    )

    assert [p.id for p in result] == ["shown"]


@pytest.mark.asyncio
async def test_following_feed_requires_viewer():
    use_case = GetFollowingPostsUseCase(FakePostRepository(), FakeUserRepository())
    with pytest.raises(ValueError):
        await use_case.execute(FeedRequest(limit=20))


# ─── single post ───


@pytest.mark.asyncio
async def test_get_post_decorates_author(user_repo):
    repo = FakePostRepository([make_post("p1", hours_ago=1)])
    post = await GetPostUseCase(repo, user_repo).execute("p1")

    assert post is not None
    assert post.author_username == "ayse"
    assert post.author_avatar == "https://cdn/a.png"


@pytest.mark.asyncio
async def test_get_post_missing_returns_none(user_repo):
    assert await GetPostUseCase(FakePostRepository(), user_repo).execute("nope") is None


# ─── author profile feed ───


@pytest.mark.asyncio
async def test_user_posts_newest_first_with_one_profile_lookup(user_repo):
    repo = FakePostRepository([
        make_post("old", hours_ago=48),
        make_post("new", hours_ago=1),
        make_post("other", hours_ago=2, author_id="u-other"),
    ])

    result = await GetUserPostsUseCase(repo, user_repo).execute("u-author")

    assert [p.id for p in result] == ["new", "old"]
    assert all(p.author_username == "ayse" for p in result)
    assert user_repo.get_profile_calls == ["u-author"]


@pytest.mark.asyncio
async def test_user_posts_respects_limit_and_defaults_missing_profile():
    repo = FakePostRepository([make_post(f"p{i}", hours_ago=i + 1, author_id="ghost") for i in range(30)])

    result = await GetUserPostsUseCase(repo, FakeUserRepository()).execute("ghost", limit=20)

    assert len(result) == 20
    assert result[0].id == "p0"
    assert result[0].author_name == "Anonim"


@pytest.mark.asyncio
async def test_user_posts_without_posts_skips_profile_lookup(user_repo):
    assert await GetUserPostsUseCase(FakePostRepository(), user_repo).execute("u-author") == []
    assert user_repo.get_profile_calls == []


# ─── bookmarked posts ───


@pytest.mark.asyncio
async def test_bookmarked_posts_batched_and_newest_first():
    users = FakeUserRepository(
        profiles={"u1": AuthorProfile(display_name="Mehmet", username="mehmet")},
        bookmarks={"reader": ["old", "gone", "new"]},
    )
    repo = FakePostRepository([
        make_post("old", hours_ago=72, author_id="u1"),
        make_post("new", hours_ago=3, author_id="u2"),
        make_post("unrelated", hours_ago=1),
    ])

    result = await GetBookmarkedPostsUseCase(repo, users).execute("reader")

    assert [p.id for p in result] == ["new", "old"]
    assert repo.get_many_calls == [["old", "gone", "new"]]
    assert users.get_profiles_calls == [["u1", "u2"]]
    assert result[1].author_name == "Mehmet"
    assert result[0].author_name == "Anonim"


@pytest.mark.asyncio
async def test_bookmarked_posts_empty_for_unknown_user_or_no_bookmarks():
    users = FakeUserRepository(bookmarks={"reader": []})
    repo = FakePostRepository([make_post("p", hours_ago=1)])
    use_case = GetBookmarkedPostsUseCase(repo, users)

    assert await use_case.execute("reader") == []
    assert await use_case.execute("nobody") == []
    assert repo.get_many_calls == []


# ─── comment count sync ───


@pytest.mark.asyncio
async def test_sync_writes_only_differing_counts():
    repo = FakePostRepository([make_post("a"), make_post("b"), make_post("c")])
    repo.stored_comment_counts = {"a": 3, "b": 1, "c": None}
    repo.actual_comment_counts = {"a": 3, "b": 2, "c": 0}

    stats = await SyncCommentCountsUseCase(repo).execute()

    assert stats == {"checked": 3, "updated": 2}
    assert repo.writes == [("b", 2), ("c", 0)]


@pytest.mark.asyncio
async def test_sync_one_always_writes_actual_count():
    repo = FakePostRepository([make_post("a")])
    repo.stored_comment_counts = {"a": 9}
    repo.actual_comment_counts = {"a": 4}

    assert await SyncCommentCountsUseCase(repo).sync_one("a") == 4
    assert repo.stored_comment_counts["a"] == 4
