import pytest
from unittest.mock import AsyncMock

from feedrank.application.use_cases.fetch_candidates import CandidateFetcher
from feedrank.application.use_cases.get_popular_posts import GetPopularPostsUseCase
from feedrank.domain.exceptions import StoreUnavailableError
from feedrank.domain.value_objects.feed_request import FeedRequest
from tests.stubs import FakePostRepository, make_post


def _use_case(posts, user_repo):
    return GetPopularPostsUseCase(CandidateFetcher(FakePostRepository(posts)), user_repo)


@pytest.mark.asyncio
async def test_ranks_viral_post_above_older_post(now, user_repo):
    posts = [
        make_post("A", hours_ago=48, likes=10),
        make_post("B", hours_ago=3, comments=4),
        make_post("C", hours_ago=1, likes=1),
    ]
    result = await _use_case(posts, user_repo).execute(FeedRequest(limit=15, now=now))

    assert [p.id for p in result] == ["B", "A"]


@pytest.mark.asyncio
async def test_returns_exactly_limit_posts(now, user_repo):
    posts = [make_post(f"p{n}", likes=n) for n in range(2, 22)]
    result = await _use_case(posts, user_repo).execute(FeedRequest(limit=5, now=now))

    assert [p.id for p in result] == ["p21", "p20", "p19", "p18", "p17"]


@pytest.mark.asyncio
async def test_category_request_only_returns_that_category(now, user_repo):
    posts = [make_post(f"y{i}", hours_ago=i + 1, likes=5, category="Yazılım") for i in range(5)]
    posts += [make_post(f"o{i}", hours_ago=i + 1, likes=50, category="Oyun") for i in range(5)]
    result = await _use_case(posts, user_repo).execute(
        FeedRequest(limit=15, category="Yazılım", now=now)
    )

    assert len(result) == 5
    assert all(p.category == "Yazılım" for p in result)


@pytest.mark.asyncio
async def test_empty_when_nothing_qualifies(now, user_repo):
    posts = [make_post(f"p{i}", hours_ago=1, likes=1) for i in range(10)]
    result = await _use_case(posts, user_repo).execute(FeedRequest(limit=15, now=now))

    assert result == []
    assert user_repo.get_profiles_calls == []


@pytest.mark.asyncio
async def test_decorates_authors_with_one_batch_lookup(now, user_repo):
    posts = [
        make_post("known", hours_ago=5, likes=20, author_id="u-author"),
        make_post("ghost", hours_ago=5, likes=10, author_id="u-missing"),
    ]
    result = await _use_case(posts, user_repo).execute(FeedRequest(limit=15, now=now))

    assert user_repo.get_profiles_calls == [["u-author", "u-missing"]]
    by_id = {p.id: p for p in result}
    assert by_id["known"].author_name == "Ayşe Yılmaz"
    assert by_id["known"].author_username == "ayse"
    assert by_id["ghost"].author_name == "Anonim"
    assert by_id["ghost"].author_username == "anonim"
    # source snapshots are never mutated
    assert posts[0].author_name == "Anonim"


@pytest.mark.asyncio
async def test_store_unavailable_propagates(now, user_repo):
    fetcher = AsyncMock()
    fetcher.fetch.side_effect = StoreUnavailableError("posts.list_recent")
    use_case = GetPopularPostsUseCase(fetcher, user_repo)

    with pytest.raises(StoreUnavailableError):
        await use_case.execute(FeedRequest(limit=15, now=now))


def test_feed_request_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        FeedRequest(limit=0)


def test_feed_request_normalizes_all_category():
    assert FeedRequest(limit=5, category="all").category_filter is None
    assert FeedRequest(limit=5, category="Web").category_filter == "Web"
