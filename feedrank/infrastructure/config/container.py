"""의존성 주입 컨테이너.

모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
이 컨테이너가 설정에 따라 구체 구현을 생성하고 유즈케이스에 주입한다.
"""

from __future__ import annotations

from feedrank.application.use_cases.fetch_candidates import CandidateFetcher
from feedrank.application.use_cases.get_bookmarked_posts import GetBookmarkedPostsUseCase
from feedrank.application.use_cases.get_following_posts import GetFollowingPostsUseCase
from feedrank.application.use_cases.get_popular_posts import GetPopularPostsUseCase
from feedrank.application.use_cases.get_post import GetPostUseCase
from feedrank.application.use_cases.get_recent_posts import GetRecentPostsUseCase
from feedrank.application.use_cases.get_user_posts import GetUserPostsUseCase
from feedrank.application.use_cases.sync_comment_counts import SyncCommentCountsUseCase
from feedrank.domain.repositories.category_repository import CategoryRepository
from feedrank.domain.repositories.post_repository import PostRepository
from feedrank.domain.repositories.user_repository import UserRepository
from feedrank.infrastructure.config.settings import AppConfig, Settings
from feedrank.infrastructure.database.repositories.category_repo import FirestoreCategoryRepository
from feedrank.infrastructure.database.repositories.post_repo import FirestorePostRepository
from feedrank.infrastructure.database.repositories.user_repo import FirestoreUserRepository


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        firestore_db=None,
        post_repo: PostRepository | None = None,
        user_repo: UserRepository | None = None,
        category_repo: CategoryRepository | None = None,
    ):
        self.settings = settings
        self.config = app_config

        # ─── Repositories (Firebase Firestore) ───
        self.post_repo = post_repo if post_repo is not None else FirestorePostRepository(firestore_db)
        self.user_repo = user_repo if user_repo is not None else FirestoreUserRepository(firestore_db)
        self.category_repo = (
            category_repo if category_repo is not None else FirestoreCategoryRepository(firestore_db)
        )

        ranking = app_config.ranking
        self.candidate_fetcher = CandidateFetcher(
            self.post_repo,
            page_size=ranking.page_size,
            category_page_size=ranking.category_page_size,
            max_candidates=ranking.max_candidates,
        )

    # ─── Use Case 팩토리 ───

    def popular_posts_use_case(self) -> GetPopularPostsUseCase:
        return GetPopularPostsUseCase(fetcher=self.candidate_fetcher, user_repo=self.user_repo)

    def recent_posts_use_case(self) -> GetRecentPostsUseCase:
        return GetRecentPostsUseCase(post_repo=self.post_repo, user_repo=self.user_repo)

    def following_posts_use_case(self) -> GetFollowingPostsUseCase:
        return GetFollowingPostsUseCase(post_repo=self.post_repo, user_repo=self.user_repo)

    def post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(post_repo=self.post_repo, user_repo=self.user_repo)

    def user_posts_use_case(self) -> GetUserPostsUseCase:
        return GetUserPostsUseCase(post_repo=self.post_repo, user_repo=self.user_repo)

    def bookmarked_posts_use_case(self) -> GetBookmarkedPostsUseCase:
        return GetBookmarkedPostsUseCase(post_repo=self.post_repo, user_repo=self.user_repo)

    def sync_comment_counts_use_case(self) -> SyncCommentCountsUseCase:
        return SyncCommentCountsUseCase(post_repo=self.post_repo)
