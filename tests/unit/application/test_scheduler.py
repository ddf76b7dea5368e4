from unittest.mock import AsyncMock, MagicMock

import pytest

from feedrank.application.use_cases.scheduler import Orchestrator
from feedrank.domain.exceptions import StoreUnavailableError
from feedrank.infrastructure.config.container import Container
from feedrank.infrastructure.config.settings import AppConfig, Settings
from tests.stubs import FakeCategoryRepository, FakePostRepository, FakeUserRepository


def _container(post_repo) -> Container:
    return Container(
        settings=Settings(),
        app_config=AppConfig({"scheduler": {"comment_sync_time": "03:15"}}),
        post_repo=post_repo,
        user_repo=FakeUserRepository(),
        category_repo=FakeCategoryRepository(),
    )


@pytest.mark.asyncio
async def test_setup_registers_comment_sync_job():
    orchestrator = Orchestrator(_container(FakePostRepository()))
    orchestrator.setup_jobs()

    job = orchestrator.scheduler.get_job("sync_comment_counts")
    assert job is not None
    assert "hour='3'" in str(job.trigger)
    assert "minute='15'" in str(job.trigger)


@pytest.mark.asyncio
async def test_comment_sync_job_logs_store_errors_instead_of_raising():
    repo = MagicMock()
    repo.list_ids = AsyncMock(side_effect=StoreUnavailableError("posts.list_ids"))
    orchestrator = Orchestrator(_container(repo))

    await orchestrator._run_comment_sync()

    repo.list_ids.assert_awaited_once()
