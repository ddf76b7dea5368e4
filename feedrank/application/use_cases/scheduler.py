"""스케줄러 오케스트레이션.

APScheduler를 사용해 정기 유지보수 작업(댓글 수 동기화)을 실행한다.
"""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from feedrank.domain.exceptions import StoreUnavailableError
from feedrank.infrastructure.config.container import Container

logger = logging.getLogger(__name__)


class Orchestrator:
    """스케줄 기반 작업 오케스트레이터."""

    def __init__(self, container: Container):
        self._c = container
        self._tz = ZoneInfo(container.config.timezone)
        self.scheduler = AsyncIOScheduler(timezone=self._tz)

    def setup_jobs(self) -> None:
        """모든 정기 작업을 등록."""
        sync_time = self._c.config.scheduler.comment_sync_time
        hour, minute = map(int, sync_time.split(":"))
        self.scheduler.add_job(
            self._run_comment_sync,
            trigger=CronTrigger(hour=hour, minute=minute),
            id="sync_comment_counts",
            name="Sync Comment Counts",
            max_instances=1,
            misfire_grace_time=600,
        )
        logger.info(f"댓글 수 동기화 등록: 매일 {sync_time}")

    def start(self) -> None:
        self.scheduler.start()
        logger.info("스케줄러 시작됨")

    def stop(self) -> None:
        self.scheduler.shutdown(wait=False)
        logger.info("스케줄러 종료됨")

    # ─── 작업 실행 함수 ───

    async def _run_comment_sync(self) -> None:
        logger.info("[scheduler] 댓글 수 동기화 시작")
        try:
            stats = await self._c.sync_comment_counts_use_case().execute()
            logger.info(f"[scheduler] 댓글 수 동기화 완료: {stats}")
        except StoreUnavailableError as e:
            logger.error(f"[scheduler] 저장소 오류로 동기화 실패: {e}")
        except Exception as e:
            logger.exception(f"[scheduler] 댓글 수 동기화 오류: {e}")
