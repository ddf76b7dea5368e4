"""Feed Ranking Service: 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. Firebase Firestore 초기화
3. 의존성 컨테이너 조립
4. 카테고리 시드 데이터
5. 스케줄러 시작 (댓글 수 동기화)
6. 웹 서버 시작
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import uvicorn

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, str(Path(__file__).parent))

from feedrank.application.use_cases.scheduler import Orchestrator
from feedrank.domain.entities import Category
from feedrank.domain.exceptions import StoreUnavailableError
from feedrank.domain.value_objects.feed_request import FeedRequest
from feedrank.infrastructure.config.container import Container
from feedrank.infrastructure.config.settings import AppConfig, Settings, load_app_config
from feedrank.infrastructure.database.firebase_client import init_firebase
from feedrank.presentation.web.app import create_app
from feedrank.presentation.web.routes.api import post_to_json

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    Path("logs").mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("logs/app.log", encoding="utf-8"),
        ],
    )


def build_container(settings: Settings, config: AppConfig) -> Container:
    db = init_firebase(
        credential_path=settings.firebase_credential_path,
        project_id=settings.firebase_project_id or None,
    )
    return Container(settings=settings, app_config=config, firestore_db=db)


async def seed_categories(container: Container, config: AppConfig) -> None:
    """YAML에 정의된 카테고리를 Firestore에 시드."""
    for cat_cfg in config.categories:
        await container.category_repo.upsert(
            Category(name=cat_cfg.name, label=cat_cfg.label, color=cat_cfg.color)
        )
    logger.info(f"카테고리 {len(config.categories)}개 시드 완료")


async def run_server(
    settings: Settings,
    config: AppConfig,
    no_scheduler: bool = False,
) -> None:
    """메인 서버 실행."""
    container = build_container(settings, config)
    await seed_categories(container, config)

    orchestrator = None
    if config.scheduler.enabled and not no_scheduler:
        orchestrator = Orchestrator(container)
        orchestrator.setup_jobs()
        orchestrator.start()

    app = create_app(container)
    server_config = uvicorn.Config(
        app,
        host=config.web.host,
        port=config.web.port,
        log_level="info",
    )
    server = uvicorn.Server(server_config)

    logger.info(
        f"서버 시작: http://{config.web.host}:{config.web.port} "
        f"(스케줄러: {'ON' if orchestrator else 'OFF'})"
    )

    try:
        await server.serve()
    finally:
        if orchestrator:
            orchestrator.stop()


async def run_popular(settings: Settings, config: AppConfig, limit: int, category: str | None) -> int:
    """인기 게시물을 계산해 JSON으로 출력."""
    container = build_container(settings, config)
    try:
        posts = await container.popular_posts_use_case().execute(
            FeedRequest(limit=limit, category=category)
        )
    except StoreUnavailableError as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1
    print(json.dumps([post_to_json(p) for p in posts], ensure_ascii=False, indent=2))
    return 0


async def run_sync_comments(settings: Settings, config: AppConfig) -> int:
    """댓글 수 동기화를 즉시 1회 실행."""
    container = build_container(settings, config)
    try:
        stats = await container.sync_comment_counts_use_case().execute()
    except StoreUnavailableError as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1
    print(f"확인 {stats['checked']}건, 수정 {stats['updated']}건")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Feed Ranking Service")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    serve_parser = subparsers.add_parser("serve", help="서버 시작 (API + 스케줄러)")
    serve_parser.add_argument("--no-scheduler", action="store_true", help="스케줄러 없이 시작")

    popular_parser = subparsers.add_parser("popular", help="인기 게시물 출력")
    popular_parser.add_argument("--limit", type=int, default=None, help="가져올 게시물 수")
    popular_parser.add_argument("--category", default=None, help="카테고리 (기본: all)")

    subparsers.add_parser("sync-comments", help="댓글 수 즉시 동기화")

    args = parser.parse_args()

    setup_logging()
    settings = Settings()
    config = load_app_config()

    if args.command == "serve":
        asyncio.run(run_server(settings, config, args.no_scheduler))
    elif args.command == "popular":
        limit = args.limit if args.limit is not None else config.ranking.default_limit
        if limit <= 0:
            parser.error("--limit은 양수여야 합니다")
        sys.exit(asyncio.run(run_popular(settings, config, limit, args.category)))
    elif args.command == "sync-comments":
        sys.exit(asyncio.run(run_sync_comments(settings, config)))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
