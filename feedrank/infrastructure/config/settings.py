from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings


# ──────────────────────────────────────────
# 환경변수 기반 시크릿 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    # Firebase
    firebase_credential_path: str = "firebase-service-account.json"
    firebase_project_id: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class RankingConfig:
    def __init__(self, data: dict[str, Any]):
        self.page_size: int = data.get("page_size", 100)
        # 카테고리 필터 시 자격 통과 후보가 줄어드므로 더 많이 가져온다
        self.category_page_size: int = data.get("category_page_size", 150)
        self.max_candidates: int = data.get("max_candidates", 600)
        self.default_limit: int = data.get("default_limit", 15)


class FeedsConfig:
    def __init__(self, data: dict[str, Any]):
        self.recent_default_limit: int = data.get("recent_default_limit", 10)
        self.following_default_limit: int = data.get("following_default_limit", 20)
        self.user_posts_default_limit: int = data.get("user_posts_default_limit", 20)


class CategoryConfig:
    def __init__(self, data: dict[str, Any]):
        self.name: str = data["name"]
        self.label: str = data.get("label", data["name"])
        self.color: str = data.get("color", "#888888")


DEFAULT_CATEGORIES = [
    "Yazılım",
    "Donanım",
    "Siber Güvenlik",
    "Python",
    "Yapay Zeka",
    "Mobil",
    "Web",
    "Oyun",
    "Veri Bilimi",
    "Diğer",
]


class WebConfig:
    def __init__(self, data: dict[str, Any]):
        self.host: str = data.get("host", "0.0.0.0")
        self.port: int = data.get("port", 8000)


class SchedulerConfig:
    def __init__(self, data: dict[str, Any]):
        self.enabled: bool = data.get("enabled", True)
        self.comment_sync_time: str = data.get("comment_sync_time", "04:00")


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("app", {}).get("name", "Feed Ranking")
        self.timezone: str = data.get("app", {}).get("timezone", "Europe/Istanbul")

        self.ranking = RankingConfig(data.get("ranking", {}))
        self.feeds = FeedsConfig(data.get("feeds", {}))

        raw_categories = data.get("categories") or [{"name": n} for n in DEFAULT_CATEGORIES]
        # 'all'은 필터 없음을 뜻하는 예약값
        self.categories: list[CategoryConfig] = [
            CategoryConfig(c) for c in raw_categories if c.get("name") != "all"
        ]

        self.web = WebConfig(data.get("web", {}))
        self.scheduler = SchedulerConfig(data.get("scheduler", {}))


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
