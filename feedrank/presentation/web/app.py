"""FastAPI 웹 애플리케이션 팩토리."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from feedrank.domain.exceptions import StoreUnavailableError
from feedrank.infrastructure.config.container import Container
from feedrank.presentation.web.routes import api

logger = logging.getLogger(__name__)


def create_app(container: Container) -> FastAPI:
    app = FastAPI(title=container.config.name, version="0.1.0")

    # 컨테이너를 앱 state에 저장
    app.state.container = container

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"error": "게시물을 불러오지 못했습니다"})

    app.include_router(api.router, prefix="/api")

    return app
