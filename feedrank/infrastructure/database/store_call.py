"""Firestore 동기 SDK 호출을 워커 스레드에서 실행하고 오류를 도메인 예외로 바꾼다."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, TypeVar

from google.api_core.exceptions import GoogleAPIError

from feedrank.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_store_call(operation: str, fn: Callable[[], T]) -> T:
    try:
        return await asyncio.to_thread(fn)
    except GoogleAPIError as e:
        logger.error(f"Firestore 오류 [{operation}]: {e}")
        raise StoreUnavailableError(operation, str(e)) from e
