"""Firebase Firestore 클라이언트 초기화.

firebase-admin SDK 기본 앱을 한 번만 초기화하고 Firestore 클라이언트를 캐시한다.
인증 우선순위: 서비스 계정 키 JSON → GOOGLE_APPLICATION_CREDENTIALS / ADC.
"""

from __future__ import annotations

import logging
from pathlib import Path

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)

_db = None


def _load_credential(credential_path: str | None):
    if credential_path and Path(credential_path).exists():
        logger.info(f"서비스 계정 키 사용: {credential_path}")
        return credentials.Certificate(credential_path)
    logger.info("Application Default Credentials 사용")
    return credentials.ApplicationDefault()


def init_firebase(
    credential_path: str | None = None,
    project_id: str | None = None,
):
    """Firebase 기본 앱을 초기화하고 Firestore 클라이언트를 반환.

    이미 초기화된 경우 기존 앱의 클라이언트를 재사용한다.
    """
    global _db

    if _db is not None:
        return _db

    if not firebase_admin._apps:
        options = {"projectId": project_id} if project_id else {}
        firebase_admin.initialize_app(_load_credential(credential_path), options)

    _db = firestore.client()
    logger.info("Firebase Firestore 초기화 완료")
    return _db

