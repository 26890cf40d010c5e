"""Firebase Firestore 클라이언트 초기화.

firebase-admin SDK로 초기화한 뒤 Firestore 클라이언트를 제공한다.
서비스 계정 키 JSON 파일 또는 환경변수 기반 인증.
"""

from __future__ import annotations

import logging
from pathlib import Path

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


def init_firebase(
    credential_path: str | None = None,
    project_id: str | None = None,
):
    """Firebase 앱을 초기화하고 Firestore 클라이언트를 반환.

    Args:
        credential_path: 서비스 계정 키 JSON 파일 경로.
                         None이거나 없는 파일이면 ADC(GOOGLE_APPLICATION_CREDENTIALS) 사용.
        project_id: Firebase 프로젝트 ID (선택).
    """
    if firebase_admin._apps:
        # 이미 초기화됨
        return firestore.client()

    if credential_path and Path(credential_path).exists():
        cred = credentials.Certificate(credential_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {}
    if project_id:
        options["projectId"] = project_id

    firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Firestore 초기화 완료")
    return firestore.client()
