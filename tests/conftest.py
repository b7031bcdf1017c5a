"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (외부 API 호출 금지)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# settings는 import 시점에 로드되므로 모듈 레벨에서 설정
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("SERPAPI_API_KEY", "test-key")

from src.repositories import ProductRegistry  # noqa: E402
from tests.fakes import FakeHttpClient  # noqa: E402


@pytest.fixture
def registry() -> ProductRegistry:
    return ProductRegistry()


@pytest.fixture
def fake_http_client() -> FakeHttpClient:
    return FakeHttpClient()
