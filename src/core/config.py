"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 외부 쇼핑 검색 API (SerpAPI)
    # NOTE: API 키는 반드시 환경 변수(.env)로 주입합니다. 코드에 기본값을 두지 않습니다.
    serpapi_api_key: str = ""
    serpapi_base_url: str = "https://serpapi.com/search.json"
    serpapi_engine: str = "google_shopping"
    serpapi_category_param: str = "category"

    # HTTP 클라이언트
    http_timeout_s: float = 10.0
    http_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # 가격 조회
    # - resolver_concurrency: 상품별 조회 동시성 (1이면 순차 실행)
    # - api_price_resolve_timeout_s: 요청 전체 예산. 초과 시 남은 상품은 건너뛰고 부분 결과 반환
    resolver_concurrency: int = 1
    api_price_resolve_timeout_s: Optional[float] = 30.0

    # 상품 목록
    # reject: 같은 이름 재등록 시 409, overwrite: 카테고리 덮어쓰기
    registry_duplicate_policy: str = "reject"
    registry_seed_samples: bool = True

    # API
    api_title: str = "Scrapper de Preços"
    api_version: str = "1.0.0"
    api_description: str = "등록된 상품의 최저가를 Google Shopping에서 조회합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("http_timeout_s")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_s must be positive")
        return v

    @field_validator("resolver_concurrency")
    @classmethod
    def validate_resolver_concurrency(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("resolver_concurrency must be positive")
        return v

    @field_validator("api_price_resolve_timeout_s")
    @classmethod
    def validate_resolve_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("api_price_resolve_timeout_s must be positive")
        return v

    @field_validator("registry_duplicate_policy")
    @classmethod
    def validate_duplicate_policy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("reject", "overwrite"):
            raise ValueError("registry_duplicate_policy must be 'reject' or 'overwrite'")
        return v

    @field_validator("serpapi_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("serpapi_base_url must start with http:// or https://")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
