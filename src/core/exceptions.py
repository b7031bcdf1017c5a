"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class PriceScraperException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 외부 쇼핑 검색 API 관련 예외
class CollaboratorException(PriceScraperException):
    """쇼핑 검색 API 호출 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "COLLABORATOR_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "COLLABORATOR_ERROR", details)


class MissingCredentialException(CollaboratorException):
    """API 키 미설정"""
    def __init__(self, setting_name: str = "serpapi_api_key", details: Optional[dict[str, Any]] = None):
        message = f"Shopping search credential is not configured ({setting_name})"
        super().__init__(message, "MISSING_CREDENTIAL", details or {"setting": setting_name})


class NetworkTimeoutException(CollaboratorException):
    """네트워크 타임아웃 예외"""
    def __init__(self, operation: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Network timeout during '{operation}' after {timeout_s}s"
        super().__init__(message, "NETWORK_TIMEOUT",
                        details or {"operation": operation, "timeout_s": timeout_s})


class CollaboratorHTTPException(CollaboratorException):
    """비정상 HTTP 응답 (전송 실패 포함)"""
    def __init__(self, status_code: int, reason: str = "", details: Optional[dict[str, Any]] = None):
        if status_code:
            message = f"Shopping search returned HTTP {status_code}"
        else:
            message = "Shopping search request failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "COLLABORATOR_HTTP_ERROR",
                        details or {"status_code": status_code, "reason": reason})


class MalformedResponseException(CollaboratorException):
    """응답 JSON 파싱/구조 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Malformed shopping search response: {reason}"
        super().__init__(message, "MALFORMED_RESPONSE", details or {"reason": reason})


# 상품 목록 관련 예외
class RegistryException(PriceScraperException):
    """상품 목록 관련 예외"""
    def __init__(self, message: str, error_code: str = "REGISTRY_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "REGISTRY_ERROR", details)


class DuplicateProductException(RegistryException):
    """이미 등록된 상품명"""
    def __init__(self, name: str, details: Optional[dict[str, Any]] = None):
        message = f"Product already registered: {name}"
        super().__init__(message, "DUPLICATE_PRODUCT", details or {"name": name})


# 유효성 검증 관련 예외
class ValidationException(PriceScraperException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidProductNameException(ValidationException):
    """유효하지 않은 상품명"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("name", reason, details)
