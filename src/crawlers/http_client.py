"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Dict

from curl_cffi.requests import AsyncSession

from src.core.config import settings
from src.core.exceptions import NetworkTimeoutException
from src.core.logging import logger, mask_api_key

# libcurl CURLE_OPERATION_TIMEDOUT
_CURLE_OPERATION_TIMEDOUT = 28


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                headers=self.default_headers(),
                allow_redirects=True,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": settings.http_user_agent,
            "Accept": "application/json",
            "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
        }

    async def get_text(
        self,
        url: str,
        *,
        timeout_s: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[tuple[int, str]]:
        """GET 요청

        Returns:
            (status_code, body) 또는 전송 실패 시 None

        Raises:
            NetworkTimeoutException: 타임아웃
        """
        sess = await self._ensure_session()
        try:
            resp = await sess.get(url, headers=headers, timeout=timeout_s)
            status = getattr(resp, "status_code", 0) or 0
            text = getattr(resp, "text", "") or ""
            return status, text
        except asyncio.TimeoutError:
            raise NetworkTimeoutException("GET", timeout_s)
        except Exception as e:
            if getattr(e, "code", None) == _CURLE_OPERATION_TIMEDOUT:
                raise NetworkTimeoutException("GET", timeout_s) from e
            logger.info(
                f"[HTTP_CLIENT] GET failed: {type(e).__name__}: {mask_api_key(str(e))} "
                f"url={mask_api_key(url)}"
            )
            return None

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.debug(f"[HTTP_CLIENT] close failed: {type(e).__name__}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
