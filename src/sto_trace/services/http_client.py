"""HTTP客户端服务"""

import logging
from typing import Optional, Dict
import httpx

from ..exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    """申通网关 HTTP客户端

    包装 httpx.Client。外部传入的 session 由调用方负责关闭。
    """

    def __init__(self, timeout: float = 30.0, session: Optional[httpx.Client] = None):
        self.timeout = timeout
        self.session: Optional[httpx.Client] = session
        self._owns_session = session is None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        self.create_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_session()

    def create_session(self):
        """创建HTTP会话"""
        if self._closed:
            raise TransportError("HTTP session is closed")
        if self.session is not None:
            return
        self.session = httpx.Client(
            timeout=self.timeout,
            follow_redirects=True
        )
        self._owns_session = True

    def close_session(self):
        """关闭HTTP会话"""
        if self.session is not None and self._owns_session:
            self.session.close()
            self.session = None
            self._closed = True

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """GET请求，读取完整响应体；不检查状态码

        会话关闭后不再重建，直接抛出 TransportError。
        """
        if self.session is None:
            self.create_session()
        assert self.session is not None  # 类型保证
        try:
            logger.debug(f"发送GET请求: {url}")
            response = self.session.get(url, headers=headers)
            response.read()
            logger.debug(f"响应状态: {response.status_code}")
            return response
        except httpx.RequestError as e:
            logger.error(f"请求错误: {e}")
            raise TransportError(f"request failed: {e}") from e
