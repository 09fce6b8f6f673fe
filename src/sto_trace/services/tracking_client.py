"""申通物流轨迹查询客户端"""

import logging
import threading
import time
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError, HTTPStatusError, RetryHintError, StoError, TransportError
from ..models.trace import TraceQueryRequest, TraceQueryResponse
from ..utils.config import Settings, get_settings
from ..utils.sign import build_query_params, build_request_url, make_data_digest
from .http_client import HttpClient

logger = logging.getLogger(__name__)

# 申通开放平台API地址
BASE_URL = "https://cloudinter-linkgateway.sto.cn/gateway/link.do"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
# 网关对未识别的客户端表现不同，必须原样发送
USER_AGENT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


class TrackingClient:
    """申通开放平台轨迹查询客户端

    同一实例可被多个线程共享。调试开关和HTTP客户端由同一把锁保护，
    每次请求在锁内取快照，网络请求本身在锁外执行。

    用法::

        with TrackingClient("appKey", "appSecret", "fromCode") as client:
            resp = client.query_trace(TraceQueryRequest.of("773000000000001"))
            for event in resp.traces_for("773000000000001"):
                print(event.op_time, event.memo)
    """

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        from_code: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        http_client: Optional[httpx.Client] = None,
        base_url: str = BASE_URL,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        self._app_key = app_key
        self._app_secret = app_secret
        self._from_code = from_code
        self._timeout = timeout
        self._max_retries = max_retries
        self._base_url = base_url

        self._lock = threading.Lock()
        self._debug = False
        self._closed = False
        # 未提供自定义HTTP客户端时，创建默认的
        self._http_client = HttpClient(timeout=timeout, session=http_client)
        if http_client is None:
            self._http_client.create_session()
        self._owned_http_client = self._http_client if http_client is None else None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "TrackingClient":
        """根据配置（环境变量 / .env）创建客户端"""
        settings = settings or get_settings()
        client = cls(
            settings.app_key,
            settings.app_secret,
            settings.from_code,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            base_url=settings.base_url,
            **kwargs,
        )
        if settings.debug:
            client.enable_debug()
        return client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """关闭客户端自行创建的HTTP会话，关闭后不能再查询"""
        with self._lock:
            self._closed = True
        if self._owned_http_client is not None:
            self._owned_http_client.close_session()

    @property
    def app_key(self) -> str:
        return self._app_key

    @property
    def app_secret(self) -> str:
        return self._app_secret

    @property
    def from_code(self) -> str:
        return self._from_code

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    @property
    def debug(self) -> bool:
        with self._lock:
            return self._debug

    def enable_debug(self) -> None:
        """开启调试模式"""
        with self._lock:
            self._debug = True

    def disable_debug(self) -> None:
        """关闭调试模式"""
        with self._lock:
            self._debug = False

    def set_http_client(self, http_client: httpx.Client) -> None:
        """替换底层HTTP客户端，调用方负责其生命周期"""
        with self._lock:
            self._http_client = HttpClient(timeout=self._timeout, session=http_client)

    def _snapshot(self) -> Tuple[HttpClient, bool]:
        with self._lock:
            return self._http_client, self._debug

    def query_trace(self, req: TraceQueryRequest) -> TraceQueryResponse:
        """查询物流轨迹

        服务端要求重试 (needRetry=true) 且重试次数耗尽时，返回最后一次响应；
        其他失败在重试耗尽后抛出最后一次的异常。

        Raises:
            ValidationError: 请求参数不合法，不会发起请求
            TransportError: 网络请求失败，或客户端已关闭
            HTTPStatusError: 非200状态码
            DecodeError: 响应体不是合法JSON或结构不符
        """
        req.validate_request()
        if self.closed:
            raise TransportError("client is closed")

        content = req.to_content()
        data_digest = make_data_digest(content, self._app_secret)
        params = build_query_params(content, data_digest, self._app_key, self._from_code)
        request_url = build_request_url(self._base_url, params)

        last_error: Optional[StoError] = None
        for attempt in range(self._max_retries + 1):
            if attempt > 0:
                # 线性退避: 第2次请求前等待1秒，第3次前等待2秒……
                time.sleep(attempt)
                logger.info(f"重试请求 ({attempt}/{self._max_retries})")

            try:
                resp = self._do_request(request_url, content, data_digest)
                if resp.should_retry():
                    raise RetryHintError(resp)
                return resp
            except StoError as e:
                last_error = e
                logger.warning(f"第{attempt + 1}次请求失败: {e}")

        if isinstance(last_error, RetryHintError):
            return last_error.response
        assert last_error is not None
        raise last_error

    def query_trace_by_waybills(self, *waybill_nos: str, order: str = "") -> TraceQueryResponse:
        """按运单号查询物流轨迹"""
        return self.query_trace(TraceQueryRequest.of(*waybill_nos, order=order))

    def _do_request(self, request_url: str, content: bytes, data_digest: str) -> TraceQueryResponse:
        """执行一次HTTP请求"""
        http_client, debug = self._snapshot()
        if debug:
            logger.info(f"Request URL: {request_url}")
            logger.info(f"Content: {content.decode('utf-8')}")
            logger.info(f"Data Digest: {data_digest}")

        response = http_client.get(request_url, headers={"User-Agent": USER_AGENT})
        body = response.text

        if debug:
            logger.info(f"Response Status: {response.status_code}")
            logger.info(f"Response Body: {body}")

        if response.status_code != 200:
            raise HTTPStatusError(response.status_code, body)

        try:
            return TraceQueryResponse.model_validate_json(body)
        except PydanticValidationError as e:
            raise DecodeError(f"unmarshal response failed: {e}", body) from e

