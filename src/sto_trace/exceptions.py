"""异常定义"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.trace import TraceQueryResponse


class StoError(Exception):
    """申通客户端异常基类"""


class ValidationError(StoError):
    """请求参数校验失败，不会发送请求，也不会重试"""


class TransportError(StoError):
    """网络或连接失败"""


class HTTPStatusError(StoError):
    """接口返回非200状态码"""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API returned non-200 status code: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(StoError):
    """响应体无法解析"""

    def __init__(self, message: str, body: str = ""):
        super().__init__(f"{message}, body: {body}")
        self.body = body


class RetryHintError(StoError):
    """服务端要求重试 (needRetry=true)"""

    def __init__(self, response: "TraceQueryResponse"):
        super().__init__(
            f"server requested retry: errorCode={response.error_code}, errorMsg={response.error_msg}"
        )
        self.response = response
