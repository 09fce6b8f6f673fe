"""申通开放平台物流轨迹查询客户端"""

from .exceptions import (
    DecodeError,
    HTTPStatusError,
    RetryHintError,
    StoError,
    TransportError,
    ValidationError,
)
from .models import TraceEvent, TraceOrder, TraceQueryRequest, TraceQueryResponse
from .services.tracking_client import (
    BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    TrackingClient,
)
from .utils.config import Settings, configure_logging, get_settings

__version__ = "1.0.0"

__all__ = [
    "TrackingClient",
    "TraceEvent",
    "TraceOrder",
    "TraceQueryRequest",
    "TraceQueryResponse",
    "StoError",
    "ValidationError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "RetryHintError",
    "Settings",
    "configure_logging",
    "get_settings",
    "BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
