"""数据模型包"""

from .trace import TraceEvent, TraceOrder, TraceQueryRequest, TraceQueryResponse

__all__ = [
    "TraceEvent",
    "TraceOrder",
    "TraceQueryRequest",
    "TraceQueryResponse",
]
