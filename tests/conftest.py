import json
from typing import Callable, List

import httpx
import pytest

from sto_trace.services import tracking_client
from sto_trace.services.tracking_client import TrackingClient

APP_KEY = "CAKtestKey"
APP_SECRET = "testSecret123"
FROM_CODE = "CAKtestKey"


def trace_body(waybills=None, *, success="true", need_retry="false", **extra) -> dict:
    body = {
        "success": success,
        "errorCode": extra.pop("errorCode", ""),
        "errorMsg": extra.pop("errorMsg", ""),
        "needRetry": need_retry,
        "requestId": extra.pop("requestId", "req-1"),
        "expInfo": "",
        "data": {wb: [{"waybillNo": wb, "opTime": "2024-05-01 10:00:00", "scanType": "收件"}] for wb in (waybills or [])},
    }
    body.update(extra)
    return body


@pytest.fixture
def sleeps(monkeypatch) -> List[float]:
    """记录退避等待而不真正等待"""
    calls: List[float] = []
    monkeypatch.setattr(tracking_client.time, "sleep", lambda seconds: calls.append(seconds))
    return calls


@pytest.fixture
def make_client() -> Callable[..., TrackingClient]:
    clients: List[httpx.Client] = []

    def _make(handler, **kwargs) -> TrackingClient:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http)
        return TrackingClient(APP_KEY, APP_SECRET, FROM_CODE, http_client=http, **kwargs)

    yield _make
    for http in clients:
        http.close()


def json_response(body: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(body, ensure_ascii=False).encode("utf-8"))
