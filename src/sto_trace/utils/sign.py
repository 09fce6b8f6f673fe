"""签名与请求参数工具"""

import base64
import hashlib
import urllib.parse
from typing import Dict

TO_APPKEY = "sto_trace_query"
TO_CODE = "sto_trace_query"
API_NAME = "STO_TRACE_QUERY_COMMON"


def make_data_digest(content: bytes, app_secret: str) -> str:
    """生成data_digest: base64(md5(content + appSecret))"""
    digest = hashlib.md5(content + app_secret.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def build_query_params(content: bytes, data_digest: str, app_key: str, from_code: str) -> Dict[str, str]:
    """构建开放平台公共请求参数"""
    return {
        "content": content.decode("utf-8"),
        "data_digest": data_digest,
        "from_appkey": app_key,
        "from_code": from_code,
        "to_appkey": TO_APPKEY,
        "to_code": TO_CODE,
        "api_name": API_NAME,
    }


def build_request_url(base_url: str, params: Dict[str, str]) -> str:
    """拼接完整URL，参数按表单规则编码"""
    return f"{base_url}?{urllib.parse.urlencode(params)}"
