"""工具包"""

from .config import Settings, configure_logging, get_settings, reset_settings
from .sign import build_query_params, build_request_url, make_data_digest

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
    "build_query_params",
    "build_request_url",
    "make_data_digest",
]
