"""服务层包"""

from .http_client import HttpClient
from .tracking_client import TrackingClient

__all__ = ["HttpClient", "TrackingClient"]
