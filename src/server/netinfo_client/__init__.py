# -*- coding: utf-8 -*-
"""
net_info 客户端

负责从目标节点的 RPC 服务获取 /net_info 并解码为 pydantic 模型。

公开接口:
    - 类 NetInfoClient
        - 属性: url
        - 方法: fetch() -> bytes
    - 函数 add_prefix / build_net_info_url / fetch_net_info / decode_net_info
"""
from config import REQUEST_TIMEOUT

from .decode import decode_net_info
from .fetch import fetch_net_info
from .utils import add_prefix, build_net_info_url


class NetInfoClient:
    """封装了对单个节点 /net_info 接口的访问"""

    def __init__(self, host: str, timeout: float = REQUEST_TIMEOUT):
        self.host = host
        self.timeout = timeout

    @property
    def url(self) -> str:
        return build_net_info_url(self.host)

    def fetch(self) -> bytes:
        return fetch_net_info(self.host, timeout=self.timeout)


__all__ = [
    "NetInfoClient",
    "add_prefix",
    "build_net_info_url",
    "decode_net_info",
    "fetch_net_info",
]
