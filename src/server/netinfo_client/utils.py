# -*- coding: utf-8 -*-
"""
net_info 客户端的工具函数
"""

NET_INFO_PATH = "/net_info"


def add_prefix(host: str) -> str:
    """若地址不以 http 开头，则补上 http:// 前缀（不推断 https，不校验端口）"""
    if host.startswith("http"):
        return host
    return f"http://{host}"


def build_net_info_url(host: str) -> str:
    """拼接状态接口路径后再补前缀，例如 localhost:26657 -> http://localhost:26657/net_info"""
    return add_prefix(f"{host.rstrip('/')}{NET_INFO_PATH}")
