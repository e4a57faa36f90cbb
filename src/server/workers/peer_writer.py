# -*- coding: utf-8 -*-

"""
节点列表写出

将排序后的节点格式化为 nodeID@host:port 列表（逗号分隔），并写入结果文件。
"""

import os
from pathlib import Path
from typing import Sequence, Union

from errors import WriteError
from .schemas import RankedPeer, replace_lone_surrogates

WILDCARD_HOST = "0.0.0.0"
FILE_MODE = 0o644


def peer_address(ranked: RankedPeer) -> str:
    """
    构造 nodeID@listenAddr。

    监听地址中的 0.0.0.0 全部替换为节点实际的 remote_ip；
    其它绑定地址（如 IPv6 的 ::）不做处理。
    """
    peer = ranked.peer
    listen_addr = peer.node_info.listen_addr.replace(WILDCARD_HOST, peer.remote_ip)
    return f"{peer.node_info.node_id}@{listen_addr}"


def format_peer_list(ranked_peers: Sequence[RankedPeer]) -> str:
    """按排名顺序以逗号连接，无结尾逗号、无换行"""
    return ",".join(peer_address(p) for p in ranked_peers)


def write_peer_list(content: str, output_path: Union[str, Path]) -> Path:
    """
    覆盖写入结果文件（新建时权限为 0644，受 umask 影响）。

    内容先编码为 UTF-8 再截断文件，编码失败时原文件保持不变；
    孤立的代理字符替换为 U+FFFD。

    :raises WriteError: 编码或写入失败
    """
    path = Path(output_path)
    try:
        data = replace_lone_surrogates(content).encode("utf-8")
    except UnicodeError as e:
        raise WriteError(f"编码结果内容失败: {e}") from e

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"写入结果文件 {path} 失败: {e}") from e
    return path
