# -*- coding: utf-8 -*-

"""
节点排序（Ranker）

文件功能:
    - 计算每个节点的总传输字节数（发送 + 接收）。
    - 按总字节数降序做稳定排序，截取前 N 个。

公开接口:
    - parse_bytes(text) -> tuple[int, ValueError | None]
    - total_bytes(peer) -> int
    - rank_peers(peers, top_n=TOP_PEERS) -> list[RankedPeer]

约定:
    - 字节数按十进制有符号 64 位整数解析，解析失败按 0 计入，不报错。
"""

import re
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from config import TOP_PEERS
from .schemas import Peer, RankedPeer

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# 只接受 ASCII 数字，可选正负号；不接受空白、下划线、小数
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_bytes(text: str) -> Tuple[int, Optional[ValueError]]:
    """
    将字节数文本解析为整数。

    :return: (value, error)；解析失败时 value 为 0，error 为对应的 ValueError
    """
    if not _DECIMAL_RE.fullmatch(text):
        return 0, ValueError(f"无效的字节数: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return 0, ValueError(f"字节数超出 int64 范围: {text!r}")
    return value, None


def total_bytes(peer: Peer) -> int:
    status = peer.connection_status
    sent, send_err = parse_bytes(status.send_monitor.byte_count)
    received, recv_err = parse_bytes(status.recv_monitor.byte_count)
    for err in (send_err, recv_err):
        if err is not None:
            logger.debug(f"节点 {peer.remote_ip} 的字节数按 0 计入: {err}")
    return sent + received


def rank_peers(peers: Sequence[Peer], top_n: int = TOP_PEERS) -> List[RankedPeer]:
    """
    按总字节数降序排序，总数相同的节点保持输入顺序。

    :param peers: 解码后的节点列表
    :param top_n: 截取数量，实际数量为 min(top_n, len(peers))
    """
    scored = [(peer, total_bytes(peer)) for peer in peers]
    # list.sort 是稳定排序，reverse=True 时相等元素仍保持原有顺序
    scored.sort(key=lambda item: item[1], reverse=True)
    count = min(max(top_n, 0), len(scored))
    return [
        RankedPeer(peer=peer, total_bytes=total, rank=idx + 1)
        for idx, (peer, total) in enumerate(scored[:count])
    ]
