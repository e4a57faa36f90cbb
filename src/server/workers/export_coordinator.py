# -*- coding: utf-8 -*-

"""
导出协调器

文件功能:
    - 串联 获取 -> 解码 -> 排序 -> 写出 四个步骤，每步只执行一次。
    - 将致命错误转换为带类型的 ExportResult，由调用方决定是否退出进程。

公开接口:
    - 类 ExportCoordinator:
        - 方法: execute_export(config) -> ExportResult
        - 方法: preview(config) -> ExportResult  (不写文件)
        - 方法: collect_top_peers(config) -> list[RankedPeer]

内部方法:
    - _run_step(): 执行单个步骤
    - _log_summary(): 输出选中节点的摘要

公开接口的 pydantic 模型:
    - ExportResult（见 workers/schemas.py）
"""

from typing import Callable, List, Optional, TypeVar

from loguru import logger

from config import ExportConfig
from errors import ExportError
from netinfo_client import NetInfoClient, decode_net_info
from service.paths import resolve_output_path

from .peer_writer import format_peer_list, write_peer_list
from .ranker import rank_peers
from .schemas import ExportResult, RankedPeer

T = TypeVar("T")

TOTAL_STEPS = 4


class ExportCoordinator:
    """协调一次节点列表导出的类"""

    def __init__(self, progress_callback: Optional[Callable[[str], None]] = None):
        """
        :param progress_callback: 进度回调函数，用于报告导出进度
        """
        self.progress_callback = progress_callback or (lambda x: None)

    def _report_progress(self, message: str) -> None:
        logger.info(message)
        self.progress_callback(message)

    def _run_step(self, step_name: str, step_func: Callable[[], T]) -> T:
        self._report_progress(step_name)
        return step_func()

    def _log_summary(self, ranked: List[RankedPeer]) -> None:
        logger.info(f"Top {len(ranked)} peers by bytes transferred:")
        for item in ranked:
            info = item.peer.node_info
            logger.info(
                f"Peer: {item.peer.remote_ip}, TotalBytes: {item.total_bytes}, "
                f"Moniker: {info.moniker}, Network: {info.network}"
            )

    def collect_top_peers(self, config: ExportConfig) -> List[RankedPeer]:
        """
        执行获取、解码、排序三个步骤。

        :raises ExportError: 获取或解码失败
        """
        client = NetInfoClient(config.host, timeout=config.timeout)

        body = self._run_step(f"[1/{TOTAL_STEPS}] 正在获取 {client.url} ...", client.fetch)
        response = self._run_step(f"[2/{TOTAL_STEPS}] 正在解析 net_info...", lambda: decode_net_info(body))
        if response.error is not None:
            logger.warning(f"net_info 返回了 JSON-RPC 错误: {response.error}")

        peers = response.result.peers
        ranked = self._run_step(
            f"[3/{TOTAL_STEPS}] 正在按传输字节数排序 {len(peers)} 个节点...",
            lambda: rank_peers(peers, config.top_n),
        )
        self._log_summary(ranked)
        return ranked

    def preview(self, config: ExportConfig) -> ExportResult:
        """只获取并排序，不写文件"""
        try:
            ranked = self.collect_top_peers(config)
        except ExportError as e:
            logger.error(f"[{e.kind.value}] {e}")
            return ExportResult(success=False, message=str(e), fatal_kind=e.kind)
        return ExportResult(
            success=True,
            message=f"已选出 {len(ranked)} 个节点",
            peers=ranked,
            content=format_peer_list(ranked),
        )

    def execute_export(self, config: ExportConfig) -> ExportResult:
        """
        执行完整的导出流程：
            1) 获取 /net_info
            2) 解码 JSON
            3) 排序并截取前 N 个
            4) 格式化并覆盖写入结果文件

        任何致命错误都会在后续步骤之前中止流程，
        因此解码失败时已有的结果文件不会被改动。

        :param config: 导出参数
        :return: ExportResult
        """
        try:
            ranked = self.collect_top_peers(config)
            content = format_peer_list(ranked)
            path = resolve_output_path(config.output_path)
            self._run_step(
                f"[4/{TOTAL_STEPS}] 正在写入结果文件 {path}...",
                lambda: write_peer_list(content, path),
            )
        except ExportError as e:
            logger.error(f"[{e.kind.value}] {e}")
            return ExportResult(success=False, message=str(e), fatal_kind=e.kind)

        return ExportResult(
            success=True,
            message=f"已将 {len(ranked)} 个节点写入 {path}",
            peers=ranked,
            content=content,
            output_path=str(path),
        )
