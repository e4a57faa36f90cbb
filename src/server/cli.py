# -*- coding: utf-8 -*-
"""
命令行入口

查询一次目标节点的 /net_info，按传输字节数选出前 N 个节点，
并把 nodeID@host:port 列表写入结果文件。

用法::

    python cli.py
    python cli.py --host http://10.0.0.2:26657 --top 10 --output persistent_peers.txt

退出码:
    0  写入成功
    1  致命错误（网络、读取响应体、JSON 解析、写文件）
    2  参数无效
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from config import OUTPUT_FILE, REQUEST_TIMEOUT, TARGET_HOST, TOP_PEERS, load_config
from workers.export_coordinator import ExportCoordinator


def setup_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="top-peers",
        description="按传输字节数导出 CometBFT 节点的前 N 个对等节点地址",
    )
    parser.add_argument("--host", help=f"目标节点 RPC 地址 (默认: {TARGET_HOST})")
    parser.add_argument("--timeout", type=float, help=f"请求超时秒数 (默认: {REQUEST_TIMEOUT})")
    parser.add_argument("--top", type=int, dest="top_n", help=f"导出节点数量 (默认: {TOP_PEERS})")
    parser.add_argument("--output", dest="output_path", help=f"结果文件路径 (默认: {OUTPUT_FILE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(
            host=args.host,
            timeout=args.timeout,
            top_n=args.top_n,
            output_path=args.output_path,
        )
    except ValidationError as e:
        parser.error(f"配置无效: {e}")

    result = ExportCoordinator().execute_export(config)
    if not result.success:
        kind = result.fatal_kind.value if result.fatal_kind else "unknown"
        logger.critical(f"导出失败 [{kind}]: {result.message}")
        return 1

    logger.info(result.message)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
