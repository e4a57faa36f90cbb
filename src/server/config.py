# -*- coding: utf-8 -*-
"""
全局配置

文件功能:
    - 集中定义导出流程的默认参数（目标节点、超时、导出数量、输出文件）。
    - 支持通过环境变量覆盖默认值，并在构造时做基本校验。

公开接口:
    - 常量 TARGET_HOST / REQUEST_TIMEOUT / TOP_PEERS / OUTPUT_FILE / API_HOST / API_PORT
    - 类 ExportConfig(BaseModel): 一次导出所需的全部参数。
    - 函数 load_config(**overrides) -> ExportConfig
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# 目标节点的 RPC 地址（可以带或不带 http 前缀）
TARGET_HOST = "localhost:26657"
# 请求超时（秒）
REQUEST_TIMEOUT = 30
# 导出的前 N 个节点
TOP_PEERS = 5
# 结果文件，相对路径基于当前工作目录
OUTPUT_FILE = "peers.txt"

API_HOST = "localhost"
API_PORT = 1234

_ENV_KEYS = {
    "host": "NETINFO_TARGET_HOST",
    "timeout": "NETINFO_TIMEOUT",
    "top_n": "NETINFO_TOP_PEERS",
    "output_path": "NETINFO_OUTPUT_FILE",
}


class ExportConfig(BaseModel):
    """一次导出流程的参数，作为值传入流水线"""
    model_config = ConfigDict(frozen=True)

    host: str = Field(default=TARGET_HOST, min_length=1)
    timeout: float = Field(default=REQUEST_TIMEOUT, gt=0)
    output_path: str = Field(default=OUTPUT_FILE, min_length=1)
    top_n: int = Field(default=TOP_PEERS, ge=0)


def load_config(**overrides: Any) -> ExportConfig:
    """
    按 "默认值 < 环境变量 < 显式参数" 的优先级构造配置。

    值为 None 的覆盖项会被忽略，方便直接传入命令行参数。
    校验失败时抛出 pydantic.ValidationError。
    """
    values: dict[str, Any] = {}
    for field, env_key in _ENV_KEYS.items():
        env_value = os.getenv(env_key)
        if env_value:
            values[field] = env_value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ExportConfig(**values)
