# -*- coding: utf-8 -*-

"""
通用数据模型（schemas）

文件功能:
    - 定义 /net_info 返回体对应的 pydantic 模型（解码后不可变）。
    - 定义排序与导出流程中跨模块使用的模型。

公开接口的 pydantic 模型:
    - NetInfoResponse / NetInfoResult / Peer
    - NodeInfo / ProtocolVersion / NodeInfoOther
    - ConnectionStatus / TransferMonitor / ChannelStatus
    - RankedPeer: 节点及其总传输字节数（发送 + 接收）
    - ExportResult: 导出流程的结果（成功或致命错误类型）

约定:
    - 未知字段忽略；缺失字段及 null（包括顶层和列表元素）取零值（空字符串 / False / 0 / 空列表）。
    - 字符串中孤立的代理字符替换为 U+FFFD。
    - connection_status 内部字段在返回体中是 PascalCase（如 SendMonitor、Bytes），
      这里以别名声明，属性名统一为 snake_case。
"""

import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from errors import FatalKind


_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


def replace_lone_surrogates(text: str) -> str:
    """将孤立的 UTF-16 代理字符替换为 U+FFFD（json.loads 会保留 "\\ud800" 这类转义）"""
    return _SURROGATE_RE.sub("\ufffd", text)


class WireModel(BaseModel):
    """返回体模型的基类：不可变、忽略未知字段、null 视为缺失"""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_wire_values(cls, data: Any) -> Any:
        # null 对象（包括顶层和列表元素）取零值
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                k: replace_lone_surrogates(v) if isinstance(v, str) else v
                for k, v in data.items()
                if v is not None
            }
        return data


class ProtocolVersion(WireModel):
    p2p: str = ""
    block: str = ""
    app: str = ""


class NodeInfoOther(WireModel):
    tx_index: str = ""
    rpc_address: str = ""


class NodeInfo(WireModel):
    """节点身份信息"""
    protocol_version: ProtocolVersion = ProtocolVersion()
    node_id: str = Field(default="", alias="id")
    listen_addr: str = ""
    network: str = ""
    version: str = ""
    channels: str = ""  # 十六进制编码的通道列表
    moniker: str = ""
    other: NodeInfoOther = NodeInfoOther()


class TransferMonitor(WireModel):
    """
    单方向的传输计数快照。

    只有 byte_count（返回体中的 "Bytes"）参与排序，其余字段原样保留。
    """
    start: str = Field(default="", alias="Start")
    byte_count: str = Field(default="", alias="Bytes")
    samples: str = Field(default="", alias="Samples")
    inst_rate: str = Field(default="", alias="InstRate")
    cur_rate: str = Field(default="", alias="CurRate")
    avg_rate: str = Field(default="", alias="AvgRate")
    peak_rate: str = Field(default="", alias="PeakRate")
    bytes_rem: str = Field(default="", alias="BytesRem")
    duration: str = Field(default="", alias="Duration")
    idle: str = Field(default="", alias="Idle")
    time_rem: str = Field(default="", alias="TimeRem")
    progress: int = Field(default=0, alias="Progress")
    active: bool = Field(default=False, alias="Active")


class ChannelStatus(WireModel):
    channel_id: int = Field(default=0, alias="ID")
    send_queue_capacity: str = Field(default="", alias="SendQueueCapacity")
    send_queue_size: str = Field(default="", alias="SendQueueSize")
    priority: str = Field(default="", alias="Priority")
    recently_sent: str = Field(default="", alias="RecentlySent")


class ConnectionStatus(WireModel):
    duration: str = Field(default="", alias="Duration")
    send_monitor: TransferMonitor = Field(default=TransferMonitor(), alias="SendMonitor")
    recv_monitor: TransferMonitor = Field(default=TransferMonitor(), alias="RecvMonitor")
    channels: List[ChannelStatus] = Field(default_factory=list, alias="Channels")


class Peer(WireModel):
    node_info: NodeInfo = NodeInfo()
    is_outbound: bool = False
    connection_status: ConnectionStatus = ConnectionStatus()
    remote_ip: str = ""


class NetInfoResult(WireModel):
    listening: bool = False
    listeners: List[str] = Field(default_factory=list)
    n_peers: str = ""
    peers: List[Peer] = Field(default_factory=list)

    @field_validator("listeners", mode="before")
    @classmethod
    def null_listeners_to_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value


class NetInfoResponse(WireModel):
    """JSON-RPC 外层信封"""
    result: NetInfoResult = NetInfoResult()
    id: Any = None
    jsonrpc: str = ""
    error: Any = None


class RankedPeer(BaseModel):
    """排序后的节点，rank 从 1 开始"""
    model_config = ConfigDict(frozen=True)

    peer: Peer
    total_bytes: int
    rank: int


class ExportResult(BaseModel):
    """导出流程的结果；失败时 fatal_kind 指明致命错误类型"""
    success: bool
    message: str
    fatal_kind: Optional[FatalKind] = None
    peers: List[RankedPeer] = Field(default_factory=list)
    content: str = ""
    output_path: Optional[str] = None
