# -*- coding: utf-8 -*-
"""
后端 API 服务器

文件功能:
    - 提供基于 FastAPI 的运维接口，按需触发一次节点导出或预览排序结果。
    - 服务端不会因致命错误退出，失败以 success=False 与错误类型返回。

公开接口:
    - GET /api/config: 获取默认导出参数。
    - GET /api/peers/top: 预览前 N 个节点（不写文件）。
    - POST /api/peers/export: 执行一次完整导出并写入结果文件。
    - GET /api/status: 获取最近一次导出结果。
"""

from typing import Dict, Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from config import API_HOST, API_PORT, ExportConfig, load_config
from workers.export_coordinator import ExportCoordinator
from workers.peer_writer import peer_address
from workers.schemas import ExportResult

# --- 应用和状态管理 ---

app = FastAPI(
    title="CometBFT 节点导出后端",
    description="按传输字节数选出前 N 个对等节点并导出地址列表",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AppState:
    """管理应用程序的全局状态"""
    def __init__(self):
        self.config: ExportConfig = load_config()
        self.last_result: Optional[ExportResult] = None


state = AppState()

# --- Pydantic 模型 ---

class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Optional[Dict] = None


class ExportRequest(BaseModel):
    """导出请求，未提供的字段沿用默认配置；输出路径不允许通过接口修改"""
    host: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    top_n: Optional[int] = Field(default=None, ge=0)


def _result_data(result: ExportResult) -> Dict:
    return {
        "fatal_kind": result.fatal_kind.value if result.fatal_kind else None,
        "output_path": result.output_path,
        "content": result.content,
        "peers": [
            {
                "rank": item.rank,
                "address": peer_address(item),
                "total_bytes": item.total_bytes,
                "remote_ip": item.peer.remote_ip,
                "moniker": item.peer.node_info.moniker,
                "network": item.peer.node_info.network,
                "is_outbound": item.peer.is_outbound,
            }
            for item in result.peers
        ],
    }


def _to_response(result: ExportResult) -> ApiResponse:
    return ApiResponse(success=result.success, message=result.message, data=_result_data(result))

# --- API Endpoints ---

@app.get("/api/config", summary="获取默认导出参数")
def get_config():
    return state.config.model_dump()


@app.get("/api/peers/top", response_model=ApiResponse, summary="预览前 N 个节点")
def preview_top_peers(limit: Optional[int] = Query(default=None, ge=0)):
    config = state.config
    if limit is not None:
        config = config.model_copy(update={"top_n": limit})
    result = ExportCoordinator().preview(config)
    return _to_response(result)


@app.post("/api/peers/export", response_model=ApiResponse, summary="导出节点列表")
def export_peers(request: Optional[ExportRequest] = None):
    overrides = request.model_dump(exclude_none=True) if request else {}
    try:
        config = ExportConfig(**{**state.config.model_dump(), **overrides})
    except ValidationError as e:
        return ApiResponse(success=False, message=f"配置无效: {e}")

    logger.info(f"收到导出请求，目标节点: {config.host}")
    result = ExportCoordinator().execute_export(config)
    state.last_result = result
    return _to_response(result)


@app.get("/api/status", response_model=ApiResponse, summary="获取最近一次导出结果")
def get_status():
    if state.last_result is None:
        return ApiResponse(success=False, message="尚未执行导出。")
    return _to_response(state.last_result)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT, reload=False)
