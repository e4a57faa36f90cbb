# -*- coding: utf-8 -*-
"""
将 /net_info 原始响应体解码为 NetInfoResponse
"""
import json

from pydantic import ValidationError

from errors import DecodeError
from workers.schemas import NetInfoResponse


def decode_net_info(body: bytes | str) -> NetInfoResponse:
    """
    解析 JSON 响应体。

    未知字段忽略，缺失字段及 null 取零值；JSON 本身格式错误（含嵌套过深）、
    顶层不是对象（null 除外）或字段类型不符时抛出 DecodeError。
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:  # 嵌套过深同样视为格式错误
        raise DecodeError(f"解析 JSON 失败: {e}") from e

    try:
        return NetInfoResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"net_info 返回体结构不符: {e}") from e
