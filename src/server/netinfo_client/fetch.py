# -*- coding: utf-8 -*-
"""
请求目标节点的 /net_info 接口并返回原始响应体
"""
import requests
from requests.exceptions import RequestException
from loguru import logger

from config import REQUEST_TIMEOUT
from errors import FatalKind, FetchError
from .utils import build_net_info_url


def fetch_net_info(host: str, timeout: float = REQUEST_TIMEOUT) -> bytes:
    """
    对 {host}/net_info 发起一次带超时的 GET 请求，不重试。

    响应在读取完毕（或读取失败）后立即关闭。
    非 2xx 状态码只记录警告，响应体仍交给解码阶段处理。

    :param host: 目标节点地址，可带或不带 http 前缀
    :param timeout: 超时时间（秒）
    :return: 原始响应体
    :raises FetchError: 网络错误（transport）或响应体读取失败（body_read）
    """
    url = build_net_info_url(host)
    try:
        resp = requests.get(url, timeout=timeout, stream=True)
    except RequestException as e:
        raise FetchError(FatalKind.TRANSPORT, f"从目标节点 {host} 获取 net_info 失败: {e}") from e

    with resp:
        if not (200 <= resp.status_code < 300):
            logger.warning(f"{url} 返回非成功状态码: {resp.status_code}")
        try:
            body = resp.content
        except RequestException as e:
            raise FetchError(FatalKind.BODY_READ, f"读取响应体失败: {e}") from e

    logger.debug(f"已从 {url} 读取 {len(body)} 字节")
    return body
